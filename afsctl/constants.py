from enum import StrEnum
from typing import Final


class CommandPaths(StrEnum):
    """Absolute paths of the external tools.
    """

    SYSTEMCTL = '/usr/bin/systemctl'
    FS = '/usr/bin/fs'
    TOKENS = '/usr/bin/tokens'

    # Privilege escalation wrapper
    PKEXEC = '/usr/bin/pkexec'


class SystemctlVerbs(StrEnum):
    """Systemctl subcommands used against the client unit.
    """

    IS_ACTIVE = 'is-active'
    IS_ENABLED = 'is-enabled'
    START = 'start'
    STOP = 'stop'
    ENABLE = 'enable'
    DISABLE = 'disable'


class PollingConfig:
    """Configuration constants for status polling."""

    DEFAULT_UNIT_NAME: Final[str] = 'openafs-client'
    DEFAULT_INTERVAL: Final[float] = 2.0
