from afsctl.models.settings import OpenAFSSettings
from afsctl.constants import SystemctlVerbs


class OpenAFSCommands:
    """Builds the command lines used to query and control the client.
    """

    def __init__(self, settings: OpenAFSSettings | None = None) -> None:
        """Initialize with optional settings, defaults otherwise.
        """
        self._settings = settings or OpenAFSSettings()

    @property
    def unit_name(self) -> str:
        return self._settings.unit_name

    def is_active(self) -> list[str]:
        return self._systemctl(SystemctlVerbs.IS_ACTIVE)

    def is_enabled(self) -> list[str]:
        return self._systemctl(SystemctlVerbs.IS_ENABLED)

    def wscell(self) -> list[str]:
        return [self._settings.fs_path, 'wscell']

    def tokens(self) -> list[str]:
        return [self._settings.tokens_path]

    def start(self) -> list[str]:
        return self._systemctl(SystemctlVerbs.START)

    def stop(self) -> list[str]:
        return self._systemctl(SystemctlVerbs.STOP)

    def set_autostart(self, enabled: bool) -> list[str]:
        """Toggle autostart, the only command run through pkexec.
        """
        verb = SystemctlVerbs.ENABLE if enabled else SystemctlVerbs.DISABLE
        return [self._settings.pkexec_path, *self._systemctl(verb)]

    def _systemctl(self, verb: SystemctlVerbs) -> list[str]:
        return [
            self._settings.systemctl_path,
            verb.value,
            self._settings.unit_name,
        ]
