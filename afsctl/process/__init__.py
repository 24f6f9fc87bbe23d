from afsctl.process.commands import OpenAFSCommands
from afsctl.process.errors import CommandError, NonZeroExitError, SpawnError
from afsctl.process.interfaces import CommandRunner
from afsctl.process.models import CommandResult
from afsctl.process.runner import SubprocessRunner

__all__ = [
    'CommandError',
    'CommandResult',
    'CommandRunner',
    'NonZeroExitError',
    'OpenAFSCommands',
    'SpawnError',
    'SubprocessRunner',
]
