import asyncio

from afsctl.process.commands import OpenAFSCommands
from afsctl.process.interfaces import CommandRunner
from afsctl.process.models import CommandResult

COMMANDS = OpenAFSCommands()

EMPTY_TOKENS_OUTPUT = """\

Tokens held by the Cache Manager:

   --End of list--
"""

TOKENS_OUTPUT = """\

Tokens held by the Cache Manager:

User's (AFS ID 1234) rxkad tokens for example.com [Expires Jan  1 12:00]
User's (AFS ID 5678) rxkad tokens for other.example.org [Expires Feb 14 08:30]
   --End of list--
"""


class ScriptedRunner(CommandRunner):
    """Command runner returning canned results per command line.

    The last scripted result for a command repeats; unscripted commands
    behave like a missing binary.
    """

    def __init__(self) -> None:
        self.calls: list[list[str]] = []
        self._responses: dict[tuple[str, ...], list[CommandResult]] = {}
        self._gates: dict[tuple[str, ...], asyncio.Event] = {}

    def respond(
        self,
        argv: list[str],
        stdout: str = '',
        returncode: int = 0,
        stderr: str = '',
        spawn_error: str | None = None,
    ) -> None:
        result = CommandResult(
            argv=argv,
            returncode=None if spawn_error else returncode,
            stdout=stdout,
            stderr=stderr,
            spawn_error=spawn_error,
        )
        self._responses.setdefault(tuple(argv), []).append(result)

    def forget(self, argv: list[str]) -> None:
        """Drop the scripted results for `argv`.
        """
        self._responses.pop(tuple(argv), None)

    def gate(self, argv: list[str]) -> asyncio.Event:
        """Hold `argv` until the returned event is set.
        """
        event = asyncio.Event()
        self._gates[tuple(argv)] = event
        return event

    def count(self, argv: list[str]) -> int:
        return sum(1 for call in self.calls if call == argv)

    async def run(self, argv: list[str]) -> CommandResult:
        self.calls.append(list(argv))
        gate = self._gates.get(tuple(argv))
        if gate is not None:
            await gate.wait()
        return self._next(argv)

    def run_sync(self, argv: list[str]) -> CommandResult:
        self.calls.append(list(argv))
        return self._next(argv)

    def _next(self, argv: list[str]) -> CommandResult:
        queue = self._responses.get(tuple(argv))
        if not queue:
            return CommandResult(
                argv=argv,
                spawn_error='[Errno 2] No such file or directory',
            )
        if len(queue) > 1:
            return queue.pop(0)
        return queue[0]


def script_running_client(
    runner: ScriptedRunner,
    autostart: str = 'enabled',
) -> None:
    runner.respond(COMMANDS.is_active(), 'active\n')
    runner.respond(COMMANDS.wscell(), 'example.com\n')
    runner.respond(COMMANDS.tokens(), TOKENS_OUTPUT)
    runner.respond(
        COMMANDS.is_enabled(),
        f'{autostart}\n',
        returncode=0 if autostart == 'enabled' else 1,
    )


def script_stopped_client(
    runner: ScriptedRunner,
    autostart: str = 'disabled',
) -> None:
    runner.respond(COMMANDS.is_active(), 'inactive\n', returncode=3)
    runner.respond(COMMANDS.tokens(), EMPTY_TOKENS_OUTPUT)
    runner.respond(
        COMMANDS.is_enabled(),
        f'{autostart}\n',
        returncode=0 if autostart == 'enabled' else 1,
    )
