import asyncio
import logging
import subprocess

from afsctl.process.interfaces import CommandRunner
from afsctl.process.models import CommandResult


class SubprocessRunner(CommandRunner):
    """Runs external commands as child processes.

    Output is captured and decoded as UTF-8. A command that cannot be
    launched yields a result with `spawn_error` set instead of raising.
    """

    def __init__(self) -> None:
        """Initialize the runner."""
        self._logger = logging.getLogger(__name__)

    async def run(self, argv: list[str]) -> CommandResult:
        """Run a command on the event loop without blocking it.

        Args:
            argv: Command line, first element is the executable

        Returns:
            CommandResult with captured output and exit status
        """
        self._logger.debug('Running %s', argv)
        try:
            process = await asyncio.create_subprocess_exec(
                *argv,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except (OSError, ValueError) as e:
            return self._spawn_failure(argv, e)

        stdout, stderr = await process.communicate()

        return CommandResult(
            argv=argv,
            returncode=process.returncode,
            stdout=self._decode(stdout),
            stderr=self._decode(stderr),
        )

    def run_sync(self, argv: list[str]) -> CommandResult:
        """Run a command and wait for it to exit.

        Args:
            argv: Command line, first element is the executable

        Returns:
            CommandResult with captured output and exit status
        """
        self._logger.debug('Running %s (blocking)', argv)
        try:
            completed = subprocess.run(
                argv,
                check=False,
                capture_output=True,
            )
        except (OSError, ValueError) as e:
            return self._spawn_failure(argv, e)

        return CommandResult(
            argv=argv,
            returncode=completed.returncode,
            stdout=self._decode(completed.stdout),
            stderr=self._decode(completed.stderr),
        )

    def _spawn_failure(
        self,
        argv: list[str],
        error: Exception,
    ) -> CommandResult:
        """Build the result for a command that never started.
        """
        self._logger.error('Failed to run "%s": %s', ' '.join(argv), error)
        return CommandResult(argv=argv, spawn_error=str(error))

    @staticmethod
    def _decode(data: bytes | None) -> str:
        if not data:
            return ''
        return data.decode('utf-8', errors='replace')
