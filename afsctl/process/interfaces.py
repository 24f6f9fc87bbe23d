from abc import ABC, abstractmethod

from afsctl.process.models import CommandResult


class CommandRunner(ABC):
    """Abstract interface for running external commands.
    """

    @abstractmethod
    async def run(self, argv: list[str]) -> CommandResult:
        """Run a command without blocking the event loop.
        """

    @abstractmethod
    def run_sync(self, argv: list[str]) -> CommandResult:
        """Run a command and block until it exits.
        """
