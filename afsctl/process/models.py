from typing import Self

from pydantic import BaseModel, Field

from afsctl.process.errors import NonZeroExitError, SpawnError


class CommandResult(BaseModel):
    """Outcome of one external command invocation.

    Args:
        argv: Command line that was run
        returncode: Exit status, None if the process never started
        stdout: Captured standard output
        stderr: Captured standard error
        spawn_error: Reason the process could not be launched
    """
    model_config = {'frozen': True}

    argv: list[str] = Field(..., min_length=1)
    returncode: int | None = Field(None)
    stdout: str = Field('')
    stderr: str = Field('')
    spawn_error: str | None = Field(None)

    @property
    def spawned(self) -> bool:
        return self.spawn_error is None

    @property
    def ok(self) -> bool:
        return self.spawned and self.returncode == 0

    def check(self) -> Self:
        """Raise the matching CommandError unless the command succeeded.

        Raises:
            SpawnError: If the command could not be launched
            NonZeroExitError: If the command exited with a non-zero status
        """
        if self.spawn_error is not None:
            raise SpawnError(self.argv, self.spawn_error)
        if self.returncode != 0:
            raise NonZeroExitError(
                self.argv,
                self.returncode if self.returncode is not None else -1,
                self.stderr,
            )
        return self
