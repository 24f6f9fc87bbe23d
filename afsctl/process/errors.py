class CommandError(Exception):
    """Base class for failures of an external command.
    """

    def __init__(self, argv: list[str], message: str) -> None:
        super().__init__(message)
        self.argv = argv


class SpawnError(CommandError):
    """The command could not be launched at all.
    """

    def __init__(self, argv: list[str], reason: str) -> None:
        command = ' '.join(argv)
        super().__init__(argv, f'Failed to run "{command}": {reason}')
        self.reason = reason


class NonZeroExitError(CommandError):
    """The command ran but reported failure.
    """

    def __init__(self, argv: list[str], returncode: int, stderr: str) -> None:
        command = ' '.join(argv)
        detail = stderr.strip() or f'exit status {returncode}'
        super().__init__(argv, f'"{command}" failed: {detail}')
        self.returncode = returncode
        self.stderr = stderr
