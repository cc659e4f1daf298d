from typing import Optional, Sequence


class ScaffoldError(Exception):
    """Base exception for all scaffolding errors."""
    pass


class InputError(ScaffoldError):
    """Raised when a required answer is missing or the target directory is unusable."""
    pass


class CommandFailed(ScaffoldError):
    """Raised when an external command exits non-zero or cannot be started."""

    def __init__(self, executable: str, args: Sequence[str], returncode: Optional[int] = None, cause: Optional[BaseException] = None):
        self.executable = executable
        self.args_ = list(args)
        self.returncode = returncode
        self.cause = cause
        super().__init__(self._describe())

    @property
    def command(self) -> str:
        return " ".join([self.executable, *self.args_])

    def _describe(self) -> str:
        if self.returncode is not None:
            return f"Command '{self.command}' failed with exit code {self.returncode}"
        return f"Command '{self.command}' could not be started: {self.cause}"
