"""Result and failure types for process execution."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SystemActionOutput:
    """Captured output of a finished process.

    Attributes:
        exit_code: Process exit status
        stdout: Captured standard output
        stderr: Captured standard error
    """

    exit_code: int
    stdout: str
    stderr: str

    @property
    def is_success(self) -> bool:
        return self.exit_code == 0


class SystemActionFailure(Exception):
    """Base class for failures raised while running external commands."""


class DirectoryExistsError(SystemActionFailure):
    """Raised when an operation refuses to write into an existing path."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Directory already exists: {path}")


class CommandNotFoundError(SystemActionFailure):
    """Raised when the executable could not be found or started."""

    def __init__(self, command: list[str]) -> None:
        self.command = list(command)
        super().__init__(f"Unable to run '{command[0]}': executable not found")


class CommandFailedError(SystemActionFailure):
    """Raised when a process exits with a non-zero status."""

    def __init__(self, command: list[str], exit_code: int) -> None:
        self.command = list(command)
        self.exit_code = exit_code
        super().__init__(f"Command '{' '.join(command)}' failed with exit code {exit_code}")


class WorkingDirectoryNotFoundError(SystemActionFailure):
    """Raised when a command's working directory does not exist."""

    def __init__(self, cwd: Path) -> None:
        self.cwd = cwd
        super().__init__(f"Working directory does not exist: {cwd}")
