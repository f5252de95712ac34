"""Abstract base class for running external commands."""

from abc import ABC, abstractmethod
from pathlib import Path

from gitshell.system_action.types import SystemActionOutput


class SystemAction(ABC):
    """Abstract interface for spawning external processes.

    All implementations (real, fake, printing) must implement this interface.
    """

    @abstractmethod
    def run_and_print(self, cwd: Path | None, command: list[str]) -> None:
        """Run a command with inherited stdio so its output is visible live.

        Args:
            cwd: Working directory, or None for the current directory
            command: Executable followed by its arguments

        Raises:
            CommandNotFoundError: If the executable cannot be started
            WorkingDirectoryNotFoundError: If cwd is given but is not a directory
            CommandFailedError: If the process exits non-zero
        """
        ...

    @abstractmethod
    def run(self, command: list[str], *, stdin: str | None = None) -> SystemActionOutput:
        """Run a command and capture its output without echoing it.

        A non-zero exit code is reported through the returned output, not raised.
        Output that is not valid UTF-8 is decoded with U+FFFD replacement characters.

        Args:
            command: Executable followed by its arguments
            stdin: Text fed to the process on standard input, if any

        Returns:
            SystemActionOutput with exit code, stdout and stderr

        Raises:
            CommandNotFoundError: If the executable cannot be started
        """
        ...
