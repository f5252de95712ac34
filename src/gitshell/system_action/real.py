"""Production implementation of SystemAction using subprocess."""

import logging
import shutil
import subprocess
from pathlib import Path

from gitshell.debug_timing import timed_operation
from gitshell.system_action.abc import SystemAction
from gitshell.system_action.types import (
    CommandFailedError,
    CommandNotFoundError,
    SystemActionOutput,
    WorkingDirectoryNotFoundError,
)

logger = logging.getLogger(__name__)


class RealSystemAction(SystemAction):
    """Real implementation that spawns processes via subprocess.

    No timeouts are applied; a hung process blocks the caller.
    """

    def run_and_print(self, cwd: Path | None, command: list[str]) -> None:
        """Run a command with inherited stdio."""
        _ensure_executable(command)
        if cwd is not None and not cwd.is_dir():
            raise WorkingDirectoryNotFoundError(cwd)

        with timed_operation(_describe(command, cwd)):
            result = subprocess.run(command, cwd=cwd, check=False)

        if result.returncode != 0:
            raise CommandFailedError(command, result.returncode)

    def run(self, command: list[str], *, stdin: str | None = None) -> SystemActionOutput:
        """Run a command and capture stdout and stderr."""
        _ensure_executable(command)

        with timed_operation(_describe(command, None)):
            result = subprocess.run(
                command,
                input=stdin,
                capture_output=True,
                text=True,
                encoding="utf-8",
                # Undecodable bytes become U+FFFD
                errors="replace",
                check=False,
            )

        logger.debug("Exit code %d: %s", result.returncode, command[0])
        return SystemActionOutput(
            exit_code=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
        )


def _ensure_executable(command: list[str]) -> None:
    # LBYL: Check if command exists first
    if shutil.which(command[0]) is None:
        raise CommandNotFoundError(command)


def _describe(command: list[str], cwd: Path | None) -> str:
    description = " ".join(command)
    if cwd is not None:
        return f"{description} (in {cwd})"
    return description
