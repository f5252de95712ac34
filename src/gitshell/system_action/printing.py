"""Printing SystemAction wrapper for verbose output.

Each command is echoed to stderr before the wrapped implementation runs it.
"""

import shlex
from pathlib import Path

from gitshell.printing import PrintingBase
from gitshell.system_action.abc import SystemAction
from gitshell.system_action.types import SystemActionOutput


class PrintingSystemAction(PrintingBase[SystemAction], SystemAction):
    """Wrapper that prints commands before delegating to the inner implementation.

    Usage:
        printing = PrintingSystemAction(RealSystemAction())
    """

    # Inherits __init__, _emit, and _format_command from PrintingBase

    def run_and_print(self, cwd: Path | None, command: list[str]) -> None:
        """Run command with printed output."""
        prefix = f"(cd {shlex.quote(str(cwd))}) " if cwd is not None else ""
        self._emit(self._format_command(prefix + shlex.join(command)))
        self._wrapped.run_and_print(cwd, command)

    def run(self, command: list[str], *, stdin: str | None = None) -> SystemActionOutput:
        """Run captured command with printed output."""
        suffix = " < <stdin>" if stdin is not None else ""
        self._emit(self._format_command(shlex.join(command) + suffix))
        return self._wrapped.run(command, stdin=stdin)
