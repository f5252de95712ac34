"""Shared base for printing gateway wrappers."""

from typing import Generic, TypeVar

import click

from gitshell.output import user_output

T = TypeVar("T")


class PrintingBase(Generic[T]):
    """Base for wrappers that print each operation before delegating.

    Subclasses also inherit from the gateway ABC they wrap and call
    ``self._wrapped`` after emitting.
    """

    def __init__(self, wrapped: T, *, script_mode: bool = False) -> None:
        """Create a printing wrapper.

        Args:
            wrapped: The implementation to delegate to
            script_mode: Suppress all printed output
        """
        self._wrapped = wrapped
        self._script_mode = script_mode

    def _emit(self, message: str) -> None:
        if self._script_mode:
            return
        user_output(message)

    def _format_command(self, command: str) -> str:
        return click.style(f"$ {command}", dim=True)
