"""Translate typed failures into CLI exits."""

import tomllib
from collections.abc import Iterator
from contextlib import contextmanager

import click

from gitshell.config import ConfigError
from gitshell.github.types import ApiCallFailure, CollaboratorDecodeError
from gitshell.output import user_output
from gitshell.system_action.types import SystemActionFailure


@contextmanager
def exit_on_failure() -> Iterator[None]:
    """Report known failures as a red error line and exit with status 1."""
    try:
        yield
    except ApiCallFailure as e:
        user_output(click.style("Error: ", fg="red") + f"API call failed (exit code {e.exit_code})")
        if e.stderr:
            user_output(e.stderr.rstrip("\n"))
        raise SystemExit(1) from None
    except (
        SystemActionFailure,
        CollaboratorDecodeError,
        ConfigError,
        tomllib.TOMLDecodeError,
    ) as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from None
