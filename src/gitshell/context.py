"""Application context wiring config and gateways together."""

from dataclasses import dataclass
from pathlib import Path

from gitshell.config import GitShellConfig, default_config, load_config
from gitshell.git.command import GitCommand
from gitshell.github.client import GitHub
from gitshell.system_action.abc import SystemAction
from gitshell.system_action.fake import FakeSystemAction
from gitshell.system_action.printing import PrintingSystemAction
from gitshell.system_action.real import RealSystemAction


@dataclass(frozen=True)
class GitShellContext:
    """Immutable context holding all dependencies for gitshell operations.

    Created once at CLI entry and passed to commands via click's ``obj``.
    Tests build one around a FakeSystemAction with context_for_test().
    """

    config: GitShellConfig
    system_action: SystemAction
    git: GitCommand
    github: GitHub


def _build_context(config: GitShellConfig, system_action: SystemAction) -> GitShellContext:
    return GitShellContext(
        config=config,
        system_action=system_action,
        git=GitCommand(system_action=system_action, git_executable=config.git.executable),
        github=GitHub(system_action=system_action, gh_executable=config.github.executable),
    )


def create_context(*, config_dir: Path, verbose: bool) -> GitShellContext:
    """Create the production context.

    Args:
        config_dir: Directory that may contain config.toml
        verbose: Echo every command before running it
    """
    config = load_config(config_dir)
    system_action: SystemAction = RealSystemAction()
    if verbose:
        system_action = PrintingSystemAction(system_action)
    return _build_context(config, system_action)


def context_for_test(
    *,
    system_action: SystemAction | None = None,
    config: GitShellConfig | None = None,
) -> GitShellContext:
    """Create a context for tests, defaulting to a FakeSystemAction and default config."""
    return _build_context(
        config if config is not None else default_config(),
        system_action if system_action is not None else FakeSystemAction(),
    )
