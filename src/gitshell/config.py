import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from gitshell.git.command import DEFAULT_COMMIT_MESSAGE, DEFAULT_SSH_HOST, DEFAULT_SSH_USER


class ConfigError(ValueError):
    """Raised when config.toml contains a value of the wrong type."""


@dataclass(frozen=True)
class GitConfig:
    executable: str
    ssh_user: str
    ssh_host: str
    initial_commit_message: str


@dataclass(frozen=True)
class GitHubConfig:
    executable: str
    hostname: str | None  # None = gh's default host


@dataclass(frozen=True)
class GitShellConfig:
    """In-memory representation of `config.toml`.

    Example config.toml:
      [git]
      executable = "git"
      ssh_user = "git"
      ssh_host = "github.com"
      initial_commit_message = "Initial Import"

      [github]
      executable = "gh"
      # Optional: target a GitHub Enterprise host for `gh api`
      # hostname = "github.example.com"
    """

    git: GitConfig
    github: GitHubConfig


def default_config() -> GitShellConfig:
    return GitShellConfig(
        git=GitConfig(
            executable="git",
            ssh_user=DEFAULT_SSH_USER,
            ssh_host=DEFAULT_SSH_HOST,
            initial_commit_message=DEFAULT_COMMIT_MESSAGE,
        ),
        github=GitHubConfig(executable="gh", hostname=None),
    )


def load_config(config_dir: Path) -> GitShellConfig:
    """Load config.toml from the given directory if present; otherwise return defaults.

    Unknown keys are ignored.

    Raises:
        ConfigError: If a known key has a non-string value
        tomllib.TOMLDecodeError: If the file is not valid TOML
    """
    cfg_path = config_dir / "config.toml"
    defaults = default_config()
    if not cfg_path.exists():
        return defaults

    data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    git = _table(data, "git")
    github = _table(data, "github")

    return GitShellConfig(
        git=GitConfig(
            executable=_str(git, "git.executable", defaults.git.executable),
            ssh_user=_str(git, "git.ssh_user", defaults.git.ssh_user),
            ssh_host=_str(git, "git.ssh_host", defaults.git.ssh_host),
            initial_commit_message=_str(
                git, "git.initial_commit_message", defaults.git.initial_commit_message
            ),
        ),
        github=GitHubConfig(
            executable=_str(github, "github.executable", defaults.github.executable),
            hostname=_optional_str(github, "github.hostname"),
        ),
    )


def _table(data: dict[str, Any], name: str) -> dict[str, Any]:
    table = data.get(name, {})
    if not isinstance(table, dict):
        raise ConfigError(f"[{name}] must be a table")
    return table


def _str(table: dict[str, Any], dotted_key: str, default: str) -> str:
    value = _optional_str(table, dotted_key)
    if value is None:
        return default
    return value


def _optional_str(table: dict[str, Any], dotted_key: str) -> str | None:
    key = dotted_key.rsplit(".", 1)[-1]
    value = table.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"{dotted_key} must be a string, got {type(value).__name__}")
    return value
