"""Wrappers around `git` subcommands.

Every method spawns at least one `git` process through the injected
SystemAction, with output streamed to the console.
"""

import logging
from collections.abc import Sequence
from pathlib import Path

from gitshell.git.options import (
    CommitOption,
    PullOption,
    PushOption,
    commit_args,
    pull_args,
    push_args,
)
from gitshell.system_action.abc import SystemAction
from gitshell.system_action.types import DirectoryExistsError

logger = logging.getLogger(__name__)

DEFAULT_COMMIT_MESSAGE = "Initial Import"
DEFAULT_SSH_USER = "git"
DEFAULT_SSH_HOST = "github.com"


def remote_url(*, owner: str, repo_name: str, ssh_user: str, ssh_host: str) -> str:
    """Build the SSH remote URL for a hosted repository.

    Example: remote_url(owner="alice", repo_name="demo", ssh_user="git",
    ssh_host="github.com") == "git@github.com:alice/demo.git"
    """
    return f"{ssh_user}@{ssh_host}:{owner}/{repo_name}.git"


class GitCommand:
    """Builds `git` command lines and runs them through a SystemAction."""

    def __init__(self, *, system_action: SystemAction, git_executable: str = "git") -> None:
        self._action = system_action
        self._git_executable = git_executable

    def git(self, cwd: Path | None, args: Sequence[str]) -> None:
        """Run `git` with raw arguments.

        Args:
            cwd: Working directory, or None for the current directory
            args: Arguments following the git executable

        Raises:
            SystemActionFailure: Propagated unchanged from the SystemAction
        """
        self._action.run_and_print(cwd, [self._git_executable, *args])

    def initialize_repo(
        self,
        cwd: Path | None,
        *,
        owner: str,
        repo_name: str,
        commit_message: str | None = None,
        ssh_user: str = DEFAULT_SSH_USER,
        ssh_host: str = DEFAULT_SSH_HOST,
    ) -> None:
        """Turn a directory into a repository and push it to a new remote.

        Runs init, add, commit, branch rename to main, remote add and push in
        order. The first failure aborts the sequence; earlier steps are not
        undone, so a failed push leaves a committed local repository behind.
        """
        url = remote_url(owner=owner, repo_name=repo_name, ssh_user=ssh_user, ssh_host=ssh_host)
        message = commit_message if commit_message is not None else DEFAULT_COMMIT_MESSAGE
        logger.debug("Initializing repository %s/%s with remote %s", owner, repo_name, url)

        self.git(cwd, ["init"])
        self.git(cwd, ["add", "."])
        self.git(cwd, ["commit", "-m", message])
        self.git(cwd, ["branch", "--move", "main"])
        self.git(cwd, ["remote", "add", "origin", url])
        self.git(cwd, ["push", "-u", "origin", "main"])

    def clone(self, source: str, destination: Path, *, shallow: bool = False) -> None:
        """Clone a repository.

        Args:
            source: Repository to clone (http(s) URL, ssh spec or file path)
            destination: Output path; git creates this directory
            shallow: If True, use --depth 1

        Raises:
            DirectoryExistsError: If destination already exists. Checked before
                any process is spawned.
        """
        if destination.exists():
            raise DirectoryExistsError(destination)

        args = ["clone"]
        if shallow:
            args.extend(["--depth", "1"])
        args.extend([source, str(destination)])

        self.git(None, args)

    def commit(self, cwd: Path | None, options: Sequence[CommitOption]) -> None:
        """Run `git commit` with the given options."""
        self.git(cwd, ["commit", *commit_args(options)])

    def push(self, cwd: Path | None, options: Sequence[PushOption]) -> None:
        """Run `git push` with the given options."""
        self.git(cwd, ["push", *push_args(options)])

    def pull(self, cwd: Path | None, options: Sequence[PullOption]) -> None:
        """Run `git pull` with the given options."""
        self.git(cwd, ["pull", *pull_args(options)])
