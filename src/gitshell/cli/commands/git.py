"""`gitshell git` commands."""

from pathlib import Path

import click

from gitshell.cli.errors import exit_on_failure
from gitshell.context import GitShellContext
from gitshell.git.options import (
    CommitAllChangedFiles,
    CommitAuthor,
    CommitDate,
    CommitDryRun,
    CommitMessage,
    CommitOption,
    CommitQuiet,
    CommitVerbose,
    PullDryRun,
    PullForce,
    PullOption,
    PullProgress,
    PullQuiet,
    PullRebase,
    PullVerbose,
    PushDryRun,
    PushForce,
    PushOption,
    PushProgress,
    PushQuiet,
    PushVerbose,
)

_cwd_option = click.option(
    "--cwd",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Repository directory (defaults to the current directory)",
)


@click.group("git")
def git_group() -> None:
    """Run git operations."""


@git_group.command("init-repo")
@click.argument("owner")
@click.argument("repo")
@_cwd_option
@click.option("--message", "-m", default=None, help="Initial commit message")
@click.option("--ssh-user", default=None, help="SSH user of the remote (default from config)")
@click.option("--ssh-host", default=None, help="SSH host of the remote (default from config)")
@click.pass_obj
def init_repo_cmd(
    ctx: GitShellContext,
    owner: str,
    repo: str,
    cwd: Path | None,
    message: str | None,
    ssh_user: str | None,
    ssh_host: str | None,
) -> None:
    """Initialize a repository, commit everything and push it to OWNER/REPO.

    \b
    Steps already completed are kept if a later one fails.
    """
    git_config = ctx.config.git
    with exit_on_failure():
        ctx.git.initialize_repo(
            cwd,
            owner=owner,
            repo_name=repo,
            commit_message=message if message is not None else git_config.initial_commit_message,
            ssh_user=ssh_user if ssh_user is not None else git_config.ssh_user,
            ssh_host=ssh_host if ssh_host is not None else git_config.ssh_host,
        )


@git_group.command("clone")
@click.argument("source")
@click.argument("destination", type=click.Path(path_type=Path))
@click.option("--shallow", is_flag=True, help="Clone with --depth 1")
@click.pass_obj
def clone_cmd(ctx: GitShellContext, source: str, destination: Path, shallow: bool) -> None:
    """Clone SOURCE into DESTINATION, which must not exist yet."""
    with exit_on_failure():
        ctx.git.clone(source, destination, shallow=shallow)


@git_group.command("commit")
@_cwd_option
@click.option("--quiet", "-q", is_flag=True)
@click.option("--verbose", "-v", is_flag=True)
@click.option("--message", "-m", default=None, help="Commit message")
@click.option("--author", default=None)
@click.option("--date", default=None)
@click.option("--dry-run", is_flag=True)
@click.option("--all", "-a", "all_changed_files", is_flag=True, help="Commit all changed files")
@click.pass_obj
def commit_cmd(
    ctx: GitShellContext,
    cwd: Path | None,
    quiet: bool,
    verbose: bool,
    message: str | None,
    author: str | None,
    date: str | None,
    dry_run: bool,
    all_changed_files: bool,
) -> None:
    """Record changes to the repository."""
    options: list[CommitOption] = []
    if quiet:
        options.append(CommitQuiet())
    if verbose:
        options.append(CommitVerbose())
    if message is not None:
        options.append(CommitMessage(message))
    if author is not None:
        options.append(CommitAuthor(author))
    if date is not None:
        options.append(CommitDate(date))
    if dry_run:
        options.append(CommitDryRun())
    if all_changed_files:
        options.append(CommitAllChangedFiles())

    with exit_on_failure():
        ctx.git.commit(cwd, options)


@git_group.command("push")
@_cwd_option
@click.option("--quiet", "-q", is_flag=True)
@click.option("--verbose", "-v", is_flag=True)
@click.option("--progress", is_flag=True)
@click.option("--dry-run", is_flag=True)
@click.option("--force", "-f", is_flag=True)
@click.pass_obj
def push_cmd(
    ctx: GitShellContext,
    cwd: Path | None,
    quiet: bool,
    verbose: bool,
    progress: bool,
    dry_run: bool,
    force: bool,
) -> None:
    """Update the remote with local commits."""
    flags: list[tuple[bool, PushOption]] = [
        (quiet, PushQuiet()),
        (verbose, PushVerbose()),
        (progress, PushProgress()),
        (dry_run, PushDryRun()),
        (force, PushForce()),
    ]
    with exit_on_failure():
        ctx.git.push(cwd, [option for enabled, option in flags if enabled])


@git_group.command("pull")
@_cwd_option
@click.option("--quiet", "-q", is_flag=True)
@click.option("--verbose", "-v", is_flag=True)
@click.option("--progress", is_flag=True)
@click.option("--rebase", is_flag=True)
@click.option("--dry-run", is_flag=True)
@click.option("--force", "-f", is_flag=True)
@click.pass_obj
def pull_cmd(
    ctx: GitShellContext,
    cwd: Path | None,
    quiet: bool,
    verbose: bool,
    progress: bool,
    rebase: bool,
    dry_run: bool,
    force: bool,
) -> None:
    """Fetch from the remote and integrate."""
    flags: list[tuple[bool, PullOption]] = [
        (quiet, PullQuiet()),
        (verbose, PullVerbose()),
        (progress, PullProgress()),
        (rebase, PullRebase()),
        (dry_run, PullDryRun()),
        (force, PullForce()),
    ]
    with exit_on_failure():
        ctx.git.pull(cwd, [option for enabled, option in flags if enabled])
