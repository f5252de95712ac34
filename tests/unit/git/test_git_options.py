"""Tests for git option translation."""

import pytest

from gitshell.git.options import (
    CommitAllChangedFiles,
    CommitAuthor,
    CommitDate,
    CommitDryRun,
    CommitMessage,
    CommitQuiet,
    CommitVerbose,
    PullDryRun,
    PullForce,
    PullProgress,
    PullQuiet,
    PullRebase,
    PullVerbose,
    PushDryRun,
    PushForce,
    PushProgress,
    PushQuiet,
    PushVerbose,
    commit_args,
    pull_args,
    push_args,
)


def test_commit_args_maps_every_variant_in_order() -> None:
    args = commit_args(
        [
            CommitQuiet(),
            CommitVerbose(),
            CommitMessage("Fix bug"),
            CommitAuthor("Ann <ann@example.com>"),
            CommitDate("2021-10-03"),
            CommitDryRun(),
            CommitAllChangedFiles(),
        ]
    )

    assert args == [
        "--quiet",
        "--verbose",
        "--message",
        "Fix bug",
        "--author",
        "Ann <ann@example.com>",
        "--date",
        "2021-10-03",
        "--dry-run",
        "--all",
    ]


def test_commit_args_preserves_caller_order() -> None:
    """Value-bearing options keep their value immediately after the flag."""
    args = commit_args([CommitAllChangedFiles(), CommitMessage("b"), CommitQuiet()])

    assert args == ["--all", "--message", "b", "--quiet"]


def test_commit_args_keeps_duplicates() -> None:
    args = commit_args([CommitMessage("first"), CommitMessage("second")])

    assert args == ["--message", "first", "--message", "second"]


def test_commit_args_empty() -> None:
    assert commit_args([]) == []


def test_commit_message_with_leading_dash_is_a_separate_token() -> None:
    assert commit_args([CommitMessage("--amend")]) == ["--message", "--amend"]


def test_push_args_maps_every_variant() -> None:
    args = push_args([PushForce(), PushDryRun(), PushProgress(), PushVerbose(), PushQuiet()])

    assert args == ["--force", "--dry-run", "--progress", "--verbose", "--quiet"]


def test_pull_args_maps_every_variant() -> None:
    args = pull_args(
        [PullRebase(), PullQuiet(), PullVerbose(), PullProgress(), PullDryRun(), PullForce()]
    )

    assert args == ["--rebase", "--quiet", "--verbose", "--progress", "--dry-run", "--force"]


def test_push_args_rejects_option_from_another_operation() -> None:
    with pytest.raises(TypeError, match="Unsupported push option"):
        push_args([PullRebase()])  # type: ignore[list-item]
