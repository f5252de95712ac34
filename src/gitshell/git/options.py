"""Option variants for git commit, push and pull.

Each operation has its own closed set of variants. Every variant maps to
exactly one flag, followed by its value where the variant carries one.
Options are translated in the order given; duplicates are passed through.
"""

from collections.abc import Sequence
from dataclasses import dataclass

# ============================================================================
# Commit
# ============================================================================


@dataclass(frozen=True)
class CommitQuiet:
    pass


@dataclass(frozen=True)
class CommitVerbose:
    pass


@dataclass(frozen=True)
class CommitMessage:
    text: str


@dataclass(frozen=True)
class CommitAuthor:
    text: str


@dataclass(frozen=True)
class CommitDate:
    text: str


@dataclass(frozen=True)
class CommitDryRun:
    pass


@dataclass(frozen=True)
class CommitAllChangedFiles:
    pass


CommitOption = (
    CommitQuiet
    | CommitVerbose
    | CommitMessage
    | CommitAuthor
    | CommitDate
    | CommitDryRun
    | CommitAllChangedFiles
)


def commit_args(options: Sequence[CommitOption]) -> list[str]:
    """Translate commit options into git arguments, preserving order."""
    args: list[str] = []
    for option in options:
        match option:
            case CommitQuiet():
                args.append("--quiet")
            case CommitVerbose():
                args.append("--verbose")
            case CommitMessage(text=text):
                args.extend(["--message", text])
            case CommitAuthor(text=text):
                args.extend(["--author", text])
            case CommitDate(text=text):
                args.extend(["--date", text])
            case CommitDryRun():
                args.append("--dry-run")
            case CommitAllChangedFiles():
                args.append("--all")
            case _:
                raise TypeError(f"Unsupported commit option: {option!r}")
    return args


# ============================================================================
# Push
# ============================================================================


@dataclass(frozen=True)
class PushQuiet:
    pass


@dataclass(frozen=True)
class PushVerbose:
    pass


@dataclass(frozen=True)
class PushProgress:
    pass


@dataclass(frozen=True)
class PushDryRun:
    pass


@dataclass(frozen=True)
class PushForce:
    pass


PushOption = PushQuiet | PushVerbose | PushProgress | PushDryRun | PushForce


def push_args(options: Sequence[PushOption]) -> list[str]:
    """Translate push options into git arguments, preserving order."""
    args: list[str] = []
    for option in options:
        match option:
            case PushQuiet():
                args.append("--quiet")
            case PushVerbose():
                args.append("--verbose")
            case PushProgress():
                args.append("--progress")
            case PushDryRun():
                args.append("--dry-run")
            case PushForce():
                args.append("--force")
            case _:
                raise TypeError(f"Unsupported push option: {option!r}")
    return args


# ============================================================================
# Pull
# ============================================================================


@dataclass(frozen=True)
class PullQuiet:
    pass


@dataclass(frozen=True)
class PullVerbose:
    pass


@dataclass(frozen=True)
class PullProgress:
    pass


@dataclass(frozen=True)
class PullRebase:
    pass


@dataclass(frozen=True)
class PullDryRun:
    pass


@dataclass(frozen=True)
class PullForce:
    pass


PullOption = PullQuiet | PullVerbose | PullProgress | PullRebase | PullDryRun | PullForce


def pull_args(options: Sequence[PullOption]) -> list[str]:
    """Translate pull options into git arguments, preserving order."""
    args: list[str] = []
    for option in options:
        match option:
            case PullQuiet():
                args.append("--quiet")
            case PullVerbose():
                args.append("--verbose")
            case PullProgress():
                args.append("--progress")
            case PullRebase():
                args.append("--rebase")
            case PullDryRun():
                args.append("--dry-run")
            case PullForce():
                args.append("--force")
            case _:
                raise TypeError(f"Unsupported pull option: {option!r}")
    return args
