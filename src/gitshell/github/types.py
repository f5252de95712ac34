"""Types for GitHub CLI operations."""

from dataclasses import dataclass
from enum import Enum

from gitshell.system_action.types import SystemActionFailure


class RepoVisibility(Enum):
    """Visibility of a newly created repository."""

    INTERNAL = "internal"
    PRIVATE = "private"
    PUBLIC = "public"


class CollaboratorPermission(Enum):
    """Permission granted when adding a repository collaborator."""

    PULL = "pull"
    PUSH = "push"
    ADMIN = "admin"
    MAINTAIN = "maintain"
    TRIAGE = "triage"


@dataclass(frozen=True)
class CollaboratorPermissions:
    pull: bool
    push: bool
    admin: bool


@dataclass(frozen=True)
class Collaborator:
    """A repository collaborator as returned by the REST API.

    Attributes:
        login: Account login name
        id: Numeric account id
        avatar_url: Absolute URL of the avatar image
        url: Absolute API URL of the account
        permissions: Access the collaborator holds on the repository
    """

    login: str
    id: int
    avatar_url: str
    url: str
    permissions: CollaboratorPermissions


class ApiCallFailure(SystemActionFailure):
    """Raised when `gh api` exits non-zero or writes anything to stderr."""

    def __init__(self, exit_code: int, stdout: str, stderr: str) -> None:
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(
            f'API call failed with exit code = {exit_code}, stdout="{stdout}", stderr="{stderr}"'
        )


class CollaboratorDecodeError(ValueError):
    """Raised when `gh api` output is not a valid collaborator list."""
