"""Wrappers around `gh` commands.

Repository creation streams gh's output to the console. Everything else goes
through `gh api`, which captures output for decoding.
"""

import json
import logging
from collections.abc import Sequence
from pathlib import Path

from gitshell.github.options import (
    ApiOption,
    CreateOption,
    HttpMethod,
    RequestBody,
    api_args,
    create_repo_args,
    hostname_options,
)
from gitshell.github.parsing import parse_collaborators
from gitshell.github.types import ApiCallFailure, Collaborator, CollaboratorPermission
from gitshell.system_action.abc import SystemAction
from gitshell.system_action.types import SystemActionOutput

logger = logging.getLogger(__name__)


class GitHub:
    """Builds `gh` command lines and runs them through a SystemAction."""

    def __init__(self, *, system_action: SystemAction, gh_executable: str = "gh") -> None:
        self._action = system_action
        self._gh_executable = gh_executable

    def create_repository(
        self,
        name: str,
        *,
        organization: str | None = None,
        options: Sequence[CreateOption] = (),
        cwd: Path | None = None,
    ) -> None:
        """Create a repository on github.com.

        Args:
            name: Name of the repository
            organization: Owner of the repository; the target becomes
                "organization/name" when given
            options: Repo creation options, translated in order
            cwd: Working directory for gh, or None for the current directory

        Raises:
            CommandNotFoundError: If gh is not installed
            CommandFailedError: If gh exits non-zero
        """
        target = f"{organization}/{name}" if organization is not None else name
        command = [self._gh_executable, "repo", "create", target, *create_repo_args(options)]
        self._action.run_and_print(cwd, command)

    def api(self, endpoint: str, options: Sequence[ApiOption] = ()) -> SystemActionOutput:
        """Call a REST endpoint through `gh api`.

        The call fails when gh exits non-zero OR when it writes anything at all
        to stderr, including warnings on an otherwise successful request.

        Returns:
            The captured output, usually JSON text on stdout

        Raises:
            ApiCallFailure: Carrying exit code, stdout and stderr verbatim
            CommandNotFoundError: If gh is not installed
        """
        args, stdin = api_args(options)
        command = [self._gh_executable, "api", endpoint, *args]

        output = self._action.run(command, stdin=stdin)

        if not output.is_success or output.stderr != "":
            logger.debug(
                "gh api %s failed: exit=%d stderr=%r", endpoint, output.exit_code, output.stderr
            )
            raise ApiCallFailure(output.exit_code, output.stdout, output.stderr)
        return output

    # ============================================================================
    # Repository Collaborators
    # ============================================================================

    def repository_collaborators(
        self, owner: str, repo: str, *, hostname: str | None = None
    ) -> list[Collaborator]:
        """List collaborators of a repository.

        Raises:
            ApiCallFailure: If the API call fails
            CollaboratorDecodeError: If the response is not a collaborator array
        """
        output = self.api(
            f"/repos/{owner}/{repo}/collaborators", options=hostname_options(hostname)
        )
        return parse_collaborators(output.stdout)

    def add_repository_collaborator(
        self,
        owner: str,
        repo: str,
        username: str,
        permission: CollaboratorPermission,
        *,
        hostname: str | None = None,
    ) -> str:
        """Invite a user as a collaborator.

        Returns:
            Raw stdout of the API call (the invitation JSON, or empty when the
            user already has access)
        """
        body = json.dumps({"permission": permission.value})
        options: list[ApiOption] = [
            *hostname_options(hostname),
            HttpMethod("PUT"),
            RequestBody(body),
        ]
        output = self.api(f"/repos/{owner}/{repo}/collaborators/{username}", options=options)
        return output.stdout

    def remove_repository_collaborator(
        self, owner: str, repo: str, username: str, *, hostname: str | None = None
    ) -> None:
        """Remove a collaborator from a repository."""
        options: list[ApiOption] = [*hostname_options(hostname), HttpMethod("DELETE")]
        self.api(f"/repos/{owner}/{repo}/collaborators/{username}", options=options)
