"""Tests for the GitHub client using FakeSystemAction."""

import json

import pytest

from gitshell.github.client import GitHub
from gitshell.github.options import (
    Description,
    Field,
    HttpMethod,
    JqSelect,
    RequestBody,
    SkipConfirm,
    Visibility,
)
from gitshell.github.types import (
    ApiCallFailure,
    CollaboratorDecodeError,
    CollaboratorPermission,
    RepoVisibility,
)
from gitshell.system_action.fake import CapturedRun, FakeSystemAction, PrintedRun
from gitshell.system_action.types import (
    CommandNotFoundError,
    SystemActionFailure,
    SystemActionOutput,
)

COLLABORATORS_JSON = json.dumps(
    [
        {
            "login": "octocat",
            "id": 583231,
            "avatar_url": "https://avatars.githubusercontent.com/u/583231?v=4",
            "url": "https://api.github.com/users/octocat",
            "type": "User",
            "permissions": {"pull": True, "push": True, "admin": False, "triage": True},
        }
    ]
)


def _ok(stdout: str = "") -> SystemActionOutput:
    return SystemActionOutput(exit_code=0, stdout=stdout, stderr="")


# ============================================================================
# create_repository
# ============================================================================


def test_create_repository_with_organization() -> None:
    action = FakeSystemAction()
    github = GitHub(system_action=action)

    github.create_repository(
        "demo",
        organization="acme",
        options=[SkipConfirm(), Description("Demo repo"), Visibility(RepoVisibility.PUBLIC)],
    )

    assert action.printed_runs == [
        PrintedRun(
            cwd=None,
            command=[
                "gh",
                "repo",
                "create",
                "acme/demo",
                "--confirm",
                "--description",
                "Demo repo",
                "--public",
            ],
        )
    ]
    assert action.captured_runs == []


def test_create_repository_without_organization_uses_bare_name() -> None:
    action = FakeSystemAction()

    GitHub(system_action=action, gh_executable="/usr/local/bin/gh").create_repository("demo")

    assert action.commands == [["/usr/local/bin/gh", "repo", "create", "demo"]]


# ============================================================================
# api
# ============================================================================


def test_api_returns_captured_output_on_success() -> None:
    output = _ok('{"login": "octocat"}')
    action = FakeSystemAction(outputs=[output])

    result = GitHub(system_action=action).api("/user", options=[JqSelect(".login")])

    assert result is output
    assert action.captured_runs == [
        CapturedRun(command=["gh", "api", "/user", "--jq", ".login"], stdin=None)
    ]


def test_api_nonzero_exit_raises_with_streams() -> None:
    action = FakeSystemAction(
        outputs=[SystemActionOutput(exit_code=1, stdout='{"message": "Not Found"}', stderr="")]
    )

    with pytest.raises(ApiCallFailure) as exc_info:
        GitHub(system_action=action).api("/repos/acme/missing")

    error = exc_info.value
    assert error.exit_code == 1
    assert error.stdout == '{"message": "Not Found"}'
    assert error.stderr == ""


def test_api_stderr_with_zero_exit_is_failure() -> None:
    action = FakeSystemAction(
        outputs=[SystemActionOutput(exit_code=0, stdout="[]", stderr="warning: deprecated\n")]
    )

    with pytest.raises(ApiCallFailure) as exc_info:
        GitHub(system_action=action).api("/user/repos")

    assert exc_info.value.exit_code == 0
    assert exc_info.value.stderr == "warning: deprecated\n"


def test_api_whitespace_only_stderr_is_failure() -> None:
    action = FakeSystemAction(outputs=[SystemActionOutput(exit_code=0, stdout="{}", stderr=" ")])

    with pytest.raises(ApiCallFailure):
        GitHub(system_action=action).api("/user")


def test_api_failure_message_format() -> None:
    error = ApiCallFailure(22, "out", "err")

    assert str(error) == 'API call failed with exit code = 22, stdout="out", stderr="err"'
    assert isinstance(error, SystemActionFailure)


def test_api_missing_gh_propagates() -> None:
    action = FakeSystemAction(run_raises=CommandNotFoundError(["gh", "api", "/user"]))

    with pytest.raises(CommandNotFoundError):
        GitHub(system_action=action).api("/user")


def test_api_request_body_sent_on_stdin() -> None:
    action = FakeSystemAction()

    GitHub(system_action=action).api(
        "/repos/acme/demo/issues",
        options=[Field("labels[]", "bug"), HttpMethod("POST"), RequestBody('{"title": "x"}')],
    )

    assert action.captured_runs == [
        CapturedRun(
            command=[
                "gh",
                "api",
                "/repos/acme/demo/issues",
                "--field",
                "labels[]=bug",
                "--method",
                "POST",
                "--input",
                "-",
            ],
            stdin='{"title": "x"}',
        )
    ]


# ============================================================================
# Collaborators
# ============================================================================


def test_repository_collaborators_decodes_response() -> None:
    action = FakeSystemAction(outputs=[_ok(COLLABORATORS_JSON)])

    collaborators = GitHub(system_action=action).repository_collaborators("acme", "demo")

    assert [c.login for c in collaborators] == ["octocat"]
    assert collaborators[0].id == 583231
    assert collaborators[0].permissions.push is True
    assert action.commands == [["gh", "api", "/repos/acme/demo/collaborators"]]


def test_repository_collaborators_with_hostname() -> None:
    action = FakeSystemAction(outputs=[_ok("[]")])

    result = GitHub(system_action=action).repository_collaborators(
        "acme", "demo", hostname="ghe.example.com"
    )

    assert result == []
    assert action.commands == [
        ["gh", "api", "/repos/acme/demo/collaborators", "--hostname", "ghe.example.com"]
    ]


def test_repository_collaborators_bad_payload_raises_decode_error() -> None:
    action = FakeSystemAction(outputs=[_ok('{"message": "Moved Permanently"}')])

    with pytest.raises(CollaboratorDecodeError):
        GitHub(system_action=action).repository_collaborators("acme", "demo")


def test_repository_collaborators_api_failure_skips_decoding() -> None:
    action = FakeSystemAction(
        outputs=[SystemActionOutput(exit_code=1, stdout="not json", stderr="HTTP 404")]
    )

    with pytest.raises(ApiCallFailure):
        GitHub(system_action=action).repository_collaborators("acme", "demo")


def test_add_repository_collaborator_puts_permission_body() -> None:
    action = FakeSystemAction(outputs=[_ok('{"id": 1, "permissions": "maintain"}')])

    stdout = GitHub(system_action=action).add_repository_collaborator(
        "acme", "demo", "octocat", CollaboratorPermission.MAINTAIN, hostname="ghe.example.com"
    )

    assert stdout == '{"id": 1, "permissions": "maintain"}'
    [run] = action.captured_runs
    assert run.command == [
        "gh",
        "api",
        "/repos/acme/demo/collaborators/octocat",
        "--hostname",
        "ghe.example.com",
        "--method",
        "PUT",
        "--input",
        "-",
    ]
    assert run.stdin is not None
    assert json.loads(run.stdin) == {"permission": "maintain"}


def test_add_repository_collaborator_returns_empty_stdout() -> None:
    action = FakeSystemAction()

    stdout = GitHub(system_action=action).add_repository_collaborator(
        "acme", "demo", "octocat", CollaboratorPermission.PULL
    )

    assert stdout == ""


def test_remove_repository_collaborator_deletes() -> None:
    action = FakeSystemAction()

    GitHub(system_action=action).remove_repository_collaborator("acme", "demo", "octocat")

    assert action.captured_runs == [
        CapturedRun(
            command=[
                "gh",
                "api",
                "/repos/acme/demo/collaborators/octocat",
                "--method",
                "DELETE",
            ],
            stdin=None,
        )
    ]


def test_remove_repository_collaborator_failure_raises() -> None:
    action = FakeSystemAction(
        outputs=[SystemActionOutput(exit_code=1, stdout="", stderr="HTTP 403: Forbidden")]
    )

    with pytest.raises(ApiCallFailure, match="HTTP 403"):
        GitHub(system_action=action).remove_repository_collaborator("acme", "demo", "octocat")
