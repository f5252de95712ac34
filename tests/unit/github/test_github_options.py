"""Tests for gh option translation."""

from gitshell.github.options import (
    Description,
    Field,
    Gitignore,
    Homepage,
    Hostname,
    HttpMethod,
    IncludeHttpResponse,
    JqSelect,
    License,
    RawField,
    RequestBody,
    RequestBodyFile,
    Silent,
    SkipConfirm,
    Team,
    Visibility,
    api_args,
    create_repo_args,
    hostname_options,
)
from gitshell.github.types import RepoVisibility


def test_create_repo_args_maps_every_variant() -> None:
    args = create_repo_args(
        [
            SkipConfirm(),
            Description("A demo"),
            Gitignore("Python"),
            Homepage("https://example.com/demo"),
            License("mit"),
            Visibility(RepoVisibility.PRIVATE),
            Team("core"),
        ]
    )

    assert args == [
        "--confirm",
        "--description",
        "A demo",
        "--gitignore",
        "Python",
        "--homepage",
        "https://example.com/demo",
        "--license",
        "mit",
        "--private",
        "--team",
        "core",
    ]


def test_create_repo_visibility_flags() -> None:
    assert create_repo_args([Visibility(RepoVisibility.INTERNAL)]) == ["--internal"]
    assert create_repo_args([Visibility(RepoVisibility.PUBLIC)]) == ["--public"]


def test_api_args_maps_every_variant_without_body() -> None:
    args, stdin = api_args(
        [
            Field("per_page", "100"),
            Hostname("github.example.com"),
            IncludeHttpResponse(),
            RequestBodyFile("body.json"),
            JqSelect(".[].login"),
            HttpMethod("POST"),
            RawField("title", "Hello = world"),
            Silent(),
        ]
    )

    assert args == [
        "--field",
        "per_page=100",
        "--hostname",
        "github.example.com",
        "--include",
        "--input",
        "body.json",
        "--jq",
        ".[].login",
        "--method",
        "POST",
        "--raw-field",
        "title=Hello = world",
        "--silent",
    ]
    assert stdin is None


def test_api_request_body_goes_to_stdin() -> None:
    body = '{"permission": "push"}'

    args, stdin = api_args([HttpMethod("PUT"), RequestBody(body)])

    assert args == ["--method", "PUT", "--input", "-"]
    assert stdin == body
    assert body not in args


def test_hostname_options() -> None:
    assert hostname_options(None) == []
    assert hostname_options("ghe.example.com") == [Hostname("ghe.example.com")]
