"""Option variants for `gh repo create` and `gh api`."""

from collections.abc import Sequence
from dataclasses import dataclass

from gitshell.github.types import RepoVisibility

# ============================================================================
# gh repo create
# ============================================================================


@dataclass(frozen=True)
class SkipConfirm:
    pass


@dataclass(frozen=True)
class Description:
    text: str


@dataclass(frozen=True)
class Gitignore:
    template: str


@dataclass(frozen=True)
class Homepage:
    url: str


@dataclass(frozen=True)
class License:
    template: str


@dataclass(frozen=True)
class Visibility:
    visibility: RepoVisibility


@dataclass(frozen=True)
class Team:
    name: str


CreateOption = SkipConfirm | Description | Gitignore | Homepage | License | Visibility | Team


def create_repo_args(options: Sequence[CreateOption]) -> list[str]:
    """Translate repo creation options into gh arguments, preserving order."""
    args: list[str] = []
    for option in options:
        match option:
            case SkipConfirm():
                args.append("--confirm")
            case Description(text=text):
                args.extend(["--description", text])
            case Gitignore(template=template):
                args.extend(["--gitignore", template])
            case Homepage(url=url):
                args.extend(["--homepage", url])
            case License(template=template):
                args.extend(["--license", template])
            case Visibility(visibility=visibility):
                args.append(f"--{visibility.value}")
            case Team(name=name):
                args.extend(["--team", name])
            case _:
                raise TypeError(f"Unsupported repo create option: {option!r}")
    return args


# ============================================================================
# gh api
# ============================================================================


@dataclass(frozen=True)
class Field:
    """Typed parameter; gh converts true/false/null/integers and @file values."""

    key: str
    value: str


@dataclass(frozen=True)
class Hostname:
    hostname: str


@dataclass(frozen=True)
class IncludeHttpResponse:
    pass


@dataclass(frozen=True)
class RequestBodyFile:
    filename: str


@dataclass(frozen=True)
class RequestBody:
    """Inline request body, sent on stdin rather than the command line."""

    body: str


@dataclass(frozen=True)
class JqSelect:
    query: str


@dataclass(frozen=True)
class HttpMethod:
    method: str


@dataclass(frozen=True)
class RawField:
    key: str
    value: str


@dataclass(frozen=True)
class Silent:
    pass


ApiOption = (
    Field
    | Hostname
    | IncludeHttpResponse
    | RequestBodyFile
    | RequestBody
    | JqSelect
    | HttpMethod
    | RawField
    | Silent
)


def api_args(options: Sequence[ApiOption]) -> tuple[list[str], str | None]:
    """Translate api options into gh arguments and standard input.

    Returns:
        Tuple of (arguments, stdin). stdin is the last RequestBody given, or None.
    """
    args: list[str] = []
    stdin: str | None = None
    for option in options:
        match option:
            case Field(key=key, value=value):
                args.extend(["--field", f"{key}={value}"])
            case Hostname(hostname=hostname):
                args.extend(["--hostname", hostname])
            case IncludeHttpResponse():
                args.append("--include")
            case RequestBodyFile(filename=filename):
                args.extend(["--input", filename])
            case RequestBody(body=body):
                args.extend(["--input", "-"])
                stdin = body
            case JqSelect(query=query):
                args.extend(["--jq", query])
            case HttpMethod(method=method):
                args.extend(["--method", method])
            case RawField(key=key, value=value):
                args.extend(["--raw-field", f"{key}={value}"])
            case Silent():
                args.append("--silent")
            case _:
                raise TypeError(f"Unsupported api option: {option!r}")
    return args, stdin


def hostname_options(hostname: str | None) -> list[ApiOption]:
    """Return a Hostname option when a hostname override is given."""
    if hostname is None:
        return []
    return [Hostname(hostname)]
