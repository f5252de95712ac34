"""`gitshell gh` commands."""

import json
from dataclasses import asdict
from pathlib import Path

import click

from gitshell.cli.errors import exit_on_failure
from gitshell.context import GitShellContext
from gitshell.github.options import (
    ApiOption,
    CreateOption,
    Description,
    Field,
    Gitignore,
    Homepage,
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
    hostname_options,
)
from gitshell.github.types import CollaboratorPermission, RepoVisibility


def _parse_key_values(
    ctx: click.Context, param: click.Parameter, values: tuple[str, ...]
) -> list[tuple[str, str]]:
    pairs: list[tuple[str, str]] = []
    for value in values:
        if "=" not in value:
            raise click.BadParameter(f"expected key=value, got {value!r}")
        key, _, rest = value.partition("=")
        pairs.append((key, rest))
    return pairs


def _resolve_hostname(ctx: GitShellContext, hostname: str | None) -> str | None:
    if hostname is not None:
        return hostname
    return ctx.config.github.hostname


_hostname_option = click.option(
    "--hostname", default=None, help="GitHub hostname (default from config)"
)


@click.group("gh")
def gh_group() -> None:
    """Run GitHub CLI operations."""


@gh_group.command("repo-create")
@click.argument("name")
@click.option("--org", "organization", default=None, help="Organization or owner")
@click.option("--confirm", is_flag=True, help="Skip the confirmation prompt")
@click.option("--description", default=None)
@click.option("--gitignore", default=None, help="Gitignore template")
@click.option("--homepage", default=None, help="Repository home page URL")
@click.option("--license", "license_template", default=None, help="License template")
@click.option(
    "--visibility",
    type=click.Choice([v.value for v in RepoVisibility]),
    default=None,
)
@click.option("--team", default=None, help="Organization team to grant access")
@click.option(
    "--cwd",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Local checkout to run gh in (defaults to the current directory)",
)
@click.pass_obj
def repo_create_cmd(
    ctx: GitShellContext,
    name: str,
    organization: str | None,
    confirm: bool,
    description: str | None,
    gitignore: str | None,
    homepage: str | None,
    license_template: str | None,
    visibility: str | None,
    team: str | None,
    cwd: Path | None,
) -> None:
    """Create repository NAME on github.com."""
    options: list[CreateOption] = []
    if confirm:
        options.append(SkipConfirm())
    if description is not None:
        options.append(Description(description))
    if gitignore is not None:
        options.append(Gitignore(gitignore))
    if homepage is not None:
        options.append(Homepage(homepage))
    if license_template is not None:
        options.append(License(license_template))
    if visibility is not None:
        options.append(Visibility(RepoVisibility(visibility)))
    if team is not None:
        options.append(Team(team))

    with exit_on_failure():
        ctx.github.create_repository(
            name, organization=organization, options=options, cwd=cwd
        )


@gh_group.command("api")
@click.argument("endpoint")
@click.option("--field", "-F", "fields", multiple=True, callback=_parse_key_values)
@click.option("--raw-field", "-f", "raw_fields", multiple=True, callback=_parse_key_values)
@_hostname_option
@click.option("--include", "-i", is_flag=True, help="Include HTTP response headers")
@click.option(
    "--input",
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="File to use as the request body",
)
@click.option("--body", default=None, help="Inline request body, sent on stdin")
@click.option("--jq", "-q", "jq", default=None, help="jq filter for the response")
@click.option("--method", "-X", default=None, help="HTTP method")
@click.option("--silent", is_flag=True, help="Do not print the response body")
@click.pass_obj
def api_cmd(
    ctx: GitShellContext,
    endpoint: str,
    fields: list[tuple[str, str]],
    raw_fields: list[tuple[str, str]],
    hostname: str | None,
    include: bool,
    input_file: Path | None,
    body: str | None,
    jq: str | None,
    method: str | None,
    silent: bool,
) -> None:
    """Call ENDPOINT and print the response.

    Any output on gh's stderr is treated as a failure.
    """
    if input_file is not None and body is not None:
        raise click.UsageError("--input and --body are mutually exclusive")

    options: list[ApiOption] = [*hostname_options(_resolve_hostname(ctx, hostname))]
    options.extend(Field(key, value) for key, value in fields)
    options.extend(RawField(key, value) for key, value in raw_fields)
    if include:
        options.append(IncludeHttpResponse())
    if input_file is not None:
        options.append(RequestBodyFile(str(input_file)))
    if body is not None:
        options.append(RequestBody(body))
    if jq is not None:
        options.append(JqSelect(jq))
    if method is not None:
        options.append(HttpMethod(method))
    if silent:
        options.append(Silent())

    with exit_on_failure():
        output = ctx.github.api(endpoint, options=options)
    click.echo(output.stdout, nl=False)


@gh_group.group("collaborators")
def collaborators_group() -> None:
    """Manage repository collaborators."""


@collaborators_group.command("list")
@click.argument("owner")
@click.argument("repo")
@_hostname_option
@click.option("--json", "as_json", is_flag=True, help="Print collaborators as JSON")
@click.pass_obj
def list_collaborators_cmd(
    ctx: GitShellContext, owner: str, repo: str, hostname: str | None, as_json: bool
) -> None:
    """List collaborators of OWNER/REPO."""
    with exit_on_failure():
        collaborators = ctx.github.repository_collaborators(
            owner, repo, hostname=_resolve_hostname(ctx, hostname)
        )

    if as_json:
        click.echo(json.dumps([asdict(c) for c in collaborators], indent=2))
        return

    for collaborator in collaborators:
        perms = collaborator.permissions
        granted = [
            name
            for name, enabled in (("pull", perms.pull), ("push", perms.push), ("admin", perms.admin))
            if enabled
        ]
        click.echo(f"{collaborator.login}\t{collaborator.id}\t{','.join(granted) or '-'}")


@collaborators_group.command("add")
@click.argument("owner")
@click.argument("repo")
@click.argument("username")
@click.option(
    "--permission",
    type=click.Choice([p.value for p in CollaboratorPermission]),
    default=CollaboratorPermission.PUSH.value,
    show_default=True,
)
@_hostname_option
@click.pass_obj
def add_collaborator_cmd(
    ctx: GitShellContext,
    owner: str,
    repo: str,
    username: str,
    permission: str,
    hostname: str | None,
) -> None:
    """Invite USERNAME as a collaborator on OWNER/REPO."""
    with exit_on_failure():
        stdout = ctx.github.add_repository_collaborator(
            owner,
            repo,
            username,
            CollaboratorPermission(permission),
            hostname=_resolve_hostname(ctx, hostname),
        )
    click.echo(stdout, nl=False)


@collaborators_group.command("remove")
@click.argument("owner")
@click.argument("repo")
@click.argument("username")
@_hostname_option
@click.pass_obj
def remove_collaborator_cmd(
    ctx: GitShellContext, owner: str, repo: str, username: str, hostname: str | None
) -> None:
    """Remove USERNAME from the collaborators of OWNER/REPO."""
    with exit_on_failure():
        ctx.github.remove_repository_collaborator(
            owner, repo, username, hostname=_resolve_hostname(ctx, hostname)
        )
