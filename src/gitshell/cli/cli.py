import logging
from pathlib import Path

import click

from gitshell.cli.commands.gh import gh_group
from gitshell.cli.commands.git import git_group
from gitshell.cli.errors import exit_on_failure
from gitshell.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


def _default_config_dir() -> Path:
    return Path(click.get_app_dir("gitshell"))


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="gitshell")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--verbose", "-v", is_flag=True, help="Print each command before running it")
@click.option(
    "--config-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    envvar="GITSHELL_CONFIG_DIR",
    help="Directory containing config.toml",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, verbose: bool, config_dir: Path | None) -> None:
    """Run git and gh operations from typed options."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        with exit_on_failure():
            ctx.obj = create_context(
                config_dir=config_dir if config_dir is not None else _default_config_dir(),
                verbose=verbose,
            )


cli.add_command(git_group)
cli.add_command(gh_group)


def main() -> None:
    """CLI entry point used by the `gitshell` console script."""
    cli()
