import logging
import os
from pathlib import Path

import click

from health_inspector.cli.commands.config import config_group
from health_inspector.cli.commands.cookbooks import cookbooks_cmd
from health_inspector.cli.commands.init import init_cmd
from health_inspector.cli.output import user_output
from health_inspector.core.config import InspectorConfig
from health_inspector.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


def configure_logging(debug: bool) -> None:
    if debug or os.getenv("HEALTH_INSPECTOR_DEBUG"):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="health-inspector")
@click.option(
    "--repo",
    "repo",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="chef-repo checkout to inspect (defaults to the current directory).",
)
@click.option("--debug", is_flag=True, help="Log subprocess calls and check decisions.")
@click.pass_context
def cli(ctx: click.Context, repo: Path | None, debug: bool) -> None:
    """Check that the Chef server and the local chef-repo agree."""
    configure_logging(debug)
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        repo_root = repo if repo is not None else Path.cwd()
        # init may be repairing a config that no longer parses
        if ctx.invoked_subcommand == "init":
            ctx.obj = create_context(repo_root, config=InspectorConfig())
            return
        try:
            ctx.obj = create_context(repo_root)
        except ValueError as e:
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from e


cli.add_command(cookbooks_cmd)
cli.add_command(init_cmd)
cli.add_command(config_group)


def main() -> None:
    """CLI entry point used by the `health-inspector` console script."""
    cli()
