"""Init command - writes a default repository config."""

import click

from health_inspector.cli.output import user_output
from health_inspector.core.config import (
    DEFAULT_COOKBOOK_PATH,
    InspectorConfig,
    config_path,
    save_config,
)
from health_inspector.core.context import InspectorContext


@click.command("init")
@click.option("--force", is_flag=True, help="Overwrite an existing config file.")
@click.option(
    "--cookbook-path",
    "cookbook_path",
    multiple=True,
    help="Cookbook search root, relative to the repo (repeatable, in precedence order).",
)
@click.option("--knife-config", default=None, help="knife.rb to pass to knife with -c.")
@click.pass_obj
def init_cmd(
    ctx: InspectorContext,
    force: bool,
    cookbook_path: tuple[str, ...],
    knife_config: str | None,
) -> None:
    """Create .health_inspector/config.toml in the repository."""
    target = config_path(ctx.repo_root)
    if target.exists() and not force:
        user_output(
            click.style("Error: ", fg="red")
            + f"Config already exists at {target}. Use --force to overwrite."
        )
        raise SystemExit(1)

    config = InspectorConfig(
        cookbook_path=list(cookbook_path) if cookbook_path else list(DEFAULT_COOKBOOK_PATH),
        knife_config=knife_config,
    )
    written = save_config(ctx.repo_root, config)
    user_output(click.style(f"✓ Wrote {written}", fg="green"))
