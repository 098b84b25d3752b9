"""Config commands - inspect effective settings."""

import click

from health_inspector.cli.output import machine_output
from health_inspector.core.context import InspectorContext


@click.group("config")
def config_group() -> None:
    """Inspect health-inspector configuration."""
    pass


@config_group.command("list")
@click.pass_obj
def config_list(ctx: InspectorContext) -> None:
    """Print the effective configuration."""
    machine_output(f"repo_root={ctx.repo_root}")
    for root in ctx.search_roots:
        machine_output(f"cookbook_path={root}")
    machine_output(f"knife.command={ctx.config.knife_command}")
    knife_config = ctx.config.knife_config_path(ctx.repo_root)
    if knife_config is not None:
        machine_output(f"knife.config={knife_config}")
