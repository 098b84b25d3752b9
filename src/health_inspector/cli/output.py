"""Output utilities for CLI commands with clear intent.

user_output: human-facing messages (stderr), keeps stdout clean for piping
machine_output: structured data such as JSON (stdout)
"""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True) -> None:
    """Output informational message for human users."""
    click.echo(message, nl=nl, err=True)


def machine_output(message: Any = "", nl: bool = True) -> None:
    """Output structured data for machine/script consumption."""
    click.echo(message, nl=nl)
