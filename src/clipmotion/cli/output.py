"""Output helpers that make the destination stream explicit.

Human-oriented progress and diagnostics go to stderr so stdout stays usable
for machine-readable output (paths, JSON) in shell pipelines.
"""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True) -> None:
    """Print a message for the user (stderr)."""
    click.echo(message, nl=nl, err=True)


def machine_output(message: Any = "", nl: bool = True) -> None:
    """Print machine-readable output (stdout)."""
    click.echo(message, nl=nl)
