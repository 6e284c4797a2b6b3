"""credits command: show who built the registry components."""

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from clipmotion.cli.output import user_output
from clipmotion.context import ClipmotionContext
from clipmotion.credits import ComponentCredit, collect_contributors, component_credits
from clipmotion.error_boundary import cli_error_boundary

REPOSITORY_URL = "https://github.com/nerdboi008/clipmotion"


@click.command("credits")
@click.argument("component_name", required=False)
@click.option(
    "--registry-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Built registry to read (defaults to ./public/r)",
)
@click.pass_obj
@cli_error_boundary
def credits_cmd(
    ctx: ClipmotionContext, component_name: str | None, registry_dir: Path | None
) -> None:
    """Show contributors, or the credits of one component."""
    registry_root = ctx.resolve_path(registry_dir) if registry_dir else ctx.local_registry_root

    if component_name is not None:
        credits = component_credits(registry_root, component_name)
        if not credits:
            user_output(f'Component "{component_name}" not found or has no credits.')
            return
        for credit in credits:
            _show_component_credit(credit)
        return

    contributors = collect_contributors(registry_root)
    if not contributors:
        user_output("No contributor information found.")
        return

    plural = "s have" if len(contributors) > 1 else " has"
    user_output(f"{len(contributors)} contributor{plural} made ClipMotion possible:\n")

    table = Table(show_header=True, header_style="bold")
    table.add_column("#", no_wrap=True)
    table.add_column("contributor", style="cyan", no_wrap=True)
    table.add_column("components")
    table.add_column("github", no_wrap=True)
    for position, entry in enumerate(contributors, start=1):
        table.add_row(
            str(position),
            entry.contributor.name or "Anonymous",
            ", ".join(entry.components),
            entry.contributor.github or "",
        )

    console = Console(stderr=True, width=200)
    console.print(table)
    console.print()

    user_output("Thank you to all our contributors!")
    user_output(f"Want to contribute? Visit: {REPOSITORY_URL}")


def _show_component_credit(credit: ComponentCredit) -> None:
    contributor = credit.contributor
    user_output(credit.name)
    if credit.description:
        user_output(f"  {credit.description}")
    user_output(f"  Created by: {contributor.name or 'Anonymous Contributor'}")
    if contributor.github:
        user_output(f"  GitHub: {contributor.github}")
    if contributor.x:
        user_output(f"  X: {contributor.x}")
    if contributor.website:
        user_output(f"  Website: {contributor.website}")
    if credit.source:
        user_output(f"  Source: {credit.source}")
    user_output(f"  Available for: {credit.framework}\n")
