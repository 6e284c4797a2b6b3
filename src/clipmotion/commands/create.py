"""create command: scaffold a new component for contribution."""

from pathlib import Path

import click

from clipmotion.cli.output import user_output
from clipmotion.context import ClipmotionContext
from clipmotion.error_boundary import cli_error_boundary
from clipmotion.models.registry import FRAMEWORKS, Contributor, Framework
from clipmotion.scaffold import (
    ComponentDetails,
    is_valid_component_name,
    scaffold_component,
    to_kebab_case,
)

COMPONENT_CATEGORIES = (
    "Image Effects",
    "Text Animations",
    "Scroll Effects",
    "Hover Effects",
    "Click Interactions",
    "Transitions",
    "Loading States",
    "3D Effects",
    "Particle Effects",
    "Other",
)


@click.command("create")
@click.argument("component_name")
@click.option(
    "-f", "--framework", type=click.Choice(FRAMEWORKS), default="nextjs", show_default=True
)
@click.option("-v", "--video-url", help="Source video URL")
@click.option("-d", "--description", help="Component description")
@click.option("--category", default="Other", show_default=True, help="Component category")
@click.option(
    "--difficulty",
    type=click.Choice(["easy", "medium", "hard"]),
    default="medium",
    show_default=True,
)
@click.option("--author", help="Your display name for credits")
@click.option("--github", help="Your GitHub profile URL")
@click.option("--x", "x_profile", help="Your X (Twitter) profile URL")
@click.option("--website", help="Your personal website URL")
@click.option(
    "--registry-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default="registry",
    show_default=True,
)
@click.option("--force", is_flag=True, help="Replace an existing component")
@click.pass_obj
@cli_error_boundary
def create_cmd(
    ctx: ClipmotionContext,
    component_name: str,
    framework: Framework,
    video_url: str | None,
    description: str | None,
    category: str,
    difficulty: str,
    author: str | None,
    github: str | None,
    x_profile: str | None,
    website: str | None,
    registry_dir: Path,
    force: bool,
) -> None:
    """Create a new component for contribution.

    Writes registry/<framework>/ui/<name>, a README, a usage example and a
    contribution guide, with the doc-comment tags the registry build reads.
    """
    name = to_kebab_case(component_name)
    if not is_valid_component_name(name):
        user_output("Error: Invalid component name")
        user_output("  Use kebab-case: e.g. blur-image-toggle, fade-in-text")
        raise SystemExit(1)

    if category not in COMPONENT_CATEGORIES:
        user_output(f"Note: uncommon category {category!r}")

    contributor = None
    if any((author, github, x_profile, website)):
        # Raises ValidationError (a ValueError) for malformed profile URLs
        contributor = Contributor(name=author, github=github, x=x_profile, website=website)

    details = ComponentDetails(
        framework=framework,
        description=description or f"{name} animation",
        category=category,
        difficulty=difficulty,
        source=video_url,
        contributor=contributor,
    )
    result = scaffold_component(ctx.resolve_path(registry_dir), name, details, force=force)

    user_output("✓ Files created successfully!\n")
    user_output(f"  Component: {result.component}")
    user_output(f"  README:    {result.readme}")
    user_output(f"  Example:   {result.example}")
    if result.guide is not None:
        user_output(f"  Guide:     {result.guide}")
    user_output("\nNext: implement the animation, then run `clipmotion registry:build`")
