"""find command: look up an animation by the video it was recreated from."""

from pathlib import Path

import click

from clipmotion.cli.output import machine_output, user_output
from clipmotion.commands.add import install_components
from clipmotion.context import ClipmotionContext
from clipmotion.error_boundary import cli_error_boundary
from clipmotion.io import load_project_config
from clipmotion.models.config import DEFAULT_REGISTRY_URL
from clipmotion.models.registry import AnimationEntry
from clipmotion.search import REQUEST_ISSUE_URL, find_by_url, find_similar, is_valid_url

DOCS_URL = "https://clipmotion.dev/docs"


@click.command("find")
@click.argument("video_url")
@click.option("-l", "--local", is_flag=True, help="Use the local registry (public/r)")
@click.option("-i", "--install", is_flag=True, help="Install the component when found")
@click.option("-o", "--overwrite", is_flag=True, help="Overwrite existing files on install")
@click.option(
    "-c",
    "--cwd",
    "project_dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Project directory (defaults to the current directory)",
)
@click.pass_obj
@cli_error_boundary
def find_cmd(
    ctx: ClipmotionContext,
    video_url: str,
    local: bool,
    install: bool,
    overwrite: bool,
    project_dir: Path | None,
) -> None:
    """Find an animation by video URL (Instagram, TikTok, YouTube)."""
    if not is_valid_url(video_url):
        user_output("Error: Invalid URL provided")
        user_output("  Please provide a valid video URL")
        raise SystemExit(1)

    project_root = ctx.resolve_path(project_dir)
    config = load_project_config(project_root)
    framework = config.framework if config is not None else None
    registry_url = config.registry_url if config is not None else DEFAULT_REGISTRY_URL

    user_output("Searching for animation...")
    with ctx.registry_client(registry_url, local=local) as registry:
        index = registry.fetch_index()

    animation = find_by_url(index, video_url)
    if animation is None:
        user_output("Animation not found in registry\n")
        similar = find_similar(index, video_url)
        if similar:
            user_output("Similar animations from the same platform:")
            for entry in similar:
                user_output(f"  • {entry.name}")
            user_output()
        user_output("Request this animation by opening an issue at:")
        user_output(f"  {REQUEST_ISSUE_URL}")
        user_output(f"  Video URL: {video_url}")
        return

    user_output("✓ Animation found!\n")
    _show_details(animation, framework)
    machine_output(animation.id)

    if not install:
        _show_guide(animation)
        return

    if config is None or framework is None:
        user_output("\nProject not initialized")
        user_output("  Run: clipmotion init")
        raise SystemExit(1)
    if framework not in animation.libraries:
        user_output(f"\nCannot install: component not available for {framework}")
        user_output(f"  Available frameworks: {', '.join(animation.libraries)}")
        raise SystemExit(1)

    user_output()
    summary = install_components(
        ctx,
        [animation.id],
        config=config,
        project_root=project_root,
        framework=framework,
        overwrite=overwrite,
        local=local,
    )
    if not summary.ok:
        raise SystemExit(1)


def _show_details(animation: AnimationEntry, framework: str | None) -> None:
    user_output(animation.name)
    user_output(f"  {animation.description}")
    user_output(f"  Difficulty: {animation.difficulty}")
    user_output(f"  Available for: {', '.join(animation.libraries)}")
    if animation.tags:
        user_output(f"  Tags: {', '.join(animation.tags)}")
    if animation.demo_url:
        user_output(f"  Demo: {animation.demo_url}")
    if framework and framework not in animation.libraries:
        user_output(f"\n  This component is not available for {framework}")


def _show_guide(animation: AnimationEntry) -> None:
    component = _pascal_case(animation.id)
    user_output("\nImplementation guide:")
    user_output("  1. Install the component:")
    user_output(f"     clipmotion add {animation.id}")
    user_output("  2. Import it:")
    user_output(f"     import {{ {component} }} from '@/components/{animation.id}'")
    user_output("  3. Use it:")
    user_output(f"     <{component} />")
    user_output(f"\n  Full docs: {DOCS_URL}/{animation.id}")


def _pascal_case(name: str) -> str:
    return "".join(word[:1].upper() + word[1:] for word in name.split("-"))
