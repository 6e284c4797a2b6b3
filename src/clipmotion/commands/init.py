"""Init command for creating clipmotion-components.json."""

from pathlib import Path

import click

from clipmotion.cli.output import user_output
from clipmotion.context import ClipmotionContext
from clipmotion.error_boundary import cli_error_boundary
from clipmotion.io import get_config_path, save_project_config
from clipmotion.models.config import CONFIG_FILENAME, build_default_config
from clipmotion.models.registry import FRAMEWORKS, Framework
from clipmotion.project import FRAMEWORK_UTILITY_PACKAGES, detect_framework

FALLBACK_FRAMEWORK: Framework = "react"


@click.command("init")
@click.option(
    "-f",
    "--framework",
    type=click.Choice(FRAMEWORKS),
    help="Framework to configure (detected from the project by default)",
)
@click.option("--components-dir", help="Directory components are installed into")
@click.option(
    "-c",
    "--cwd",
    "project_dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Project directory (defaults to the current directory)",
)
@click.option("--force", is_flag=True, help=f"Overwrite an existing {CONFIG_FILENAME}")
@click.option("--skip-install", is_flag=True, help="Do not install utility packages")
@click.pass_obj
@cli_error_boundary
def init_cmd(
    ctx: ClipmotionContext,
    framework: Framework | None,
    components_dir: str | None,
    project_dir: Path | None,
    force: bool,
    skip_install: bool,
) -> None:
    """Initialize clipmotion-components.json for this project.

    What gets created:
    - clipmotion-components.json: framework, install directories, registry URL
    - The components and utils directories

    Then installs the packages the shared utils module needs (clsx,
    tailwind-merge) with the project's package manager.
    """
    project_root = ctx.resolve_path(project_dir)
    config_path = get_config_path(project_root)

    if config_path.exists() and not force:
        user_output(f"Error: {CONFIG_FILENAME} already exists")
        user_output("Use --force to overwrite")
        raise SystemExit(1)

    if framework is None:
        detected = detect_framework(project_root)
        if detected is not None:
            user_output(f"Auto-detected framework: {detected}")
            framework = detected
        else:
            user_output(f"Could not auto-detect framework, using {FALLBACK_FRAMEWORK}")
            framework = FALLBACK_FRAMEWORK

    config = build_default_config(framework, components_dir)
    save_project_config(project_root, config)
    user_output(f"Created {config_path}")
    user_output(f"  Framework: {framework}")
    user_output(f"  Components: {config.aliases.components}")
    user_output(f"  Utils: {config.aliases.utils}")

    for alias in (config.aliases.components, config.aliases.utils):
        alias_dir = project_root / alias
        if not alias_dir.exists():
            alias_dir.mkdir(parents=True)
            user_output(f"Created directory: {alias}")

    packages = FRAMEWORK_UTILITY_PACKAGES[framework]
    if packages and not skip_install:
        user_output(f"Installing {', '.join(packages)}...")
        ctx.package_installer(project_root).install(packages)

    user_output("\nSetup complete. Next steps:")
    user_output("  clipmotion add <component-name>")
    user_output("  clipmotion find <video-url>")
