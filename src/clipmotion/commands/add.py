"""add command: install registry components into the current project."""

import logging
from pathlib import Path

import click

from clipmotion.cli.output import user_output
from clipmotion.context import ClipmotionContext
from clipmotion.error_boundary import cli_error_boundary
from clipmotion.installer import DependencyResolver, InstallSummary, ProjectFileWriter
from clipmotion.installer.resolver import ItemInstallReport
from clipmotion.io import require_project_config
from clipmotion.models.config import ProjectConfig
from clipmotion.models.registry import FRAMEWORKS

logger = logging.getLogger(__name__)


@click.command("add")
@click.argument("components", nargs=-1, required=True)
@click.option("-o", "--overwrite", is_flag=True, help="Overwrite existing files")
@click.option("-p", "--path", "target_path", help="Install components into this directory")
@click.option(
    "-f",
    "--framework",
    type=click.Choice(FRAMEWORKS),
    help="Override the framework from the project config",
)
@click.option("-l", "--local", is_flag=True, help="Use the local registry (public/r)")
@click.option(
    "-c",
    "--cwd",
    "project_dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Project directory (defaults to the current directory)",
)
@click.option("-s", "--silent", is_flag=True, help="Mute progress output")
@click.pass_obj
@cli_error_boundary
def add_cmd(
    ctx: ClipmotionContext,
    components: tuple[str, ...],
    overwrite: bool,
    target_path: str | None,
    framework: str | None,
    local: bool,
    project_dir: Path | None,
    silent: bool,
) -> None:
    """Add components (and their registry dependencies) to your project."""
    project_root = ctx.resolve_path(project_dir)
    config = require_project_config(project_root)

    summary = install_components(
        ctx,
        list(components),
        config=config,
        project_root=project_root,
        framework=framework or config.framework,
        overwrite=overwrite,
        target_path=target_path,
        local=local,
        silent=silent,
    )
    if not summary.ok:
        raise SystemExit(1)


def install_components(
    ctx: ClipmotionContext,
    names: list[str],
    *,
    config: ProjectConfig,
    project_root: Path,
    framework: str,
    overwrite: bool = False,
    target_path: str | None = None,
    local: bool = False,
    silent: bool = False,
) -> InstallSummary:
    """Install names for framework and print progress and a summary.

    Shared by `add` and `find --install`.
    """
    logger.debug("Installing %s for %s into %s", names, framework, project_root)
    if not silent:
        plural = "s" if len(names) > 1 else ""
        user_output(f"Installing {len(names)} component{plural}...\n")

    writer = ProjectFileWriter(
        project_root, config, overwrite=overwrite, components_path=target_path
    )
    with ctx.registry_client(config.registry_url, local=local) as registry:
        resolver = DependencyResolver(
            registry,
            ctx.package_installer(project_root, silent=silent),
            writer,
            framework,
            on_installed=None if silent else _print_report,
        )
        summary = resolver.install_components(names)

    if not silent:
        _print_summary(summary)
    return summary


def _print_report(report: ItemInstallReport) -> None:
    parts = [f"✓ {report.name}"]
    if report.written:
        parts.append(f"({report.written} new)")
    if report.merged:
        parts.append(f"[{report.merged} merged]")
    if report.skipped:
        parts.append(f"[{report.skipped} skipped]")
    user_output(" ".join(parts))


def _print_summary(summary: InstallSummary) -> None:
    for name, error in summary.failed.items():
        user_output(f"✗ Failed: {name}")
        user_output(f"  {error}")
        available = summary.suggestions.get(name)
        if available:
            user_output(f"  `{name}` is available for: {', '.join(available)}")
            user_output(f"  Try: clipmotion add {name} --framework {available[0]}")

    user_output()
    if summary.ok:
        user_output("All components installed successfully")
        count = summary.dependency_count
        if count:
            noun = "dependency" if count == 1 else "dependencies"
            user_output(f"  (including {count} {noun})")
        return

    failed = len(summary.failed)
    user_output(f"Completed with {failed} error{'s' if failed > 1 else ''}")
    user_output(f"  {len(summary.succeeded)} succeeded, {failed} failed")
