"""registry:build command: compile registry sources into JSON artifacts."""

from pathlib import Path

import click

from clipmotion.builder import build_registry
from clipmotion.builder.orchestrator import BuildResult
from clipmotion.cli.output import user_output
from clipmotion.context import ClipmotionContext
from clipmotion.error_boundary import cli_error_boundary

DEFAULT_REGISTRY_DIR = "registry"
DEFAULT_OUTPUT_DIR = "public/r"


@click.command("registry:build")
@click.option(
    "--registry-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_REGISTRY_DIR,
    show_default=True,
    help="Directory holding <framework>/{ui,lib,hooks} sources",
)
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_OUTPUT_DIR,
    show_default=True,
    help="Directory receiving <framework>/<name>.json and index.json",
)
@click.pass_obj
@cli_error_boundary
def build_cmd(ctx: ClipmotionContext, registry_dir: Path, output_dir: Path) -> None:
    """Build registry JSON files from component source files.

    Exits non-zero when the registry directory is missing, holds no framework
    folders, or any item fails schema validation.
    """
    user_output("Building registry...")
    result = build_registry(
        ctx.resolve_path(registry_dir),
        ctx.resolve_path(output_dir),
        project_root=ctx.cwd,
        report=lambda message: user_output(f"  ✗ {message}"),
    )
    _print_summary(result)


build_alias_cmd = click.Command(
    "build",
    callback=build_cmd.callback,
    params=build_cmd.params,
    help="Alias for registry:build.",
    hidden=True,
)


def _print_summary(result: BuildResult) -> None:
    for framework, cycles in result.cycles.items():
        for cycle in cycles:
            user_output(f"  ⚠ Dependency cycle in {framework}: {' -> '.join(cycle)}")

    user_output(
        f"✓ Built {result.total_items} item(s) "
        f"({result.total_components} component(s), {result.total_utilities} utility(ies)) "
        f"for {len(result.frameworks)} framework(s)"
    )
    if result.failures:
        user_output(f"⚠ Skipped {len(result.failures)} file(s) that could not be read")
