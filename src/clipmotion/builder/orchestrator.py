"""Registry build: source tree -> validated JSON artifacts + index.json.

Files are processed strictly one at a time so a failure is attributed to
exactly one source file. Per-file I/O failures are logged and counted; a
schema violation or two sources building the same item name aborts the
whole build.
"""

import logging
import stat
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path

from clipmotion.builder import discovery
from clipmotion.builder.assembler import assemble_item
from clipmotion.builder.discovery import FrameworkSource, discover_frameworks, list_source_files
from clipmotion.builder.index import (
    build_framework_slice,
    build_index,
    count_by_kind,
    find_dependency_cycles,
    load_items,
)
from clipmotion.builder.validation import validate_item
from clipmotion.errors import RegistryBuildError
from clipmotion.io.json_file import write_json_atomic
from clipmotion.models.registry import AnimationEntry, RegistryIndex

logger = logging.getLogger(__name__)

INDEX_FILENAME = "index.json"


@dataclass(frozen=True)
class FileFailure:
    """A source file skipped because it could not be read."""

    path: Path
    reason: str


@dataclass
class BuildResult:
    """Outcome of a registry build."""

    frameworks: list[str] = field(default_factory=list)
    artifacts: list[Path] = field(default_factory=list)
    failures: list[FileFailure] = field(default_factory=list)
    total_components: int = 0
    total_utilities: int = 0
    cycles: dict[str, list[list[str]]] = field(default_factory=dict)
    index: RegistryIndex | None = None

    @property
    def total_items(self) -> int:
        return self.total_components + self.total_utilities


def build_registry(
    registry_dir: Path,
    output_dir: Path,
    *,
    project_root: Path | None = None,
    now: Callable[[], datetime] | None = None,
    report: Callable[[str], None] | None = None,
) -> BuildResult:
    """Build every framework subtree of registry_dir into output_dir.

    Args:
        registry_dir: Root containing `<framework>/{ui,lib,hooks}` folders
        output_dir: Artifact root; receives `<framework>/<name>.json` and index.json
        project_root: Base for the relative `meta.source` paths (defaults to
            registry_dir's parent)
        now: Clock for the index timestamp
        report: Sink for per-file progress and failure lines

    Returns:
        BuildResult with counts, written artifacts and per-file failures

    Raises:
        RegistryBuildError: If registry_dir is missing, holds no framework
            subtrees, or two sources of one framework build the same name
        SchemaValidationError: If any assembled item violates the schema
    """
    if not registry_dir.is_dir():
        raise RegistryBuildError(f"Registry directory not found: {registry_dir}")

    frameworks = discover_frameworks(registry_dir)
    if not frameworks:
        raise RegistryBuildError(
            f"No valid framework directories found in {registry_dir} "
            "(expected <framework>/ui, <framework>/lib or <framework>/hooks)"
        )

    root = project_root if project_root is not None else registry_dir.parent
    clock = now if now is not None else lambda: datetime.now(UTC)
    emit = report if report is not None else _log_report

    result = BuildResult()
    animations: list[AnimationEntry] = []

    for framework in frameworks:
        logger.debug("Building framework %s from %s", framework.name, framework.path)
        written = _build_framework(framework, output_dir, root, result, emit)

        items = load_items(written)
        components, utilities = count_by_kind(items)
        result.total_components += components
        result.total_utilities += utilities
        result.frameworks.append(framework.name)
        result.artifacts.extend(written)
        animations.extend(build_framework_slice(items))

        cycles = find_dependency_cycles(items)
        if cycles:
            result.cycles[framework.name] = cycles
            for cycle in cycles:
                logger.warning(
                    "Registry dependency cycle in %s: %s", framework.name, " -> ".join(cycle)
                )

    index = build_index(
        result.frameworks,
        animations,
        total_components=result.total_components,
        total_utilities=result.total_utilities,
        timestamp=clock(),
    )
    write_json_atomic(output_dir / INDEX_FILENAME, index.to_json_dict())
    result.index = index
    return result


def _build_framework(
    framework: FrameworkSource,
    output_dir: Path,
    project_root: Path,
    result: BuildResult,
    emit: Callable[[str], None],
) -> list[Path]:
    """Build one framework's items; returns the artifact paths written."""
    framework_output = output_dir / framework.name
    written: list[Path] = []
    sources_by_name: dict[str, Path] = {}

    for role in framework.roles:
        for source_path in list_source_files(role.path):
            try:
                file_stat = discovery.stat_source(source_path)
            except OSError as e:
                emit(f"Failed to stat {source_path.name}: {e}")
                logger.debug("stat failed for %s", source_path, exc_info=True)
                result.failures.append(FileFailure(path=source_path, reason=str(e)))
                continue

            # A directory named like a source file
            if not _is_regular_file(file_stat.st_mode):
                continue

            try:
                content = source_path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                emit(f"Failed to read {source_path.name}: {e}")
                result.failures.append(FileFailure(path=source_path, reason=str(e)))
                continue

            candidate = assemble_item(
                source_path,
                content,
                framework=framework.name,
                item_type=role.item_type,
                project_root=project_root,
            )
            item = validate_item(candidate, source_path)

            previous = sources_by_name.get(item.name)
            if previous is not None:
                raise RegistryBuildError(
                    f'Duplicate item "{item.name}" for {framework.name}: '
                    f"{previous} and {source_path} both build {item.name}.json"
                )
            sources_by_name[item.name] = source_path

            artifact_path = framework_output / f"{item.name}.json"
            write_json_atomic(artifact_path, item.to_json_dict())
            logger.debug("Wrote %s", artifact_path)
            written.append(artifact_path)

    return written


def _is_regular_file(mode: int) -> bool:
    return stat.S_ISREG(mode)


def _log_report(message: str) -> None:
    logger.error(message)
