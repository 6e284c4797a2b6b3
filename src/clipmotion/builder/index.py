"""Registry index generation and dependency graph checks."""

from datetime import datetime
from pathlib import Path

from clipmotion.io.json_file import read_json
from clipmotion.models.registry import (
    AnimationEntry,
    IndexStats,
    ItemType,
    RegistryIndex,
    RegistryItem,
)

DEFAULT_DIFFICULTY = "medium"


def animation_entry_for(item: RegistryItem) -> AnimationEntry:
    """Summarize one item for the index."""
    meta = item.meta
    tags = list(meta.tags)
    if not tags and meta.category:
        tags = [meta.category.lower()]

    return AnimationEntry(
        id=item.name,
        name=item.name,
        description=item.description,
        libraries=[item.framework],
        sources=[meta.source],
        difficulty=meta.difficulty or DEFAULT_DIFFICULTY,
        tags=tags,
        demo_url=meta.demo_url,
    )


def load_items(artifact_paths: list[Path]) -> list[RegistryItem]:
    """Read back written artifacts, in the given order."""
    return [RegistryItem.model_validate(read_json(path)) for path in artifact_paths]


def build_framework_slice(items: list[RegistryItem]) -> list[AnimationEntry]:
    """Index entries for one framework, in artifact order."""
    return [animation_entry_for(item) for item in items]


def build_index(
    frameworks: list[str],
    animations: list[AnimationEntry],
    *,
    total_components: int,
    total_utilities: int,
    timestamp: datetime,
) -> RegistryIndex:
    return RegistryIndex(
        frameworks=frameworks,
        stats=IndexStats(
            total_components=total_components,
            total_utilities=total_utilities,
            total_frameworks=len(frameworks),
        ),
        last_updated=timestamp.isoformat(),
        animations=animations,
    )


def count_by_kind(items: list[RegistryItem]) -> tuple[int, int]:
    """Return (components, utilities); hooks and libs count as utilities."""
    components = sum(1 for item in items if item.type == ItemType.COMPONENT)
    return components, len(items) - components


def find_dependency_cycles(items: list[RegistryItem]) -> list[list[str]]:
    """Cycles in the registryDependencies graph of one framework.

    Each cycle is reported once, as the path that closes it, e.g.
    ["a", "b", "a"]. Dependencies on names not in items are ignored.
    """
    graph = {item.name: item.registry_dependencies for item in items}
    cycles: list[list[str]] = []
    seen_cycles: set[frozenset[str]] = set()
    visited: set[str] = set()

    def visit(name: str, path: list[str]) -> None:
        if name in path:
            cycle = path[path.index(name) :] + [name]
            key = frozenset(cycle)
            if key not in seen_cycles:
                seen_cycles.add(key)
                cycles.append(cycle)
            return
        if name in visited:
            return
        visited.add(name)
        for dep in graph.get(name, []):
            if dep in graph:
                visit(dep, [*path, name])

    for name in sorted(graph):
        visit(name, [])
    return cycles
