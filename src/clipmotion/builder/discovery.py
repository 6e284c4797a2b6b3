"""Discovery of framework subtrees and source files in the registry directory."""

import os
from dataclasses import dataclass
from pathlib import Path

from clipmotion.models.registry import ItemType

# Build output, VCS and dependency folders never hold framework sources
IGNORED_DIRS = frozenset(
    {
        ".git",
        ".next",
        ".turbo",
        "__pycache__",
        "build",
        "coverage",
        "dist",
        "node_modules",
        "out",
    }
)

# Role subfolder -> item type, in processing order
ROLE_DIRS: tuple[tuple[str, ItemType], ...] = (
    ("ui", ItemType.COMPONENT),
    ("lib", ItemType.LIB),
    ("hooks", ItemType.HOOK),
)

SOURCE_EXTENSIONS = frozenset({".tsx", ".ts", ".jsx", ".js", ".vue"})


@dataclass(frozen=True)
class RoleDir:
    path: Path
    item_type: ItemType


@dataclass(frozen=True)
class FrameworkSource:
    """A framework subtree with at least one role subfolder."""

    name: str
    path: Path
    roles: list[RoleDir]


def discover_frameworks(registry_dir: Path) -> list[FrameworkSource]:
    """Find framework subtrees under registry_dir, sorted by name."""
    frameworks: list[FrameworkSource] = []
    for entry in sorted(registry_dir.iterdir(), key=lambda p: p.name):
        if not entry.is_dir() or entry.name in IGNORED_DIRS:
            continue

        roles = [
            RoleDir(path=entry / role, item_type=item_type)
            for role, item_type in ROLE_DIRS
            if (entry / role).is_dir()
        ]
        if roles:
            frameworks.append(FrameworkSource(name=entry.name, path=entry, roles=roles))
    return frameworks


def is_source_file_name(file_name: str) -> bool:
    if file_name.endswith(".d.ts"):
        return False
    return Path(file_name).suffix in SOURCE_EXTENSIONS


def list_source_files(role_dir: Path) -> list[Path]:
    """Candidate source files directly inside a role folder, sorted by name."""
    return sorted(
        (
            role_dir / file_name
            for file_name in os.listdir(role_dir)
            if is_source_file_name(file_name)
        ),
        key=lambda p: p.name,
    )


def stat_source(path: Path) -> os.stat_result:
    """Stat a candidate source file.

    Kept as a module-level seam so tests can inject per-file failures.
    """
    return path.stat()
