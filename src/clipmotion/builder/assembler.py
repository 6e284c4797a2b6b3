"""Assembly of one source file into a registry item candidate."""

import re
from pathlib import Path
from typing import Any

from clipmotion.builder.analysis import (
    extract_dependencies,
    extract_dev_dependencies,
    extract_registry_dependencies,
)
from clipmotion.builder.metadata import default_description, extract_metadata
from clipmotion.models.registry import ItemType

# Alias every installed item is importable through in the consumer's project
INTERNAL_ALIAS = "@/components"

# "../lib/utils", "../../hooks/use-scroll", "../ui/image-crossfade"
_PARENT_RELATIVE_IMPORT = re.compile(
    r"""(['"])(?:\.\./)+(?:lib|hooks|ui)/([A-Za-z0-9_.-]+(?:/[A-Za-z0-9_.-]+)*)\1"""
)


def transform_import_paths(content: str) -> str:
    """Rewrite parent-relative registry imports to the internal alias.

    `from "../lib/utils"` becomes `from "@/components/utils"`, which resolves
    wherever the consumer installs the item.
    """
    return _PARENT_RELATIVE_IMPORT.sub(
        lambda m: f"{m.group(1)}{INTERNAL_ALIAS}/{m.group(2)}{m.group(1)}", content
    )


def item_name_for(source_path: Path) -> str:
    """Item name is the file name without its extension."""
    return source_path.name.removesuffix(source_path.suffix)


def target_file_name(source_path: Path, item_type: ItemType) -> str:
    """In-package file name for an item.

    lib items always ship as `<name>/index.<ext>` so consumers get a stable
    import path; components and hooks keep their original file name.
    """
    if item_type == ItemType.LIB:
        return f"{item_name_for(source_path)}/index{source_path.suffix}"
    return source_path.name


def relative_source(source_path: Path, project_root: Path) -> str:
    try:
        return source_path.relative_to(project_root).as_posix()
    except ValueError:
        return source_path.as_posix()


def assemble_item(
    source_path: Path,
    content: str,
    *,
    framework: str,
    item_type: ItemType,
    project_root: Path,
) -> dict[str, Any]:
    """Build an unvalidated registry item candidate in artifact JSON shape.

    The candidate is handed to the schema validator before anything is
    written.
    """
    name = item_name_for(source_path)
    transformed = transform_import_paths(content)
    metadata = extract_metadata(content)

    registry_dependencies = [
        dep for dep in extract_registry_dependencies(transformed) if dep != name
    ]

    meta: dict[str, Any] = {
        "source": metadata.source or relative_source(source_path, project_root),
    }
    if metadata.category is not None:
        meta["category"] = metadata.category
    if metadata.difficulty is not None:
        meta["difficulty"] = metadata.difficulty
    if metadata.tags:
        meta["tags"] = metadata.tags
    if metadata.demo_url is not None:
        meta["demoUrl"] = metadata.demo_url
    if metadata.contributor is not None:
        meta["contributor"] = metadata.contributor.model_dump(exclude_none=True)

    return {
        "name": name,
        "type": item_type.value,
        "framework": framework,
        "description": metadata.description or default_description(name, item_type, framework),
        "files": [
            {
                "name": target_file_name(source_path, item_type),
                "content": transformed,
            }
        ],
        "dependencies": extract_dependencies(transformed, framework),
        "devDependencies": extract_dev_dependencies(transformed),
        "registryDependencies": registry_dependencies,
        "meta": meta,
    }
