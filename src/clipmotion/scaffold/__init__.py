"""Contributor scaffolding: new component sources under registry/<framework>/."""

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from clipmotion.models.registry import KEBAB_CASE_PATTERN, Contributor, Framework
from clipmotion.scaffold.templates import (
    CONTRIBUTING_GUIDE,
    component_extension,
    component_template,
    doc_block,
    example_template,
    readme_template,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComponentDetails:
    framework: Framework
    description: str
    category: str
    difficulty: str
    source: str | None = None
    contributor: Contributor | None = None


@dataclass(frozen=True)
class ScaffoldResult:
    component: Path
    readme: Path
    example: Path
    guide: Path | None  # None when CONTRIBUTING.md already existed


def to_kebab_case(name: str) -> str:
    """Lower-case, whitespace to hyphens, anything else non-alphanumeric dropped."""
    kebab = re.sub(r"\s+", "-", name.strip().lower())
    return re.sub(r"[^a-z0-9-]", "", kebab)


def is_valid_component_name(name: str) -> bool:
    return bool(KEBAB_CASE_PATTERN.match(name))


def component_path(registry_dir: Path, name: str, framework: Framework) -> Path:
    return registry_dir / framework / "ui" / f"{name}{component_extension(framework)}"


def scaffold_component(
    registry_dir: Path, name: str, details: ComponentDetails, *, force: bool = False
) -> ScaffoldResult:
    """Write the component source, README, example and contribution guide.

    Args:
        registry_dir: Registry source root (`registry/`)
        name: Kebab-case component name
        details: Metadata written into the doc-comment tags
        force: Replace an existing component of the same name

    Raises:
        ValueError: If name is not kebab-case
        FileExistsError: If the component exists and force is not set
    """
    if not is_valid_component_name(name):
        msg = f"Invalid component name: {name!r} (use kebab-case, e.g. blur-image-toggle)"
        raise ValueError(msg)

    framework = details.framework
    framework_dir = registry_dir / framework
    component = component_path(registry_dir, name, framework)
    if component.exists() and not force:
        raise FileExistsError(f"Component already exists: {component} (use --force to replace)")

    extension = component_extension(framework)
    doc = doc_block(
        description=details.description,
        category=details.category,
        difficulty=details.difficulty,
        source=details.source,
        contributor=details.contributor,
    )

    component.parent.mkdir(parents=True, exist_ok=True)
    component.write_text(component_template(name, framework, doc), encoding="utf-8")

    readme = framework_dir / f"{name}.README.md"
    readme.write_text(
        readme_template(name, details.description, details.difficulty, details.source),
        encoding="utf-8",
    )

    example = framework_dir / "examples" / f"{name}{extension}"
    example.parent.mkdir(parents=True, exist_ok=True)
    example.write_text(example_template(name, framework), encoding="utf-8")

    guide_path = framework_dir / "CONTRIBUTING.md"
    guide: Path | None = None
    if not guide_path.exists():
        guide_path.write_text(CONTRIBUTING_GUIDE, encoding="utf-8")
        guide = guide_path

    logger.debug("Scaffolded %s for %s under %s", name, framework, framework_dir)
    return ScaffoldResult(component=component, readme=readme, example=example, guide=guide)
