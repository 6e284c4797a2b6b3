"""Inspection of the consuming project (framework detection, base packages)."""

import json
import logging
from pathlib import Path

from clipmotion.models.registry import Framework

logger = logging.getLogger(__name__)

_NEXT_CONFIGS = ("next.config.js", "next.config.mjs", "next.config.ts")

# Checked in order against dependencies + devDependencies
_PACKAGE_FRAMEWORKS: tuple[tuple[str, Framework], ...] = (
    ("next", "nextjs"),
    ("vue", "vue"),
    ("react", "react"),
)

# Packages the shared utils module imports
FRAMEWORK_UTILITY_PACKAGES: dict[str, list[str]] = {
    "nextjs": ["clsx", "tailwind-merge"],
    "react": ["clsx", "tailwind-merge"],
    "vue": ["clsx"],
    "angular": [],
}


def detect_framework(project_dir: Path) -> Framework | None:
    """Guess the project's framework from config files and package.json.

    Returns None when nothing identifies a framework.
    """
    if any((project_dir / name).exists() for name in _NEXT_CONFIGS):
        return "nextjs"
    if (project_dir / "angular.json").exists():
        return "angular"

    package_json = project_dir / "package.json"
    if not package_json.exists():
        return None

    try:
        data = json.loads(package_json.read_text(encoding="utf-8"))
    except json.JSONDecodeError:
        logger.debug("Unparseable package.json in %s", project_dir, exc_info=True)
        return None
    if not isinstance(data, dict):
        return None

    packages: dict[str, object] = {}
    for key in ("dependencies", "devDependencies"):
        section = data.get(key)
        if isinstance(section, dict):
            packages.update(section)

    for package, framework in _PACKAGE_FRAMEWORKS:
        if package in packages:
            return framework
    return None
