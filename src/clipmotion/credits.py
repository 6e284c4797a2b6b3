"""Contributor credits collected from built registry artifacts."""

from dataclasses import dataclass, field
from pathlib import Path

from clipmotion.errors import RegistryFetchError
from clipmotion.io.json_file import read_json
from clipmotion.models.registry import FRAMEWORKS, Contributor, RegistryComponent

ANONYMOUS_KEY = "anonymous"


@dataclass(frozen=True)
class ComponentCredit:
    framework: str
    name: str
    description: str | None
    source: str | None
    contributor: Contributor


@dataclass
class ContributorCredits:
    """One contributor and the component names they are credited for."""

    contributor: Contributor
    components: list[str] = field(default_factory=list)


def iter_artifacts(registry_root: Path) -> list[tuple[str, RegistryComponent]]:
    """(framework, component) for every artifact, frameworks in canonical order.

    Raises:
        RegistryFetchError: If registry_root does not exist
    """
    if not registry_root.is_dir():
        raise RegistryFetchError(
            f"Local registry not found at {registry_root}. Run: clipmotion registry:build"
        )

    artifacts: list[tuple[str, RegistryComponent]] = []
    for framework in FRAMEWORKS:
        framework_dir = registry_root / framework
        if not framework_dir.is_dir():
            continue
        for path in sorted(framework_dir.glob("*.json")):
            artifacts.append((framework, RegistryComponent.model_validate(read_json(path))))
    return artifacts


def contributor_of(component: RegistryComponent) -> Contributor | None:
    data = component.meta.get("contributor")
    if not isinstance(data, dict):
        return None
    return Contributor.model_validate(data)


def component_credits(registry_root: Path, name: str) -> list[ComponentCredit]:
    """Credits for name in every framework that ships it with a contributor."""
    credits: list[ComponentCredit] = []
    for framework, component in iter_artifacts(registry_root):
        if component.name != name:
            continue
        contributor = contributor_of(component)
        if contributor is None:
            continue
        credits.append(
            ComponentCredit(
                framework=framework,
                name=component.name,
                description=component.description,
                source=component.meta.get("source"),
                contributor=contributor,
            )
        )
    return credits


def collect_contributors(registry_root: Path) -> list[ContributorCredits]:
    """Group contributors by GitHub URL, else name, in first-seen order.

    A component shipped for several frameworks is listed once per contributor.
    """
    grouped: dict[str, ContributorCredits] = {}
    for _, component in iter_artifacts(registry_root):
        contributor = contributor_of(component)
        if contributor is None:
            continue
        key = contributor.github or contributor.name or ANONYMOUS_KEY
        entry = grouped.setdefault(key, ContributorCredits(contributor=contributor))
        if component.name not in entry.components:
            entry.components.append(component.name)
    return list(grouped.values())
