"""Dependency-first installation of registry components.

One `DependencyResolver` serves one install invocation. Its `installed` set is
the only mutable state and is shared by every recursive call, so a component
requested directly and also pulled in transitively is installed once.

A name is marked installed before it is fetched. A registryDependencies cycle
(A -> B -> A) therefore terminates with each member installed once instead of
recursing forever.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from clipmotion.errors import ClipmotionError, RegistryItemNotFoundError
from clipmotion.installer.file_writer import ProjectFileWriter, WriteStatus
from clipmotion.integrations.package_installer.abc import PackageInstaller
from clipmotion.integrations.registry_client.abc import RegistryClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ItemInstallReport:
    """File counts for one installed component."""

    name: str
    written: int
    merged: int
    skipped: int
    dependency: bool  # Pulled in through registryDependencies, not requested


@dataclass
class InstallSummary:
    requested: list[str]
    succeeded: list[str] = field(default_factory=list)
    failed: dict[str, ClipmotionError] = field(default_factory=dict)
    suggestions: dict[str, list[str]] = field(default_factory=dict)
    reports: list[ItemInstallReport] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed

    @property
    def dependency_count(self) -> int:
        return sum(1 for report in self.reports if report.dependency)


class DependencyResolver:
    """Installs components and their registry dependencies for one framework."""

    def __init__(
        self,
        registry: RegistryClient,
        packages: PackageInstaller,
        writer: ProjectFileWriter,
        framework: str,
        *,
        on_installed: Callable[[ItemInstallReport], None] | None = None,
    ) -> None:
        self._registry = registry
        self._packages = packages
        self._writer = writer
        self._framework = framework
        self._on_installed = on_installed
        self._requested: set[str] = set()
        self._reports: list[ItemInstallReport] = []
        self.installed: set[str] = set()

    @property
    def reports(self) -> list[ItemInstallReport]:
        """Reports in completion order: dependencies before dependents."""
        return self._reports

    def install_component(self, name: str) -> None:
        """Install name after everything in its registryDependencies.

        Raises:
            ClipmotionError: If name or any of its dependencies cannot be
                fetched or installed
        """
        if name in self.installed:
            logger.debug("Already installed: %s", name)
            return

        self.installed.add(name)
        try:
            self._install(name)
        except ClipmotionError:
            # Later requests for the same name must fail too, not short-circuit
            self.installed.discard(name)
            raise

    def install_components(self, names: list[str]) -> InstallSummary:
        """Install each requested name; one failure does not stop the others."""
        summary = InstallSummary(requested=list(names))
        self._requested.update(names)

        for name in names:
            try:
                self.install_component(name)
            except ClipmotionError as e:
                logger.debug("Failed to install %s", name, exc_info=True)
                summary.failed[name] = e
                if isinstance(e, RegistryItemNotFoundError) and e.name == name:
                    available = self._registry.find_available_frameworks(
                        name, exclude=self._framework
                    )
                    if available:
                        summary.suggestions[name] = available
                continue
            summary.succeeded.append(name)

        summary.reports = list(self._reports)
        return summary

    def _install(self, name: str) -> None:
        logger.debug("Fetching %s for %s", name, self._framework)
        component = self._registry.fetch_item(name, self._framework)

        for dependency in component.registry_dependencies:
            logger.debug("Installing registry dependency %s of %s", dependency, name)
            self.install_component(dependency)

        if component.dependencies:
            self._packages.install(component.dependencies)
        if component.dev_dependencies:
            self._packages.install(component.dev_dependencies, dev=True)

        outcomes = [self._writer.install_file(file) for file in component.files]
        report = ItemInstallReport(
            name=name,
            written=sum(1 for o in outcomes if o.status == WriteStatus.WRITTEN),
            merged=sum(1 for o in outcomes if o.status == WriteStatus.MERGED),
            skipped=sum(1 for o in outcomes if o.status == WriteStatus.SKIPPED),
            dependency=name not in self._requested,
        )
        self._reports.append(report)
        if self._on_installed is not None:
            self._on_installed(report)
