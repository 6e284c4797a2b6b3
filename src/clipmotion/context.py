"""Application context with dependency injection.

The ClipmotionContext dataclass holds every external collaborator (registry
access, package manager) and is created once at the CLI entry point, then
threaded through commands via Click's context object.
"""

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from clipmotion.integrations.package_installer.abc import PackageInstaller
from clipmotion.integrations.registry_client.abc import RegistryClient
from clipmotion.integrations.registry_client.local import LOCAL_REGISTRY_DIR

# (base_url, local registry root or None for remote) -> client
RegistryClientFactory = Callable[[str, Path | None], RegistryClient]
# (project_dir, silent) -> installer
PackageInstallerFactory = Callable[[Path, bool], PackageInstaller]


@dataclass(frozen=True)
class ClipmotionContext:
    """Immutable context holding all dependencies for clipmotion commands.

    Attributes:
        cwd: Directory the command was invoked from
        debug: Debug flag (verbose logging)
        registry_client_factory: Builds the remote or local registry client
        package_installer_factory: Builds the package installer for a project
    """

    cwd: Path
    debug: bool
    registry_client_factory: RegistryClientFactory
    package_installer_factory: PackageInstallerFactory

    @property
    def local_registry_root(self) -> Path:
        return self.cwd / LOCAL_REGISTRY_DIR

    def registry_client(self, base_url: str, *, local: bool) -> RegistryClient:
        return self.registry_client_factory(base_url, self.local_registry_root if local else None)

    def package_installer(self, project_dir: Path, *, silent: bool = False) -> PackageInstaller:
        return self.package_installer_factory(project_dir, silent)

    def resolve_path(self, path: Path | None) -> Path:
        """Resolve a user-supplied directory against cwd."""
        if path is None:
            return self.cwd
        return path if path.is_absolute() else self.cwd / path

    @staticmethod
    def for_test(
        registry_client: RegistryClient | None = None,
        package_installer: PackageInstaller | None = None,
        cwd: Path | None = None,
        debug: bool = False,
    ) -> "ClipmotionContext":
        """Create test context with fakes for any unspecified collaborator.

        The same registry client is returned for remote and local mode.

        Example:
            >>> registry = FakeRegistryClient(items={("react", "fade"): component})
            >>> ctx = ClipmotionContext.for_test(registry_client=registry, cwd=tmp_path)
        """
        from clipmotion.integrations.package_installer.fake import FakePackageInstaller
        from clipmotion.integrations.registry_client.fake import FakeRegistryClient

        resolved_registry: RegistryClient = (
            registry_client if registry_client is not None else FakeRegistryClient()
        )
        resolved_installer: PackageInstaller = (
            package_installer if package_installer is not None else FakePackageInstaller()
        )
        resolved_cwd: Path = cwd if cwd is not None else Path("/fake/project")

        return ClipmotionContext(
            cwd=resolved_cwd,
            debug=debug,
            registry_client_factory=lambda base_url, local_root: resolved_registry,
            package_installer_factory=lambda project_dir, silent: resolved_installer,
        )


def create_context(*, debug: bool) -> ClipmotionContext:
    """Create production context with real implementations."""
    from clipmotion.integrations.package_installer.real import RealPackageInstaller
    from clipmotion.integrations.registry_client.local import LocalRegistryClient
    from clipmotion.integrations.registry_client.remote import RemoteRegistryClient

    def registry_client_factory(base_url: str, local_root: Path | None) -> RegistryClient:
        if local_root is not None:
            return LocalRegistryClient(local_root)
        return RemoteRegistryClient(base_url)

    def package_installer_factory(project_dir: Path, silent: bool) -> PackageInstaller:
        return RealPackageInstaller(project_dir, silent=silent)

    return ClipmotionContext(
        cwd=Path.cwd(),
        debug=debug,
        registry_client_factory=registry_client_factory,
        package_installer_factory=package_installer_factory,
    )
