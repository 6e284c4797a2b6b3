"""Fake package installer for testing."""

from clipmotion.errors import PackageInstallError
from clipmotion.integrations.package_installer.abc import PackageInstaller


class FakePackageInstaller(PackageInstaller):
    """Records install calls instead of running a package manager."""

    def __init__(self, *, failing_packages: set[str] | None = None) -> None:
        self._failing_packages = failing_packages or set()
        self._install_calls: list[tuple[list[str], bool]] = []

    @property
    def install_calls(self) -> list[tuple[list[str], bool]]:
        """(packages, dev) per non-empty install call.

        This property is for test assertions only.
        """
        return self._install_calls

    @property
    def installed_packages(self) -> list[str]:
        return [package for packages, _ in self._install_calls for package in packages]

    def install(self, packages: list[str], *, dev: bool = False) -> None:
        if not packages:
            return
        failing = [package for package in packages if package in self._failing_packages]
        if failing:
            raise PackageInstallError(f"Failed to install {', '.join(failing)}")
        self._install_calls.append((list(packages), dev))
