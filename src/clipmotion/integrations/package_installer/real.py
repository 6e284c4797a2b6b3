"""Package installer that shells out to npm, pnpm, yarn or bun."""

import logging
import subprocess
from pathlib import Path

from clipmotion.errors import PackageInstallError
from clipmotion.integrations.package_installer.abc import PackageInstaller, PackageManager

logger = logging.getLogger(__name__)

# First matching lockfile wins
_LOCKFILES: tuple[tuple[str, PackageManager], ...] = (
    ("bun.lockb", "bun"),
    ("pnpm-lock.yaml", "pnpm"),
    ("yarn.lock", "yarn"),
)

_DEV_FLAGS: dict[PackageManager, str] = {
    "npm": "--save-dev",
    "pnpm": "--save-dev",
    "yarn": "--dev",
    "bun": "--dev",
}


def detect_package_manager(project_dir: Path) -> PackageManager:
    """Pick the package manager from the lockfile in project_dir; npm by default."""
    for lockfile, manager in _LOCKFILES:
        if (project_dir / lockfile).exists():
            return manager
    return "npm"


def build_install_command(
    manager: PackageManager, packages: list[str], *, dev: bool
) -> list[str]:
    verb = "install" if manager == "npm" else "add"
    cmd = [manager, verb, *packages]
    if dev:
        cmd.append(_DEV_FLAGS[manager])
    return cmd


class RealPackageInstaller(PackageInstaller):
    """Production installer running the detected package manager in project_dir."""

    def __init__(self, project_dir: Path, *, silent: bool = False) -> None:
        self._project_dir = project_dir
        self._silent = silent

    @property
    def manager(self) -> PackageManager:
        return detect_package_manager(self._project_dir)

    def install(self, packages: list[str], *, dev: bool = False) -> None:
        if not packages:
            return

        cmd = build_install_command(self.manager, packages, dev=dev)
        logger.debug("Running %s in %s", " ".join(cmd), self._project_dir)

        try:
            result = subprocess.run(
                cmd,
                cwd=self._project_dir,
                capture_output=self._silent,
                text=True,
                check=False,
            )
        except FileNotFoundError as e:
            raise PackageInstallError(f"Package manager not found: {cmd[0]}") from e

        if result.returncode != 0:
            details = f"\n{result.stderr.strip()}" if self._silent and result.stderr else ""
            raise PackageInstallError(
                f"Failed to install {', '.join(packages)} "
                f"(`{' '.join(cmd)}` exited with {result.returncode}){details}"
            )
