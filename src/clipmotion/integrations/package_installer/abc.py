"""Package manager abstraction for installing npm dependencies."""

from abc import ABC, abstractmethod
from typing import Literal

PackageManager = Literal["npm", "pnpm", "yarn", "bun"]


class PackageInstaller(ABC):
    """Installs external packages into the consuming project."""

    @abstractmethod
    def install(self, packages: list[str], *, dev: bool = False) -> None:
        """Install packages with the project's package manager.

        An empty package list is a no-op.

        Raises:
            PackageInstallError: If the package manager exits non-zero or is missing
        """
        ...
