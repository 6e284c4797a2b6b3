from clipmotion.integrations.package_installer.abc import PackageInstaller, PackageManager
from clipmotion.integrations.package_installer.real import (
    RealPackageInstaller,
    detect_package_manager,
)

__all__ = [
    "PackageInstaller",
    "PackageManager",
    "RealPackageInstaller",
    "detect_package_manager",
]
