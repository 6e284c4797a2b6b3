"""Placement of registry files inside the consuming project."""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path, PurePosixPath

from clipmotion.errors import ClipmotionError
from clipmotion.installer.utils_merge import MergeStatus, is_utils_file, merge_utils_file
from clipmotion.models.config import ProjectConfig
from clipmotion.models.registry import RegistryFile

logger = logging.getLogger(__name__)


class WriteStatus(Enum):
    WRITTEN = "written"
    MERGED = "merged"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class FileOutcome:
    path: Path
    status: WriteStatus


class UnsafeFilePathError(ClipmotionError):
    """A registry file name points outside the consuming project."""


class FileWriteError(ClipmotionError):
    """A registry file could not be written into the consuming project."""


class ProjectFileWriter:
    """Writes registry files under the configured alias directories.

    Utils modules always land at `<aliases.utils>/index.<ext>` whatever name
    the item gives them, and are merged rather than overwritten. Every other
    file goes to `<path or aliases.components>/<file.name>` and is written only
    when missing, unless overwrite is set.
    """

    def __init__(
        self,
        project_root: Path,
        config: ProjectConfig,
        *,
        overwrite: bool = False,
        components_path: str | None = None,
    ) -> None:
        self.project_root = project_root
        self.config = config
        self.overwrite = overwrite
        self.components_path = components_path

    @property
    def components_dir(self) -> Path:
        return self.project_root / (self.components_path or self.config.aliases.components)

    @property
    def utils_dir(self) -> Path:
        return self.project_root / self.config.aliases.utils

    def target_path(self, file: RegistryFile) -> Path:
        """Absolute destination of a registry file.

        Raises:
            UnsafeFilePathError: If the file name is absolute or escapes the project
        """
        relative = PurePosixPath(file.name.replace("\\", "/"))
        if relative.is_absolute() or ".." in relative.parts:
            raise UnsafeFilePathError(f"Refusing to write outside the project: {file.name}")

        if is_utils_file(file.name):
            return self.utils_dir / f"index{relative.suffix}"
        return self.components_dir.joinpath(*relative.parts)

    def install_file(self, file: RegistryFile) -> FileOutcome:
        """Write or merge one registry file.

        Raises:
            UnsafeFilePathError: If the file name escapes the project
            FileWriteError: If the filesystem refuses the write
        """
        target = self.target_path(file)
        try:
            return self._install_at(file, target)
        except (OSError, UnicodeDecodeError) as e:
            raise FileWriteError(f"Failed to write {target}: {e}") from e

    def _install_at(self, file: RegistryFile, target: Path) -> FileOutcome:
        if is_utils_file(file.name):
            result = merge_utils_file(target, file.content, overwrite=self.overwrite)
            if result.status == MergeStatus.MERGED:
                return FileOutcome(path=target, status=WriteStatus.MERGED)
            if result.status == MergeStatus.SKIPPED:
                return FileOutcome(path=target, status=WriteStatus.SKIPPED)
            return FileOutcome(path=target, status=WriteStatus.WRITTEN)

        if target.exists() and not self.overwrite:
            logger.debug("File exists, skipping: %s", target)
            return FileOutcome(path=target, status=WriteStatus.SKIPPED)

        self.write_file(target, file.content)
        return FileOutcome(path=target, status=WriteStatus.WRITTEN)

    def write_file(self, target: Path, content: str) -> None:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        logger.debug("Wrote file: %s", target)
