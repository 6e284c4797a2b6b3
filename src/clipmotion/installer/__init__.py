from clipmotion.installer.file_writer import (
    FileOutcome,
    FileWriteError,
    ProjectFileWriter,
    WriteStatus,
)
from clipmotion.installer.resolver import DependencyResolver, InstallSummary, ItemInstallReport
from clipmotion.installer.utils_merge import MergeResult, MergeStatus, merge_utils_file

__all__ = [
    "DependencyResolver",
    "FileOutcome",
    "FileWriteError",
    "InstallSummary",
    "ItemInstallReport",
    "MergeResult",
    "MergeStatus",
    "ProjectFileWriter",
    "WriteStatus",
    "merge_utils_file",
]
