"""Exception hierarchy for clipmotion.

Fatal conditions (missing registry root, schema failures) propagate to the CLI
error boundary. Per-file and per-component failures are caught by the build
and install loops and reported in their summaries.
"""

from dataclasses import dataclass
from pathlib import Path


class ClipmotionError(Exception):
    """Base class for all well-known clipmotion errors."""


class RegistryBuildError(ClipmotionError):
    """The registry source tree is not in a buildable state."""


@dataclass(frozen=True)
class ValidationIssue:
    """A single violated field in a registry item."""

    field: str  # Dotted path, e.g. "files" or "meta.contributor.github"
    message: str

    def format(self) -> str:
        return f"  - [{self.field}] {self.message}"


class SchemaValidationError(ClipmotionError):
    """An assembled registry item does not match the registry item schema."""

    def __init__(self, source: Path | str, issues: list[ValidationIssue]) -> None:
        self.source = source
        self.issues = issues
        lines = [f"Invalid registry item from {source}:"]
        lines.extend(issue.format() for issue in issues)
        super().__init__("\n".join(lines))


class RegistryFetchError(ClipmotionError):
    """Fetching a registry artifact failed for a transient reason (network, HTTP, parse)."""


class RegistryItemNotFoundError(RegistryFetchError):
    """The requested item does not exist in the requested framework namespace."""

    def __init__(self, name: str, framework: str) -> None:
        self.name = name
        self.framework = framework
        super().__init__(f'Component "{name}" not found for {framework}')


class ConfigNotFoundError(ClipmotionError):
    """The consuming project has no clipmotion configuration file."""

    def __init__(self, config_path: Path) -> None:
        self.config_path = config_path
        super().__init__(f"Configuration file not found: {config_path}\n  Run: clipmotion init")


class PackageInstallError(ClipmotionError):
    """The package manager failed to install external dependencies."""
