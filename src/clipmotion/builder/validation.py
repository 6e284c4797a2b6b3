"""Publish-time schema gate for registry item candidates."""

from pathlib import Path
from typing import Any

from pydantic import ValidationError

from clipmotion.errors import SchemaValidationError, ValidationIssue
from clipmotion.models.registry import RegistryItem


def collect_issues(candidate: dict[str, Any]) -> list[ValidationIssue]:
    """Return one issue per violated field; empty when the candidate is valid."""
    try:
        RegistryItem.model_validate(candidate)
    except ValidationError as e:
        return [_to_issue(error) for error in e.errors()]
    return []


def validate_item(candidate: dict[str, Any], source: Path | str) -> RegistryItem:
    """Validate a candidate, raising SchemaValidationError on any violation.

    Args:
        candidate: Assembled item in artifact JSON shape
        source: Origin of the candidate, named in the diagnostic

    Returns:
        The validated RegistryItem

    Raises:
        SchemaValidationError: If any field violates the schema
    """
    try:
        return RegistryItem.model_validate(candidate)
    except ValidationError as e:
        issues = [_to_issue(error) for error in e.errors()]
        raise SchemaValidationError(source, issues) from None


def _to_issue(error: Any) -> ValidationIssue:
    field_path = ".".join(str(part) for part in error["loc"]) or "<root>"
    return ValidationIssue(field=field_path, message=error["msg"])
