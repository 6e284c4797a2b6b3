"""Tests for the publish-time schema gate."""

from pathlib import Path
from typing import Any

import pytest

from clipmotion.builder.validation import collect_issues, validate_item
from clipmotion.errors import SchemaValidationError


def _candidate(**overrides: Any) -> dict[str, Any]:
    candidate: dict[str, Any] = {
        "name": "fade-in",
        "type": "registry:component",
        "framework": "react",
        "description": "Fade in",
        "files": [{"name": "fade-in.tsx", "content": "export {}"}],
        "dependencies": ["react"],
        "devDependencies": [],
        "registryDependencies": [],
        "meta": {"source": "registry/react/ui/fade-in.tsx"},
    }
    candidate.update(overrides)
    return candidate


def test_valid_candidate_passes() -> None:
    item = validate_item(_candidate(), Path("fade-in.tsx"))

    assert item.name == "fade-in"
    assert item.to_json_dict()["registryDependencies"] == []


def test_empty_files_is_rejected_naming_the_field() -> None:
    """Test that a missing file list fails with a diagnostic naming `files`."""
    with pytest.raises(SchemaValidationError) as exc_info:
        validate_item(_candidate(files=[]), Path("registry/react/ui/fade-in.tsx"))

    error = exc_info.value
    assert [issue.field for issue in error.issues] == ["files"]
    assert "registry/react/ui/fade-in.tsx" in str(error)
    assert "[files]" in str(error)


def test_every_violation_is_reported() -> None:
    """Test that all violated fields are collected, not just the first."""
    issues = collect_issues(
        _candidate(
            name="Not Kebab",
            framework="svelte",
            dependencies=["react", "react"],
            meta={"source": "x", "contributor": {"github": "https://gitlab.com/me"}},
        )
    )
    fields = {issue.field for issue in issues}

    assert "name" in fields
    assert "framework" in fields
    assert "dependencies" in fields
    assert "meta.contributor.github" in fields


def test_unknown_type_is_rejected() -> None:
    issues = collect_issues(_candidate(type="registry:theme"))
    assert [issue.field for issue in issues] == ["type"]
