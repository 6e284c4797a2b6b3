"""Tests for LocalRegistryClient."""

import json
from pathlib import Path

import pytest

from clipmotion.errors import RegistryFetchError, RegistryItemNotFoundError
from clipmotion.integrations.registry_client.local import LocalRegistryClient


def _write_artifact(root: Path, framework: str, name: str) -> None:
    path = root / framework / f"{name}.json"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(
            {
                "name": name,
                "type": "registry:component",
                "files": [{"name": f"{name}.tsx", "content": ""}],
                "meta": {"source": "x"},
            }
        ),
        encoding="utf-8",
    )


def test_fetch_item_reads_artifact(tmp_path: Path) -> None:
    _write_artifact(tmp_path, "react", "fade")

    component = LocalRegistryClient(tmp_path).fetch_item("fade", "react")

    assert component.name == "fade"
    assert component.dependencies == []


def test_missing_artifact_is_not_found(tmp_path: Path) -> None:
    _write_artifact(tmp_path, "react", "fade")

    with pytest.raises(RegistryItemNotFoundError):
        LocalRegistryClient(tmp_path).fetch_item("fade", "vue")


def test_corrupt_artifact_is_fetch_error(tmp_path: Path) -> None:
    path = tmp_path / "react" / "fade.json"
    path.parent.mkdir(parents=True)
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(RegistryFetchError):
        LocalRegistryClient(tmp_path).fetch_item("fade", "react")


def test_missing_index_suggests_build(tmp_path: Path) -> None:
    with pytest.raises(RegistryFetchError, match="registry:build"):
        LocalRegistryClient(tmp_path).fetch_index()


def test_find_available_frameworks(tmp_path: Path) -> None:
    _write_artifact(tmp_path, "nextjs", "fade")
    _write_artifact(tmp_path, "angular", "fade")

    client = LocalRegistryClient(tmp_path)

    assert client.find_available_frameworks("fade") == ["nextjs", "angular"]
    assert client.find_available_frameworks("fade", exclude="nextjs") == ["angular"]
