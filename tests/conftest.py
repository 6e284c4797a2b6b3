"""Shared fixtures for clipmotion tests."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from clipmotion.io import save_project_config
from clipmotion.models.config import ProjectConfig, build_default_config
from clipmotion.models.registry import RegistryComponent

ComponentFactory = Callable[..., RegistryComponent]


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def project_config() -> ProjectConfig:
    """React project config: components -> components/, utils -> components/utils."""
    return build_default_config("react")


@pytest.fixture
def tmp_project(tmp_path: Path, project_config: ProjectConfig) -> Path:
    """An initialized consumer project."""
    project = tmp_path / "app"
    project.mkdir()
    save_project_config(project, project_config)
    return project


@pytest.fixture
def make_component() -> ComponentFactory:
    """Build a RegistryComponent the way the registry serves it."""

    def factory(
        name: str,
        *,
        item_type: str = "registry:component",
        files: list[dict[str, str]] | None = None,
        dependencies: list[str] | None = None,
        dev_dependencies: list[str] | None = None,
        registry_dependencies: list[str] | None = None,
        meta: dict[str, Any] | None = None,
    ) -> RegistryComponent:
        return RegistryComponent.model_validate(
            {
                "name": name,
                "type": item_type,
                "description": f"{name} component",
                "files": files
                if files is not None
                else [{"name": f"{name}.tsx", "content": f"export function {name}() {{}}\n"}],
                "dependencies": dependencies or [],
                "devDependencies": dev_dependencies or [],
                "registryDependencies": registry_dependencies or [],
                "meta": meta or {"source": f"registry/react/ui/{name}.tsx"},
            }
        )

    return factory
