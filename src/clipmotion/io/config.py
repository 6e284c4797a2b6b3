"""I/O for the consuming project's clipmotion-components.json."""

from pathlib import Path

from clipmotion.errors import ConfigNotFoundError
from clipmotion.io.json_file import write_json_atomic
from clipmotion.models.config import CONFIG_FILENAME, ProjectConfig


def get_config_path(project_dir: Path) -> Path:
    return project_dir / CONFIG_FILENAME


def load_project_config(project_dir: Path) -> ProjectConfig | None:
    """Load clipmotion-components.json, or None if the project is not initialized."""
    config_path = get_config_path(project_dir)
    if not config_path.exists():
        return None

    json_str = config_path.read_text(encoding="utf-8")
    return ProjectConfig.model_validate_json(json_str)


def require_project_config(project_dir: Path) -> ProjectConfig:
    """Load the project config, raising ConfigNotFoundError when it is missing."""
    config = load_project_config(project_dir)
    if config is None:
        raise ConfigNotFoundError(get_config_path(project_dir))
    return config


def save_project_config(project_dir: Path, config: ProjectConfig) -> Path:
    config_path = get_config_path(project_dir)
    write_json_atomic(config_path, config.to_json_dict())
    return config_path
