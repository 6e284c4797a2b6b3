from clipmotion.io.config import (
    get_config_path,
    load_project_config,
    require_project_config,
    save_project_config,
)
from clipmotion.io.json_file import read_json, write_json_atomic

__all__ = [
    "get_config_path",
    "load_project_config",
    "read_json",
    "require_project_config",
    "save_project_config",
    "write_json_atomic",
]
