"""Registry client reading a local copy of the build output."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from clipmotion.errors import RegistryFetchError, RegistryItemNotFoundError
from clipmotion.integrations.registry_client.abc import RegistryClient
from clipmotion.models.registry import RegistryComponent, RegistryIndex

logger = logging.getLogger(__name__)

# Where `clipmotion registry:build` writes, relative to the working directory
LOCAL_REGISTRY_DIR = Path("public") / "r"


class LocalRegistryClient(RegistryClient):
    """Reads `<root>/<framework>/<name>.json` from disk."""

    def __init__(self, root: Path) -> None:
        self._root = root

    @property
    def root(self) -> Path:
        return self._root

    def item_path(self, name: str, framework: str) -> Path:
        return self._root / framework / f"{name}.json"

    def fetch_item(self, name: str, framework: str) -> RegistryComponent:
        path = self.item_path(name, framework)
        logger.debug("Reading local component %s", path)
        if not path.exists():
            raise RegistryItemNotFoundError(name, framework)

        try:
            return RegistryComponent.model_validate_json(path.read_text(encoding="utf-8"))
        except (OSError, ValidationError) as e:
            raise RegistryFetchError(f"Failed to read {path}: {e}") from e

    def fetch_index(self) -> RegistryIndex:
        path = self._root / "index.json"
        if not path.exists():
            raise RegistryFetchError("Local registry not found. Run: clipmotion registry:build")

        try:
            return RegistryIndex.model_validate(json.loads(path.read_text(encoding="utf-8")))
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            raise RegistryFetchError(f"Failed to parse local index.json: {e}") from e

    def has_item(self, name: str, framework: str) -> bool:
        return self.item_path(name, framework).is_file()
