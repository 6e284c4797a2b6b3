"""Registry client reading artifacts over HTTP."""

import json
import logging

import httpx
from pydantic import ValidationError

from clipmotion.errors import RegistryFetchError, RegistryItemNotFoundError
from clipmotion.integrations.registry_client.abc import RegistryClient
from clipmotion.models.registry import RegistryComponent, RegistryIndex

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class RemoteRegistryClient(RegistryClient):
    """Production client for `<base_url>/<framework>/<name>.json`."""

    def __init__(self, base_url: str, client: httpx.Client | None = None) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = client if client is not None else httpx.Client(timeout=DEFAULT_TIMEOUT)

    def item_url(self, name: str, framework: str) -> str:
        return f"{self._base_url}/{framework}/{name}.json"

    def fetch_item(self, name: str, framework: str) -> RegistryComponent:
        url = self.item_url(name, framework)
        logger.debug("Fetching component %s for %s from %s", name, framework, url)

        response = self._get(url)
        if response.status_code == 404:
            raise RegistryItemNotFoundError(name, framework)
        if response.is_error:
            raise RegistryFetchError(
                f"Failed to fetch component: HTTP {response.status_code}: {response.reason_phrase}"
            )

        try:
            return RegistryComponent.model_validate(response.json())
        except (json.JSONDecodeError, ValidationError) as e:
            raise RegistryFetchError(f"Invalid registry response from {url}: {e}") from e

    def fetch_index(self) -> RegistryIndex:
        url = f"{self._base_url}/index.json"
        logger.debug("Fetching registry index from %s", url)

        response = self._get(url)
        if response.is_error:
            raise RegistryFetchError(
                f"Failed to fetch registry index: HTTP {response.status_code}: "
                f"{response.reason_phrase}"
            )

        try:
            return RegistryIndex.model_validate(response.json())
        except (json.JSONDecodeError, ValidationError) as e:
            logger.debug("Raw index.json content: %s", response.text[:500])
            raise RegistryFetchError(f"Failed to parse registry index JSON: {e}") from e

    def has_item(self, name: str, framework: str) -> bool:
        try:
            response = self._client.head(self.item_url(name, framework))
        except httpx.HTTPError:
            logger.debug("Availability check failed for %s/%s", framework, name, exc_info=True)
            return False
        return response.is_success

    def close(self) -> None:
        self._client.close()

    def _get(self, url: str) -> httpx.Response:
        try:
            return self._client.get(url)
        except httpx.HTTPError as e:
            raise RegistryFetchError(f"Failed to fetch {url}: {e}") from e
