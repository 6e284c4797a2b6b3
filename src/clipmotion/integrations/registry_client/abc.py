"""Registry client abstraction.

Fetches published artifacts by (name, framework) from a remote base URL or a
local mirror of the build output. Implementations follow the ABC/Real/Fake
pattern so the installer can be tested without network access.
"""

from abc import ABC, abstractmethod

from clipmotion.models.registry import FRAMEWORKS, RegistryComponent, RegistryIndex


class RegistryClient(ABC):
    """Abstract read access to a registry."""

    @abstractmethod
    def fetch_item(self, name: str, framework: str) -> RegistryComponent:
        """Fetch one artifact.

        Raises:
            RegistryItemNotFoundError: If the item does not exist for framework
            RegistryFetchError: For any other failure (network, HTTP status, bad JSON)
        """
        ...

    @abstractmethod
    def fetch_index(self) -> RegistryIndex:
        """Fetch the aggregate index.json.

        Raises:
            RegistryFetchError: If the index cannot be read or parsed
        """
        ...

    @abstractmethod
    def has_item(self, name: str, framework: str) -> bool:
        """Cheap availability check; never raises for missing items."""
        ...

    def close(self) -> None:
        """Release any held connections."""

    def __enter__(self) -> "RegistryClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def find_available_frameworks(self, name: str, *, exclude: str | None = None) -> list[str]:
        """Known frameworks that publish an item called name."""
        return [
            framework
            for framework in FRAMEWORKS
            if framework != exclude and self.has_item(name, framework)
        ]
