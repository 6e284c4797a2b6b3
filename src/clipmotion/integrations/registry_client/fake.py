"""Fake registry client for testing.

FakeRegistryClient serves pre-configured components from memory and records
every fetch, so tests can assert on fetch order and de-duplication.
"""

from clipmotion.errors import RegistryFetchError, RegistryItemNotFoundError
from clipmotion.integrations.registry_client.abc import RegistryClient
from clipmotion.models.registry import RegistryComponent, RegistryIndex


class FakeRegistryClient(RegistryClient):
    """In-memory registry keyed by (framework, name).

    All state is provided via the constructor.
    """

    def __init__(
        self,
        *,
        items: dict[tuple[str, str], RegistryComponent] | None = None,
        index: RegistryIndex | None = None,
        transient_failures: set[tuple[str, str]] | None = None,
    ) -> None:
        """Create the fake.

        Args:
            items: Mapping of (framework, name) -> component
            index: Index returned by fetch_index (None makes it fail)
            transient_failures: (framework, name) pairs whose fetch raises
                RegistryFetchError instead of succeeding
        """
        self._items = items or {}
        self._index = index
        self._transient_failures = transient_failures or set()
        self._fetch_calls: list[tuple[str, str]] = []
        self._has_item_calls: list[tuple[str, str]] = []
        self._closed = False

    @property
    def fetch_calls(self) -> list[tuple[str, str]]:
        """(framework, name) pairs passed to fetch_item, in call order.

        This property is for test assertions only.
        """
        return self._fetch_calls

    @property
    def has_item_calls(self) -> list[tuple[str, str]]:
        return self._has_item_calls

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        self._closed = True

    def fetch_item(self, name: str, framework: str) -> RegistryComponent:
        key = (framework, name)
        self._fetch_calls.append(key)
        if key in self._transient_failures:
            raise RegistryFetchError(f"Failed to fetch component: HTTP 503 for {name}")
        if key not in self._items:
            raise RegistryItemNotFoundError(name, framework)
        return self._items[key]

    def fetch_index(self) -> RegistryIndex:
        if self._index is None:
            raise RegistryFetchError("Failed to fetch registry index: HTTP 404")
        return self._index

    def has_item(self, name: str, framework: str) -> bool:
        self._has_item_calls.append((framework, name))
        return (framework, name) in self._items
