from clipmotion.integrations.registry_client.abc import RegistryClient
from clipmotion.integrations.registry_client.local import LOCAL_REGISTRY_DIR, LocalRegistryClient
from clipmotion.integrations.registry_client.remote import RemoteRegistryClient

__all__ = [
    "LOCAL_REGISTRY_DIR",
    "LocalRegistryClient",
    "RegistryClient",
    "RemoteRegistryClient",
]
