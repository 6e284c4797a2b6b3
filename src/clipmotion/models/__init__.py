from clipmotion.models.config import (
    CONFIG_FILENAME,
    DEFAULT_REGISTRY_URL,
    ConfigAliases,
    ProjectConfig,
    RegistryConfig,
    build_default_config,
    default_aliases,
)
from clipmotion.models.registry import (
    FRAMEWORK_BASE_PACKAGES,
    FRAMEWORKS,
    AnimationEntry,
    Contributor,
    Difficulty,
    Framework,
    IndexStats,
    ItemMeta,
    ItemType,
    RegistryComponent,
    RegistryFile,
    RegistryIndex,
    RegistryItem,
)

__all__ = [
    "AnimationEntry",
    "CONFIG_FILENAME",
    "ConfigAliases",
    "Contributor",
    "DEFAULT_REGISTRY_URL",
    "Difficulty",
    "FRAMEWORKS",
    "FRAMEWORK_BASE_PACKAGES",
    "Framework",
    "IndexStats",
    "ItemMeta",
    "ItemType",
    "ProjectConfig",
    "RegistryComponent",
    "RegistryConfig",
    "RegistryFile",
    "RegistryIndex",
    "RegistryItem",
    "build_default_config",
    "default_aliases",
]
