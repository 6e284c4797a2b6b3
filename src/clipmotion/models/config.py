"""Project configuration models for clipmotion-components.json."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from clipmotion.models.registry import Framework

CONFIG_FILENAME = "clipmotion-components.json"
CONFIG_SCHEMA_URL = "https://clipmotion.dev/schema.json"
DEFAULT_REGISTRY_URL = "https://raw.githubusercontent.com/nerdboi008/clipmotion/main/public/r"


class ConfigAliases(BaseModel):
    """Install directories, relative to the project root."""

    model_config = ConfigDict(frozen=True)

    components: str
    utils: str

    @field_validator("components", "utils")
    @classmethod
    def validate_alias(cls, v: str) -> str:
        if not v.strip():
            msg = "Alias path cannot be empty"
            raise ValueError(msg)
        return v


class RegistryConfig(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    base_url: str | None = Field(default=None, alias="baseUrl")


class ProjectConfig(BaseModel):
    """Contents of clipmotion-components.json.

    Unknown keys ($schema, tailwind, ...) are preserved on round-trip.
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    framework: Framework
    aliases: ConfigAliases
    registry: RegistryConfig = Field(default_factory=RegistryConfig)

    @property
    def registry_url(self) -> str:
        base_url = self.registry.base_url or DEFAULT_REGISTRY_URL
        return base_url.rstrip("/")

    def to_json_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def default_aliases(framework: Framework, components_dir: str | None = None) -> ConfigAliases:
    """Install directories used by `clipmotion init`.

    Utils live inside the components directory so they do not collide with an
    existing lib/utils in the user's project.
    """
    if framework == "angular":
        components = components_dir or "app/components"
        return ConfigAliases(components=components, utils=f"{components}/utils")

    components = components_dir or "components"
    if framework == "vue":
        return ConfigAliases(components=components, utils="utils")
    return ConfigAliases(components=components, utils=f"{components}/utils")


def build_default_config(framework: Framework, components_dir: str | None = None) -> ProjectConfig:
    return ProjectConfig.model_validate(
        {
            "$schema": CONFIG_SCHEMA_URL,
            "framework": framework,
            "aliases": default_aliases(framework, components_dir).model_dump(),
            "registry": {"baseUrl": DEFAULT_REGISTRY_URL},
        }
    )
