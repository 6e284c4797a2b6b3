"""Registry item and index models.

`RegistryItem` is the publish-time schema enforced by the builder. The
installer reads artifacts through the looser `RegistryComponent` shape and
does not re-apply the publish-time rules.
"""

import re
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

Framework = Literal["nextjs", "react", "vue", "angular"]
Difficulty = Literal["easy", "medium", "hard"]

FRAMEWORKS: tuple[Framework, ...] = ("nextjs", "react", "vue", "angular")

# Package every item of a framework depends on
FRAMEWORK_BASE_PACKAGES: dict[str, str] = {
    "nextjs": "next",
    "react": "react",
    "vue": "vue",
    "angular": "@angular/core",
}

KEBAB_CASE_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


class ItemType(str, Enum):
    """Kind of registry item; decides install location and file naming."""

    COMPONENT = "registry:component"
    LIB = "registry:lib"
    HOOK = "registry:hook"

    @classmethod
    def parse(cls, value: str) -> "ItemType":
        """Accept both "registry:lib" and the short "lib" form."""
        normalized = value if value.startswith("registry:") else f"registry:{value}"
        return cls(normalized)


class RegistryFile(BaseModel):
    """One file shipped by a registry item."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str  # Target path relative to the install directory
    content: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            msg = "File name cannot be empty"
            raise ValueError(msg)
        return v


class Contributor(BaseModel):
    """Credit information for the author of an item."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    github: str | None = None
    x: str | None = None
    website: str | None = None

    @field_validator("github")
    @classmethod
    def validate_github(cls, v: str | None) -> str | None:
        if v is not None and not v.startswith("https://github.com/"):
            msg = "GitHub profile must start with https://github.com/"
            raise ValueError(msg)
        return v

    @field_validator("website", "x")
    @classmethod
    def validate_url(cls, v: str | None) -> str | None:
        if v is not None and not re.match(r"^https?://\S+$", v):
            msg = f"Invalid URL: {v}"
            raise ValueError(msg)
        return v


class ItemMeta(BaseModel):
    """Provenance and catalog metadata for an item."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    source: str
    category: str | None = None
    difficulty: Difficulty | None = None
    tags: list[str] = Field(default_factory=list)
    demo_url: str | None = Field(default=None, alias="demoUrl")
    contributor: Contributor | None = None

    @field_validator("source")
    @classmethod
    def validate_source(cls, v: str) -> str:
        if not v.strip():
            msg = "Source cannot be empty"
            raise ValueError(msg)
        return v


class RegistryItem(BaseModel):
    """A published, schema-validated unit of distribution."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    type: ItemType
    framework: Framework
    description: str
    files: list[RegistryFile] = Field(min_length=1)
    dependencies: list[str] = Field(default_factory=list)
    dev_dependencies: list[str] = Field(default_factory=list, alias="devDependencies")
    registry_dependencies: list[str] = Field(default_factory=list, alias="registryDependencies")
    meta: ItemMeta

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not KEBAB_CASE_PATTERN.match(v):
            msg = f"Name must be kebab-case: {v!r}"
            raise ValueError(msg)
        return v

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, v: Any) -> Any:
        if isinstance(v, str):
            return ItemType.parse(v)
        return v

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str) -> str:
        if not v.strip():
            msg = "Description cannot be empty"
            raise ValueError(msg)
        return v

    @field_validator("dependencies", "dev_dependencies", "registry_dependencies")
    @classmethod
    def validate_package_list(cls, v: list[str]) -> list[str]:
        for entry in v:
            if not entry.strip():
                msg = "Dependency names cannot be empty"
                raise ValueError(msg)
        if len(set(v)) != len(v):
            msg = "Dependency names must be unique"
            raise ValueError(msg)
        return v

    def to_json_dict(self) -> dict[str, Any]:
        """Serialize with the artifact's camelCase keys, dropping unset optionals."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class RegistryComponent(BaseModel):
    """Install-time view of a fetched artifact.

    Only the shape is checked: the builder's schema gate already vouched for
    the content.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    name: str
    type: str
    files: list[RegistryFile]
    description: str | None = None
    dependencies: list[str] = Field(default_factory=list)
    dev_dependencies: list[str] = Field(default_factory=list, alias="devDependencies")
    registry_dependencies: list[str] = Field(default_factory=list, alias="registryDependencies")
    meta: dict[str, Any] = Field(default_factory=dict)


class AnimationEntry(BaseModel):
    """Denormalized index summary of one item, used for video-URL lookup."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    description: str
    libraries: list[str]
    sources: list[str] = Field(default_factory=list)
    difficulty: Difficulty = "medium"
    tags: list[str] = Field(default_factory=list)
    demo_url: str | None = Field(default=None, alias="demoUrl")


class IndexStats(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    total_components: int = Field(alias="totalComponents")
    total_utilities: int = Field(alias="totalUtilities")
    total_frameworks: int = Field(alias="totalFrameworks")


class RegistryIndex(BaseModel):
    """Aggregate catalog written to `<output>/index.json`."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    frameworks: list[str] = Field(default_factory=list)
    stats: IndexStats | None = None
    last_updated: str | None = Field(default=None, alias="lastUpdated")
    animations: list[AnimationEntry] = Field(default_factory=list)

    def to_json_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
