"""Doc-comment metadata extraction.

Components declare their catalog facts as tags in a `/** ... */` block:

    /**
     * @description Smooth image crossfade effect on click
     * @category Click Interactions
     * @source https://www.instagram.com/p/DRPOaKMiItG/
     * @author NerdBoi008
     * @github https://github.com/nerdboi008
     */
"""

import re
from dataclasses import dataclass, field

from clipmotion.models.registry import Contributor, ItemType

_DOC_BLOCK = re.compile(r"/\*\*(.*?)\*/", re.DOTALL)
_TAG_LINE = re.compile(r"^\s*\*?\s*@([A-Za-z]+)[ \t]*(.*?)\s*$", re.MULTILINE)

_DIFFICULTIES = ("easy", "medium", "hard")

# Tag names accepted as the contributor's X profile
_X_TAGS = ("x", "twitter")


@dataclass(frozen=True)
class SourceMetadata:
    """Facts declared in a source file's doc-comment tags."""

    description: str | None = None
    category: str | None = None
    source: str | None = None
    difficulty: str | None = None
    tags: list[str] = field(default_factory=list)
    demo_url: str | None = None
    contributor: Contributor | None = None


def extract_tags(text: str) -> dict[str, str]:
    """Collect `@tag value` pairs from all doc-comment blocks.

    The first non-empty value wins when a tag repeats.
    """
    tags: dict[str, str] = {}
    for block in _DOC_BLOCK.finditer(text):
        for match in _TAG_LINE.finditer(block.group(1)):
            tag = match.group(1).lower()
            value = match.group(2).strip()
            if value and tag not in tags:
                tags[tag] = value
    return tags


def extract_metadata(text: str) -> SourceMetadata:
    """Extract description, category, provenance and contributor facts.

    Every field is optional. When no contributor tag is present the
    contributor is None rather than an object of empty strings.
    """
    tags = extract_tags(text)

    difficulty = tags.get("difficulty")
    if difficulty is not None:
        difficulty = difficulty.lower()
        if difficulty not in _DIFFICULTIES:
            difficulty = None

    tag_list: list[str] = []
    if "tags" in tags:
        tag_list = [tag.strip() for tag in tags["tags"].split(",") if tag.strip()]

    return SourceMetadata(
        description=tags.get("description"),
        category=tags.get("category"),
        source=tags.get("source"),
        difficulty=difficulty,
        tags=tag_list,
        demo_url=tags.get("demo"),
        contributor=_extract_contributor(tags),
    )


def _extract_contributor(tags: dict[str, str]) -> Contributor | None:
    x_profile = next((tags[tag] for tag in _X_TAGS if tag in tags), None)
    name = tags.get("author")
    github = tags.get("github")
    website = tags.get("website")

    if name is None and github is None and x_profile is None and website is None:
        return None
    return Contributor.model_construct(name=name, github=github, x=x_profile, website=website)


def default_description(name: str, item_type: ItemType, framework: str) -> str:
    """Fallback description, e.g. "image-crossfade component for react"."""
    short_type = item_type.value.removeprefix("registry:")
    return f"{name} {short_type} for {framework}"
