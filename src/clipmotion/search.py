"""Lookup of animations in the registry index by source video URL."""

from collections.abc import Iterable
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from clipmotion.models.registry import AnimationEntry, RegistryIndex

SIMILAR_LIMIT = 3

# Query parameters that identify the video itself (youtube.com/watch?v=...)
_IDENTITY_PARAMS = ("v",)

REQUEST_ISSUE_URL = (
    "https://github.com/nerdboi008/clipmotion/issues/new?template=animation-request.md"
)


def normalize_url(url: str) -> str:
    """Drop tracking query parameters, fragment and trailing slash."""
    stripped = url.strip()
    parts = urlsplit(stripped)
    if not parts.scheme or not parts.netloc:
        return stripped.rstrip("/")

    query = urlencode(
        [(key, value) for key, value in parse_qsl(parts.query) if key in _IDENTITY_PARAMS]
    )
    return urlunsplit((parts.scheme, parts.netloc.lower(), parts.path.rstrip("/"), query, ""))


def is_valid_url(url: str) -> bool:
    parts = urlsplit(url.strip())
    return parts.scheme in ("http", "https") and bool(parts.netloc)


def host_of(url: str) -> str | None:
    """Lower-cased host without a leading `www.`, or None for non-URLs."""
    hostname = urlsplit(url.strip()).hostname
    if not hostname:
        return None
    return hostname.removeprefix("www.")


def find_by_url(index: RegistryIndex, video_url: str) -> AnimationEntry | None:
    """The animation whose sources include video_url.

    The index holds one entry per framework; entries sharing the matched id
    are merged so `libraries` lists every framework that ships it.
    """
    target = normalize_url(video_url)
    match = next(
        (
            entry
            for entry in index.animations
            if any(normalize_url(source) == target for source in entry.sources)
        ),
        None,
    )
    if match is None:
        return None
    return _merge_entries([entry for entry in index.animations if entry.id == match.id])


def find_similar(
    index: RegistryIndex, video_url: str, *, limit: int = SIMILAR_LIMIT
) -> list[AnimationEntry]:
    """Animations sourced from the same site as video_url, one per id."""
    host = host_of(video_url)
    if host is None:
        return []

    similar: list[AnimationEntry] = []
    seen: set[str] = set()
    for entry in index.animations:
        if entry.id in seen:
            continue
        if any(host_of(source) == host for source in entry.sources):
            seen.add(entry.id)
            similar.append(entry)
            if len(similar) == limit:
                break
    return similar


def _merge_entries(entries: list[AnimationEntry]) -> AnimationEntry:
    first = entries[0]
    return first.model_copy(
        update={
            "libraries": _unique(lib for entry in entries for lib in entry.libraries),
            "sources": _unique(src for entry in entries for src in entry.sources),
            "tags": _unique(tag for entry in entries for tag in entry.tags),
            "demo_url": next((e.demo_url for e in entries if e.demo_url), None),
        }
    )


def _unique(values: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(values))
