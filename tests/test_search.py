"""Tests for video URL lookup in the registry index."""

import pytest

from clipmotion.models.registry import AnimationEntry, RegistryIndex
from clipmotion.search import find_by_url, find_similar, host_of, is_valid_url, normalize_url


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("https://www.instagram.com/p/abc/", "https://www.instagram.com/p/abc"),
        ("https://www.instagram.com/p/abc/?igsh=xyz#top", "https://www.instagram.com/p/abc"),
        ("https://WWW.TikTok.com/@a/video/1", "https://www.tiktok.com/@a/video/1"),
        ("https://www.youtube.com/watch?v=abc&t=10", "https://www.youtube.com/watch?v=abc"),
        ("  not a url/ ", "not a url"),
    ],
)
def test_normalize_url(url: str, expected: str) -> None:
    assert normalize_url(url) == expected


def test_is_valid_url() -> None:
    assert is_valid_url("https://instagram.com/p/abc")
    assert is_valid_url("http://example.com")
    assert not is_valid_url("ftp://example.com/file")
    assert not is_valid_url("instagram.com/p/abc")
    assert not is_valid_url("")


def test_host_of_strips_www() -> None:
    assert host_of("https://www.Instagram.com/p/abc") == "instagram.com"
    assert host_of("nope") is None


def _entry(entry_id: str, framework: str, sources: list[str], **kwargs) -> AnimationEntry:
    return AnimationEntry(
        id=entry_id,
        name=entry_id,
        description=entry_id,
        libraries=[framework],
        sources=sources,
        **kwargs,
    )


def test_find_by_url_merges_framework_entries() -> None:
    """Test that per-framework index entries of one id are reported together."""
    index = RegistryIndex(
        animations=[
            _entry("fade", "react", ["https://instagram.com/p/1"]),
            _entry("other", "react", ["https://instagram.com/p/2"]),
            _entry("fade", "vue", ["https://instagram.com/p/1"], demo_url="https://demo.test"),
        ]
    )

    match = find_by_url(index, "https://instagram.com/p/1/")

    assert match is not None
    assert match.id == "fade"
    assert match.libraries == ["react", "vue"]
    assert match.sources == ["https://instagram.com/p/1"]
    assert match.demo_url == "https://demo.test"


def test_find_by_url_no_match() -> None:
    index = RegistryIndex(animations=[_entry("fade", "react", ["https://instagram.com/p/1"])])
    assert find_by_url(index, "https://instagram.com/p/2") is None


def test_find_similar_is_limited_and_unique() -> None:
    index = RegistryIndex(
        animations=[
            _entry("a", "react", ["https://www.tiktok.com/@x/video/1"]),
            _entry("a", "vue", ["https://www.tiktok.com/@x/video/1"]),
            _entry("b", "react", ["https://tiktok.com/@x/video/2"]),
            _entry("c", "react", ["https://instagram.com/p/3"]),
            _entry("d", "react", ["https://www.tiktok.com/@y/video/4"]),
            _entry("e", "react", ["https://www.tiktok.com/@y/video/5"]),
        ]
    )

    similar = find_similar(index, "https://tiktok.com/@z/video/9")

    assert [entry.id for entry in similar] == ["a", "b", "d"]
