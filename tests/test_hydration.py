"""Tests for placeholder hydration and view formatting."""

import pytest

from tokpreview.catalog import VideoHighlight
from tokpreview.hydration import format_view_count, has_meaningful_title, hydrate_videos, merge_metadata
from tokpreview.models.metadata import NormalizedMetadata
from tokpreview.resolver import MetadataResolver


@pytest.fixture
def placeholder():
    return VideoHighlight(
        title="",
        views="",
        image="https://www.tiktok.com/api/img/?itemId=1&location=0",
        link="https://www.tiktok.com/@jewelln/video/1",
    )


@pytest.mark.parametrize(
    ("count", "expected"),
    [
        (0, "0"),
        (999, "999"),
        (1_000, "1K"),
        (1_250, "1.3K"),
        (12_345, "12.3K"),
        (1_000_000, "1M"),
        (1_250_000, "1.3M"),
        (2_040_000, "2M"),
        (None, None),
        (-1, None),
        (float("nan"), None),
    ],
)
def test_format_view_count(count, expected):
    assert format_view_count(count) == expected


@pytest.mark.parametrize(
    ("title", "expected"),
    [
        ("Morning routine", True),
        ("  padded title  ", True),
        ("abc", True),
        ("ab", False),
        ("", False),
        ("   ", False),
        (None, False),
        ("TikTok - Make Your Day", False),
        ("my tiktok era", False),
    ],
)
def test_has_meaningful_title(title, expected):
    assert has_meaningful_title(title) is expected


def test_merge_replaces_meaningful_values(placeholder):
    merged = merge_metadata(
        placeholder,
        NormalizedMetadata(title="  Paris diaries ", cover="https://img/c.jpg", views=12_345),
    )

    assert merged.title == "Paris diaries"
    assert merged.image == "https://img/c.jpg"
    assert merged.views == "12.3K Views"
    assert placeholder.title == ""


def test_merge_keeps_placeholder_title_for_generic_titles(placeholder):
    video = placeholder.model_copy(update={"title": "Static title"})
    merged = merge_metadata(video, NormalizedMetadata(title="TikTok", cover="https://img/c.jpg"))

    assert merged.title == "Static title"
    assert merged.image == "https://img/c.jpg"


def test_merge_keeps_static_views_unless_dynamic(placeholder):
    static = placeholder.model_copy(update={"views": "2M Views"})
    dynamic = static.model_copy(update={"dynamic_views": True})
    metadata = NormalizedMetadata(title="Paris", views=5_000)

    assert merge_metadata(static, metadata).views == "2M Views"
    assert merge_metadata(dynamic, metadata).views == "5K Views"


def test_merge_without_views_keeps_placeholder(placeholder):
    video = placeholder.model_copy(update={"views": "1K Views", "dynamic_views": True})
    assert merge_metadata(video, NormalizedMetadata(title="Paris")).views == "1K Views"


def test_merge_with_no_metadata_is_identity(placeholder):
    assert merge_metadata(placeholder, None) == placeholder


def test_hydrate_videos_isolates_failures(placeholder):
    good = placeholder.model_copy(update={"link": "https://www.tiktok.com/@a/video/good"})
    bad = placeholder.model_copy(update={"link": "https://www.tiktok.com/@a/video/bad", "title": "Keep me"})
    missing = placeholder.model_copy(update={"link": "https://www.tiktok.com/@a/video/missing"})

    def _strategy(url):
        if url.endswith("bad"):
            raise RuntimeError("boom")
        if url.endswith("missing"):
            return None
        return NormalizedMetadata(title="Resolved", views=10)

    hydrated = hydrate_videos([good, bad, missing], MetadataResolver([_strategy]), max_workers=3)

    assert [video.title for video in hydrated] == ["Resolved", "Keep me", ""]
    assert hydrated[0].views == "10 Views"


def test_hydrate_videos_sequential_path(placeholder):
    hydrated = hydrate_videos(
        [placeholder],
        MetadataResolver([lambda url: NormalizedMetadata(title="Only one")]),
        max_workers=1,
    )
    assert hydrated[0].title == "Only one"


def test_hydrate_videos_custom_platform_name(placeholder):
    hydrated = hydrate_videos(
        [placeholder],
        MetadataResolver([lambda url: NormalizedMetadata(title="Reels recap")]),
        platform_name="reels",
    )
    assert hydrated[0].title == ""


@pytest.mark.parametrize("count", [float("inf"), float("-inf")])
def test_format_view_count_non_finite(count):
    assert format_view_count(count) is None


def test_format_view_count_huge_integer():
    assert format_view_count(10**30) == "1000000000000000000000000M"
