"""Replace placeholder highlight values with resolved metadata."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from decimal import ROUND_HALF_UP, Decimal

from .catalog import VideoHighlight
from .models.metadata import NormalizedMetadata
from .resolver import MetadataResolver

log = logging.getLogger(__name__)


def format_view_count(count: int | float | None) -> str | None:
    """Format a play count compactly: 1.2M, 3.4K, or 999."""
    if count is None or isinstance(count, bool) or (isinstance(count, float) and not math.isfinite(count)) or count < 0:
        return None

    if count >= 1_000_000:
        return _one_decimal(Decimal(count) / 1_000_000) + "M"
    if count >= 1_000:
        return _one_decimal(Decimal(count) / 1_000) + "K"
    return f"{int(count):,}"


def _one_decimal(value: Decimal) -> str:
    # Half-up, so 1.25 -> "1.3"
    text = str(value.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
    return text[:-2] if text.endswith(".0") else text


def has_meaningful_title(title: str | None, platform_name: str = "tiktok", min_length: int = 3) -> bool:
    """Reject blank titles, generic platform titles, and very short ones."""
    if not title:
        return False
    normalized = title.strip()
    if not normalized:
        return False
    if platform_name and platform_name.lower() in normalized.lower():
        return False
    return len(normalized) >= min_length


def merge_metadata(
    video: VideoHighlight,
    metadata: NormalizedMetadata | None,
    *,
    platform_name: str = "tiktok",
    min_title_length: int = 3,
) -> VideoHighlight:
    """
    Merge resolved metadata over placeholder values.

    Rules:
    - Title is replaced only by a meaningful trimmed title.
    - Image is replaced whenever a cover was resolved.
    - Views become "<count> Views" when the entry prefers dynamic views (or has
      no placeholder) and a count was resolved.
    """
    if metadata is None:
        return video.model_copy()

    updates: dict[str, str] = {}

    if has_meaningful_title(metadata.title, platform_name, min_title_length):
        updates["title"] = metadata.title.strip()

    if metadata.cover:
        updates["image"] = metadata.cover

    formatted = format_view_count(metadata.views)
    prefers_dynamic = video.dynamic_views or not video.views.strip()
    if prefers_dynamic and formatted:
        updates["views"] = f"{formatted} Views"

    return video.model_copy(update=updates)


def hydrate_videos(
    videos: Sequence[VideoHighlight],
    resolver: MetadataResolver,
    *,
    max_workers: int = 8,
    platform_name: str = "tiktok",
    min_title_length: int = 3,
) -> list[VideoHighlight]:
    """Resolve every video concurrently; failures keep the placeholder."""

    def _hydrate_one(video: VideoHighlight) -> VideoHighlight:
        try:
            metadata = resolver.resolve(video.link)
        except Exception as e:
            log.warning("keeping placeholder for %s: %s", video.link, e)
            return video.model_copy()
        return merge_metadata(
            video,
            metadata,
            platform_name=platform_name,
            min_title_length=min_title_length,
        )

    if not videos:
        return []
    if max_workers <= 1:
        return [_hydrate_one(video) for video in videos]

    with ThreadPoolExecutor(max_workers=min(max_workers, len(videos))) as executor:
        return list(executor.map(_hydrate_one, videos))
