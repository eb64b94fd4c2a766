"""Placeholder catalog of highlighted videos."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ValidationError

from .config import get_catalog_path

log = logging.getLogger(__name__)


class VideoHighlight(BaseModel):
    """A highlighted video with placeholder display values."""

    title: str = ""
    views: str = ""
    image: str = ""
    link: str
    dynamic_views: bool = False


def _tiktok_highlight(handle: str, kind: str, item_id: str, **kwargs) -> VideoHighlight:
    return VideoHighlight(
        image=f"https://www.tiktok.com/api/img/?itemId={item_id}&location=0",
        link=f"https://www.tiktok.com/@{handle}/{kind}/{item_id}",
        **kwargs,
    )


DEFAULT_HIGHLIGHTS: tuple[VideoHighlight, ...] = (
    _tiktok_highlight("jewelln", "video", "7572049501758704917"),
    _tiktok_highlight("jewelln", "video", "7573325676481236245"),
    _tiktok_highlight("jewelln", "video", "7575011066124586261"),
    _tiktok_highlight("jewelln", "video", "7569058377574157588"),
    _tiktok_highlight("jewelln", "photo", "7557170740680822024"),
)


def load_highlights(path: Path | None = None) -> list[VideoHighlight]:
    """
    Load the highlight catalog.

    A JSON list at `path` (default: videos.json in the data dir) replaces the
    built-in entries. A missing file falls back to the defaults; a malformed
    one raises ValueError.
    """
    catalog_path = path or get_catalog_path()
    if not catalog_path.exists():
        return [video.model_copy() for video in DEFAULT_HIGHLIGHTS]

    try:
        with open(catalog_path) as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid catalog JSON in {catalog_path}: {e}") from e

    if not isinstance(raw, list):
        raise ValueError(f"Catalog {catalog_path} must contain a JSON list")

    try:
        videos = [VideoHighlight.model_validate(item) for item in raw]
    except ValidationError as e:
        raise ValueError(f"Invalid catalog entry in {catalog_path}: {e}") from e

    log.debug("loaded %d highlights from %s", len(videos), catalog_path)
    return videos
