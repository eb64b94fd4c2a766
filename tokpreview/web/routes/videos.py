"""Hydrated highlight catalog route."""

import logging

from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool

from ...catalog import DEFAULT_HIGHLIGHTS, load_highlights
from ...hydration import hydrate_videos
from ...models.api import VideoHighlightResponse, VideoListResponse

router = APIRouter(tags=["videos"])
log = logging.getLogger(__name__)


@router.get("/videos", response_model=VideoListResponse)
async def list_videos(request: Request) -> VideoListResponse:
    """Return the highlight catalog with placeholders replaced where possible."""
    settings = request.app.state.settings
    resolver = request.app.state.resolver

    try:
        placeholders = load_highlights()
    except ValueError as e:
        log.warning("serving built-in highlights: %s", e)
        placeholders = [video.model_copy() for video in DEFAULT_HIGHLIGHTS]

    hydrated = await run_in_threadpool(
        hydrate_videos,
        placeholders,
        resolver,
        max_workers=settings.hydration.max_concurrency,
        platform_name=settings.hydration.platform_name,
        min_title_length=settings.hydration.min_title_length,
    )

    videos = [VideoHighlightResponse(**video.model_dump()) for video in hydrated]
    return VideoListResponse(videos=videos, count=len(videos))
