"""Pydantic models for FastAPI response schemas."""

from __future__ import annotations

from pydantic import BaseModel


class MetadataResponse(BaseModel):
    """Body of a successful metadata lookup."""

    title: str | None = None
    cover: str | None = None
    author: str | None = None
    views: int | None = None


class ErrorResponse(BaseModel):
    """Body of any non-200 metadata response."""

    error: str


class VideoHighlightResponse(BaseModel):
    """A catalog entry after hydration."""

    title: str = ""
    views: str = ""
    image: str = ""
    link: str
    dynamic_views: bool = False


class VideoListResponse(BaseModel):
    """Hydrated highlight catalog."""

    videos: list[VideoHighlightResponse] = []
    count: int = 0
