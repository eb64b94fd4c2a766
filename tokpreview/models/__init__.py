"""Pydantic models for the tokpreview application."""

from __future__ import annotations

from .api import (
    ErrorResponse,
    MetadataResponse,
    VideoHighlightResponse,
    VideoListResponse,
)
from .config import (
    HydrationConfig,
    PathsConfig,
    RelayConfig,
    ResolverConfig,
    TokPreviewConfig,
    get_settings,
)
from .metadata import NormalizedMetadata, VideoReference

__all__ = [
    "ErrorResponse",
    "HydrationConfig",
    "MetadataResponse",
    "NormalizedMetadata",
    "PathsConfig",
    "RelayConfig",
    "ResolverConfig",
    "TokPreviewConfig",
    "VideoHighlightResponse",
    "VideoListResponse",
    "VideoReference",
    "get_settings",
]
