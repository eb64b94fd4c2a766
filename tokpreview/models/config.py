"""Pydantic models for tokpreview configuration."""

from __future__ import annotations

from pydantic import BaseModel


class RelayConfig(BaseModel):
    """Text-rendering relay and upstream endpoint configuration."""

    base_url: str = "https://r.jina.ai/"
    aggregator_endpoint: str = "https://www.tikwm.com/api/?url="
    oembed_endpoint: str = "https://www.tiktok.com/oembed?url="
    user_agent: str = "Mozilla/5.0 (compatible; TikTokPreview/1.0)"
    timeout_seconds: float | None = None


class ResolverConfig(BaseModel):
    """Strategy chain configuration."""

    ok_code: int = 0
    loading_marker: str = "tiktok-loading"
    strategies: list[str] = ["aggregator", "oembed", "page_text"]


class HydrationConfig(BaseModel):
    """Catalog hydration configuration."""

    max_concurrency: int = 8
    platform_name: str = "tiktok"
    min_title_length: int = 3


class PathsConfig(BaseModel):
    """Paths configuration."""

    data_dir: str | None = None


class TokPreviewConfig(BaseModel):
    """Top-level tokpreview configuration."""

    relay: RelayConfig = RelayConfig()
    resolver: ResolverConfig = ResolverConfig()
    hydration: HydrationConfig = HydrationConfig()
    paths: PathsConfig = PathsConfig()


def get_settings() -> TokPreviewConfig:
    """Load the merged JSON config into its typed form."""
    from ..config import load_config

    return TokPreviewConfig.model_validate(load_config())
