"""Ordered-fallback resolution chain."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor

from ..models.config import TokPreviewConfig
from ..models.metadata import NormalizedMetadata
from .relay import RelayClient
from .strategies import AggregatorStrategy, OEmbedStrategy, PageTextStrategy

log = logging.getLogger(__name__)

Strategy = Callable[[str], NormalizedMetadata | None]


class MetadataResolver:
    """Try each strategy in order and return the first usable record.

    Fields never mix across strategies, and each strategy runs at most once
    per call. None means no strategy produced a title or a cover.
    """

    def __init__(self, strategies: Sequence[Strategy]) -> None:
        if not strategies:
            raise ValueError("at least one strategy is required")
        self.strategies = list(strategies)

    def resolve(self, url: str) -> NormalizedMetadata | None:
        if not url or not url.strip():
            raise ValueError("url is required")

        for strategy in self.strategies:
            metadata = strategy(url)
            if metadata is not None and metadata.has_content:
                log.debug("resolved %s via %s", url, getattr(strategy, "name", strategy))
                return metadata

        log.info("metadata not available for %s", url)
        return None


def resolve_many(
    resolver: MetadataResolver,
    urls: Sequence[str],
    max_workers: int = 8,
    *,
    isolate_errors: bool = False,
) -> list[NormalizedMetadata | None]:
    """
    Resolve independent URLs concurrently, preserving input order.

    With isolate_errors, an unexpected fault for one URL is logged and that
    URL counts as unavailable; otherwise the first fault propagates.
    """

    def _resolve_one(url: str) -> NormalizedMetadata | None:
        if not isolate_errors:
            return resolver.resolve(url)
        try:
            return resolver.resolve(url)
        except Exception:
            log.exception("resolution failed for %s", url)
            return None

    if not urls:
        return []
    if max_workers <= 1 or len(urls) == 1:
        return [_resolve_one(url) for url in urls]

    with ThreadPoolExecutor(max_workers=min(max_workers, len(urls))) as executor:
        return list(executor.map(_resolve_one, urls))


def build_strategies(settings: TokPreviewConfig, relay: RelayClient | None = None) -> list[Strategy]:
    """Instantiate the configured strategies in priority order."""
    relay = relay or RelayClient(settings.relay)
    factories: dict[str, Callable[[], Strategy]] = {
        AggregatorStrategy.name: lambda: AggregatorStrategy(relay, ok_code=settings.resolver.ok_code),
        OEmbedStrategy.name: lambda: OEmbedStrategy(relay),
        PageTextStrategy.name: lambda: PageTextStrategy(relay, loading_marker=settings.resolver.loading_marker),
    }

    strategies: list[Strategy] = []
    for name in settings.resolver.strategies:
        factory = factories.get(name)
        if factory is None:
            raise ValueError(f"Unknown strategy {name!r}. Must be one of: {sorted(factories)}")
        strategies.append(factory())
    return strategies


def build_resolver(settings: TokPreviewConfig | None = None) -> MetadataResolver:
    """Create a resolver from settings (loaded from config when omitted)."""
    if settings is None:
        from ..models.config import get_settings

        settings = get_settings()
    return MetadataResolver(build_strategies(settings))
