"""Metadata extraction strategies.

Each strategy is a callable taking a video URL and returning a
NormalizedMetadata, or None when its upstream produced nothing usable.
Expected upstream failures never raise.
"""

import logging

from ..models.metadata import NormalizedMetadata
from .parsers import (
    coerce_view_count,
    extract_markdown_images,
    extract_markdown_title,
    first_string,
    parse_json_slice,
    pick_cover,
    string_or_none,
)
from .relay import RelayClient

log = logging.getLogger(__name__)


class MetadataStrategy:
    """Base class for one link of the resolution chain."""

    name = "base"

    def __init__(self, relay: RelayClient) -> None:
        self.relay = relay

    def __call__(self, url: str) -> NormalizedMetadata | None:
        raise NotImplementedError

    def _miss(self, url: str, reason: str) -> None:
        log.debug("%s strategy miss for %s: %s", self.name, url, reason)
        return None


class AggregatorStrategy(MetadataStrategy):
    """Structured third-party aggregator API, read through the relay."""

    name = "aggregator"

    def __init__(self, relay: RelayClient, ok_code: int = 0) -> None:
        super().__init__(relay)
        self.ok_code = ok_code

    def __call__(self, url: str) -> NormalizedMetadata | None:
        raw = self.relay.fetch_text(self.relay.aggregator_url(url))
        if raw is None:
            return self._miss(url, "no response")

        payload = parse_json_slice(raw.strip())
        if not isinstance(payload, dict):
            return self._miss(url, "unparseable payload")

        code = payload.get("code")
        if isinstance(code, bool) or code != self.ok_code:
            return self._miss(url, f"status code {code!r}")

        data = payload.get("data")
        if not isinstance(data, dict):
            return self._miss(url, "missing data")

        author = data.get("author")
        nickname = author.get("nickname") if isinstance(author, dict) else None

        return NormalizedMetadata(
            title=string_or_none(data.get("title")),
            cover=first_string(data.get("cover"), data.get("ai_dynamic_cover"), data.get("origin_cover")),
            author=string_or_none(nickname),
            views=coerce_view_count(data.get("play_count")),
            source=self.name,
        )


class OEmbedStrategy(MetadataStrategy):
    """The platform's oEmbed endpoint, read through the relay."""

    name = "oembed"

    def __call__(self, url: str) -> NormalizedMetadata | None:
        raw = self.relay.fetch_text(self.relay.oembed_url(url))
        if raw is None:
            return self._miss(url, "no response")

        payload = parse_json_slice(raw.strip())
        if not isinstance(payload, dict):
            return self._miss(url, "no JSON object in relay body")

        return NormalizedMetadata(
            title=string_or_none(payload.get("title")),
            cover=string_or_none(payload.get("thumbnail_url")),
            author=string_or_none(payload.get("author_name")),
            views=None,
            source=self.name,
        )


class PageTextStrategy(MetadataStrategy):
    """Markdown rendering of the post page itself."""

    name = "page_text"

    def __init__(self, relay: RelayClient, loading_marker: str = "tiktok-loading") -> None:
        super().__init__(relay)
        self.loading_marker = loading_marker

    def __call__(self, url: str) -> NormalizedMetadata | None:
        markdown = self.relay.fetch_text(self.relay.page_url(url))
        if markdown is None:
            return self._miss(url, "no response")

        title = extract_markdown_title(markdown)
        cover = pick_cover(extract_markdown_images(markdown), self.loading_marker)
        if title is None and cover is None:
            return self._miss(url, "no title or image in page text")

        return NormalizedMetadata(title=title, cover=cover, author=None, views=None, source=self.name)
