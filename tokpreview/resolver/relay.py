"""Outbound requests through the text-rendering relay."""

import logging
from urllib.parse import quote

import httpx

from ..models.config import RelayConfig

log = logging.getLogger(__name__)

# Same unreserved set as JavaScript's encodeURIComponent
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_uri_component(value: str) -> str:
    """Percent-encode a value for use inside a query parameter."""
    return quote(value, safe=_URI_COMPONENT_SAFE)


class RelayClient:
    """Fetches upstream resources via the relay, returning body text or None.

    Every call is a fresh, unauthenticated GET that asks intermediaries not to
    serve a cached copy. Transport errors and non-2xx statuses are misses.
    """

    def __init__(self, config: RelayConfig | None = None) -> None:
        self.config = config or RelayConfig()

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Content-Type": "text/plain",
            "User-Agent": self.config.user_agent,
            "Cache-Control": "no-cache",
            "Pragma": "no-cache",
        }

    def aggregator_url(self, target_url: str) -> str:
        return f"{self.config.base_url}{self.config.aggregator_endpoint}{encode_uri_component(target_url)}"

    def oembed_url(self, target_url: str) -> str:
        return f"{self.config.base_url}{self.config.oembed_endpoint}{encode_uri_component(target_url)}"

    def page_url(self, target_url: str) -> str:
        return f"{self.config.base_url}{target_url}"

    def fetch_text(self, url: str) -> str | None:
        """GET a relay URL and return the body, or None on any transport miss."""
        kwargs = {}
        if self.config.timeout_seconds is not None:
            kwargs["timeout"] = self.config.timeout_seconds

        try:
            response = httpx.get(url, headers=self.headers, follow_redirects=True, **kwargs)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            log.debug("relay request failed for %s: %s", url, e)
            return None

        if not response.is_success:
            log.debug("relay returned HTTP %d for %s", response.status_code, url)
            return None

        return response.text
