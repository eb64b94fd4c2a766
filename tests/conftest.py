"""Shared pytest fixtures for tokpreview tests."""

import sys
from pathlib import Path

import pytest

# Add the package to the path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Point config and data lookups at an empty temp dir."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("TOKPREVIEW_DATA_DIR", str(tmp_path / "data"))
    return tmp_path


class FakeResponse:
    """Minimal stand-in for httpx.Response."""

    def __init__(self, text: str = "", status_code: int = 200) -> None:
        self.text = text
        self.status_code = status_code

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class FakeRelay:
    """Records relay GETs and answers them by URL prefix."""

    def __init__(self, routes=None) -> None:
        self.routes = routes or {}
        self.calls: list[str] = []
        self.headers: list[dict] = []

    def __call__(self, url, headers=None, **kwargs):
        self.calls.append(url)
        self.headers.append(headers or {})
        for prefix, answer in self.routes.items():
            if url.startswith(prefix):
                if isinstance(answer, Exception):
                    raise answer
                if isinstance(answer, FakeResponse):
                    return answer
                return FakeResponse(answer)
        return FakeResponse("", status_code=404)

    def calls_to(self, prefix: str) -> list[str]:
        return [url for url in self.calls if url.startswith(prefix)]


AGGREGATOR = "https://r.jina.ai/https://www.tikwm.com/api/"
OEMBED = "https://r.jina.ai/https://www.tiktok.com/oembed"
PAGE = "https://r.jina.ai/https://www.tiktok.com/@"

VIDEO_URL = "https://www.tiktok.com/@jewelln/video/7572049501758704917"


@pytest.fixture
def fake_relay(monkeypatch):
    """Install a FakeRelay in place of httpx.get for the relay module."""
    relay = FakeRelay()
    monkeypatch.setattr("tokpreview.resolver.relay.httpx.get", relay)
    return relay
