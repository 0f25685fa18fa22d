# =============================================================================
# tests/conftest.py  -  Shared fixtures
# =============================================================================
# No test touches the network: every gateway is built on httpx.MockTransport
# with a handler that returns canned Reddit payloads and records requests.
# =============================================================================

import asyncio

import httpx
import pytest

from core.config import Settings
from core.gateway import RedditGateway


class FakeClock:
    """Deterministic clock + sleep pair; sleeping advances the clock."""

    def __init__(self, start: float = 100.0):
        self.now = start
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    async def sleep(self, delay: float) -> None:
        self.sleeps.append(delay)
        self.now += delay
        await asyncio.sleep(0)


class RecordingHandler:
    """MockTransport handler that always returns the same response and records requests."""

    def __init__(self, payload=None, status_code: int = 200, content: bytes = None):
        self.payload = payload
        self.status_code = status_code
        self.content = content
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def paths(self) -> list[str]:
        return [r.url.raw_path.decode() for r in self.requests]


def listing(children: list) -> dict:
    return {"kind": "Listing", "data": {"after": None, "children": children}}


def post(**fields) -> dict:
    return {"kind": "t3", "data": fields}


def comment(**fields) -> dict:
    return {"kind": "t1", "data": fields}


@pytest.fixture
def fast_settings() -> Settings:
    """Settings with the throttle disabled, so tests don't wait."""
    return Settings(base_url="https://www.reddit.com", user_agent="reddit-mcp-tests/1.0", min_interval_ms=0)


@pytest.fixture
def make_gateway(fast_settings):
    """Build a gateway whose HTTP goes to `handler`."""

    def _make(handler, settings: Settings = None, **kwargs) -> RedditGateway:
        return RedditGateway(
            settings or fast_settings,
            transport=httpx.MockTransport(handler),
            **kwargs,
        )

    return _make
