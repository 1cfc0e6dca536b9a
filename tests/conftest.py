"""Shared fixtures: a fake arXiv upstream and an ASGI client for the relay."""

from __future__ import annotations

import httpx
import pytest
import pytest_asyncio

from arxiv_relay.core.settings import Settings
from arxiv_relay.main import create_app

FEED = '<?xml version="1.0" encoding="UTF-8"?><feed xmlns="http://www.w3.org/2005/Atom"><title>arXiv</title></feed>'


class FakeUpstream:
    """Records outbound requests and answers them with a canned Atom feed."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.text = FEED
        self.headers = {"Content-Type": "application/atom+xml; charset=UTF-8"}
        self.error: Exception | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, text=self.text, headers=self.headers)

    @property
    def last_query(self) -> str:
        return self.requests[-1].url.query.decode("ascii")


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def settings() -> Settings:
    return Settings(arxiv_api_url="https://export.arxiv.org/api/query", default_limit=15, default_start=0)


@pytest_asyncio.fixture
async def relay(upstream, settings):
    async with httpx.AsyncClient(transport=httpx.MockTransport(upstream.handler)) as outbound:
        app = create_app(settings, http_client=outbound)
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://relay") as client:
            yield client
