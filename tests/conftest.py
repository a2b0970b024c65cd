"""
Pytest configuration for news-aggregator tests.

Provider HTTP traffic is served by httpx.MockTransport, so no test touches
the network.
"""

from __future__ import annotations

from typing import Any

import httpx
import pytest

from news_aggregator.core.config import Settings
from news_aggregator.providers import get_default_providers
from news_aggregator.services import NewsAggregator


def newsapi_article(title: str, published_at: str | None, **extra: Any) -> dict[str, Any]:
    """Build one NewsAPI ``articles`` entry."""
    article = {
        "source": {"id": None, "name": "Example Wire"},
        "title": title,
        "author": extra.pop("author", "Staff"),
        "description": extra.pop("description", f"About {title}"),
        "url": extra.pop("url", f"https://example.com/{title.lower().replace(' ', '-')}"),
        "urlToImage": None,
        "publishedAt": published_at,
        "content": None,
    }
    article.update(extra)
    return article


def guardian_result(headline: str, published_at: str | None, **extra: Any) -> dict[str, Any]:
    """Build one Guardian ``results`` entry."""
    result = {
        "id": f"section/{headline.lower().replace(' ', '-')}",
        "type": "article",
        "webTitle": headline,
        "webUrl": extra.pop("webUrl", f"https://www.theguardian.com/{headline.lower().replace(' ', '-')}"),
        "webPublicationDate": published_at,
        "fields": {
            "headline": headline,
            "byline": extra.pop("byline", "Guardian staff"),
            "trailText": extra.pop("trailText", f"Trail for {headline}"),
        },
    }
    result.update(extra)
    return result


class StubProviders:
    """
    Fake NewsAPI and Guardian endpoints.

    Per-category outcomes are set in ``newsapi`` / ``guardian``: a list of
    records (success), an httpx.Response (returned as-is) or an exception
    (raised from the transport). Unset categories return no records.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.newsapi: dict[str, Any] = {}
        self.guardian: dict[str, Any] = {}

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        is_newsapi = request.url.host == "newsapi.org"
        if is_newsapi:
            outcome = self.newsapi.get(request.url.params.get("category"), [])
        else:
            outcome = self.guardian.get(request.url.params.get("section"), [])

        if isinstance(outcome, Exception):
            raise outcome
        if isinstance(outcome, httpx.Response):
            return outcome
        if is_newsapi:
            return httpx.Response(200, json={"status": "ok", "totalResults": len(outcome), "articles": outcome})
        return httpx.Response(200, json={"response": {"status": "ok", "total": len(outcome), "results": outcome}})

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def requests_for(self, host: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.host == host]


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the local environment and .env file."""
    return Settings(
        _env_file=None,
        news_api_key="newsapi-test-key",
        guardian_api_key="guardian-test-key",
        categories=("business", "technology", "sports", "entertainment", "health", "science", "politics"),
        max_concurrent_categories=4,
        request_timeout=5.0,
    )


@pytest.fixture
def stub() -> StubProviders:
    return StubProviders()


@pytest.fixture
def make_aggregator(settings: Settings, stub: StubProviders):
    """Factory for aggregators wired to the stub endpoints."""

    def _make(**overrides: Any) -> NewsAggregator:
        effective = settings.model_copy(update=overrides) if overrides else settings
        providers = get_default_providers(effective, transport=stub.transport)
        return NewsAggregator(providers=providers, settings=effective)

    return _make


@pytest.fixture
async def aggregator(make_aggregator):
    agg = make_aggregator()
    yield agg
    await agg.close()
