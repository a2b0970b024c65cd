"""
News provider adapters.

Each adapter knows one external HTTP contract and turns its response into
a list of Article records for a requested category.

Usage:
    from news_aggregator.providers import get_default_providers

    providers = get_default_providers()
    articles = await providers[0].fetch("technology")
"""

from __future__ import annotations

import httpx

from ..core.config import Settings, get_settings
from .base import NewsProvider
from .guardian import GuardianProvider
from .newsapi import NewsApiProvider

__all__ = [
    "NewsProvider",
    "NewsApiProvider",
    "GuardianProvider",
    "get_default_providers",
]


def get_default_providers(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[NewsProvider]:
    """
    Build the headlines and content-search adapters from settings.

    Order matters: it is the concatenation order of results before sorting,
    and therefore the tie-break order for identical timestamps.

    Args:
        settings: Settings to read credentials and endpoints from
        transport: Optional httpx transport shared by both providers (tests)

    Returns:
        [NewsApiProvider, GuardianProvider]
    """
    settings = settings or get_settings()
    return [
        NewsApiProvider(
            settings.news_api_key,
            base_url=settings.newsapi_base_url,
            language=settings.news_language,
            timeout=settings.request_timeout,
            transport=transport,
        ),
        GuardianProvider(
            settings.guardian_api_key,
            base_url=settings.guardian_base_url,
            show_fields=settings.guardian_show_fields,
            timeout=settings.request_timeout,
            transport=transport,
        ),
    ]
