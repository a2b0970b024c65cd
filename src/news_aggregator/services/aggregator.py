"""
News aggregation across providers and categories.

Fans out to every provider per category, concatenates their results in
provider order and hands the merged lists to the organizer for recency
ordering.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Iterable, Sequence

from ..core.config import Settings, get_settings
from ..core.models import Article
from ..core.types import validate_category
from ..providers import NewsProvider, get_default_providers
from .organizer import organize_news, sort_articles

logger = logging.getLogger(__name__)


class NewsAggregator:
    """
    Aggregated, recency-ordered news view over several providers.

    Features:
    - Providers queried concurrently for each category
    - Bounded concurrency across categories in fetch_all
    - Provider failures degrade to empty results, never exceptions
    - Every configured category present in fetch_all output

    Use as an async context manager to close the providers' HTTP clients:

        async with NewsAggregator() as aggregator:
            news = await aggregator.fetch_all()
            top = await aggregator.get_top_news_by_category("technology", 5)
    """

    def __init__(
        self,
        providers: Sequence[NewsProvider] | None = None,
        categories: Iterable[str] | None = None,
        settings: Settings | None = None,
    ):
        """
        Initialize the aggregator.

        Args:
            providers: Provider adapters in concatenation order
                       (created from settings if not provided)
            categories: Fixed category set (settings.categories if not provided)
            settings: Settings instance (get_settings() if not provided)
        """
        self._settings = settings or get_settings()
        self._providers = tuple(providers) if providers is not None else tuple(get_default_providers(self._settings))
        self._categories = tuple(categories) if categories is not None else tuple(self._settings.categories)
        self._max_concurrency = self._settings.max_concurrent_categories

    async def __aenter__(self) -> "NewsAggregator":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Close every provider's HTTP client."""
        for provider in self._providers:
            await provider.close()

    @property
    def categories(self) -> tuple[str, ...]:
        return self._categories

    @property
    def providers(self) -> tuple[NewsProvider, ...]:
        return self._providers

    async def fetch_category(self, category: str) -> list[Article]:
        """
        Query every provider for one category and concatenate the results.

        Providers run concurrently; the returned list keeps provider order
        (first provider's articles first) and is not sorted.
        """
        results = await asyncio.gather(*(provider.fetch(category) for provider in self._providers))
        combined: list[Article] = []
        for articles in results:
            combined.extend(articles)
        logger.debug(f"{category}: {len(combined)} articles from {len(self._providers)} providers")
        return combined

    async def fetch_all(self) -> dict[str, list[Article]]:
        """
        Fetch every category from every provider.

        Returns:
            Mapping of category to articles sorted newest first, with a key
            for every configured category (possibly an empty list)
        """
        all_news: dict[str, list[Article]] = {category: [] for category in self._categories}
        semaphore = asyncio.Semaphore(self._max_concurrency)

        async def fetch_one(category: str) -> list[Article]:
            async with semaphore:
                return await self.fetch_category(category)

        results = await asyncio.gather(*(fetch_one(category) for category in self._categories))
        for category, articles in zip(self._categories, results):
            all_news[category] = articles

        organized = organize_news(all_news)
        total = sum(len(articles) for articles in organized.values())
        logger.info(f"Fetched {total} articles across {len(organized)} categories")
        return organized

    async def get_top_news_by_category(self, category: str, limit: int = 10) -> list[Article]:
        """
        Get the most recent articles for one category.

        Args:
            category: Category from the configured set
            limit: Maximum articles to return; limit <= 0 yields []

        Returns:
            Up to ``limit`` articles, newest first

        Raises:
            InvalidCategoryError: If category is not in the configured set
                                  (raised before any request is made)
        """
        validate_category(category, self._categories)
        if limit <= 0:
            return []

        articles = sort_articles(await self.fetch_category(category))
        logger.info(f"Top news for {category}: {min(len(articles), limit)} of {len(articles)} articles")
        return articles[:limit]
