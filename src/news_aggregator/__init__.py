"""
News Aggregator

Merges news from two providers, NewsAPI top-headlines and The Guardian
content search, into one view grouped by category and ordered by recency.

Key Features:
- One Article schema for both providers
- Providers queried concurrently per category
- Fail-open providers: an outage yields an empty list, never an exception
- Every configured category present in the aggregated result

Usage:
    from news_aggregator import NewsAggregator

    async with NewsAggregator() as aggregator:
        news = await aggregator.fetch_all()
        top = await aggregator.get_top_news_by_category("technology", limit=5)

    for article in top:
        print(article.published_at, article.source, article.title)
"""

from .core import (
    DEFAULT_CATEGORIES,
    Article,
    InvalidCategoryError,
    Settings,
    get_settings,
)
from .providers import GuardianProvider, NewsApiProvider, NewsProvider
from .services import NewsAggregator, organize_news, sort_articles

__version__ = "1.0.0"

__all__ = [
    # Models
    "Article",
    "DEFAULT_CATEGORIES",
    "InvalidCategoryError",
    # Config
    "Settings",
    "get_settings",
    # Providers
    "NewsProvider",
    "NewsApiProvider",
    "GuardianProvider",
    # Services
    "NewsAggregator",
    "organize_news",
    "sort_articles",
]
