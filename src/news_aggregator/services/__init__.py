"""
Aggregation services.

- NewsAggregator: fans out to providers and merges per category
- organize_news / sort_articles: recency ordering
"""

from .aggregator import NewsAggregator
from .organizer import organize_news, parse_published_at, sort_articles

__all__ = [
    "NewsAggregator",
    "organize_news",
    "parse_published_at",
    "sort_articles",
]
