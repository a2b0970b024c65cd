"""
Recency ordering for article lists.

Timestamps stay as the provider's raw strings on Article and are only parsed
here, to build sort keys. Sorting is stable: articles with identical
timestamps keep their concatenation order (first provider first). Missing or
unparseable timestamps sort after every valid one.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, Mapping

from ..core.models import Article


def parse_published_at(value: str | None) -> datetime | None:
    """
    Parse an ISO-8601 timestamp into an aware datetime.

    Naive timestamps are read as UTC. Returns None for missing or
    malformed values, including RFC-2822 dates ("Mon, 01 Jan 2024 ...").
    """
    if not value or not isinstance(value, str):
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _sort_key(article: Article) -> tuple[int, float]:
    parsed = parse_published_at(article.published_at)
    if parsed is None:
        return (1, 0.0)
    # Ascending on the negated timestamp gives newest-first while keeping
    # the stable order for ties.
    return (0, -parsed.timestamp())


def sort_articles(articles: Iterable[Article]) -> list[Article]:
    """Return a new list ordered most recent first."""
    return sorted(articles, key=_sort_key)


def organize_news(news: Mapping[str, Iterable[Article]]) -> dict[str, list[Article]]:
    """
    Sort every category's articles by publication time, newest first.

    Returns a new mapping with the same key order; the input is left untouched.
    """
    return {category: sort_articles(articles) for category, articles in news.items()}
