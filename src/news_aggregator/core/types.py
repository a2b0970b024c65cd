"""
Category set and validation.

The category set is fixed and closed: a category is both the query value sent
to each provider and the grouping key of aggregated results.
"""

from __future__ import annotations

from typing import Iterable

DEFAULT_CATEGORIES: tuple[str, ...] = (
    "business",
    "technology",
    "sports",
    "entertainment",
    "health",
    "science",
    "politics",
)


class InvalidCategoryError(ValueError):
    """Raised when a category outside the configured set is requested."""

    def __init__(self, category: str, categories: Iterable[str] = DEFAULT_CATEGORIES):
        self.category = category
        self.categories = tuple(categories)
        super().__init__(
            f"Invalid category: {category!r} (expected one of: {', '.join(self.categories)})"
        )


def validate_category(category: str, categories: Iterable[str] = DEFAULT_CATEGORIES) -> str:
    """Return ``category`` unchanged if it belongs to ``categories``."""
    allowed = tuple(categories)
    if category not in allowed:
        raise InvalidCategoryError(category, allowed)
    return category
