"""
News router - aggregated headlines grouped by category.

Endpoints:
- GET / - All configured categories, newest first
- GET /categories - The configured category set
- GET /{category} - Top articles for one category
"""

from typing import Annotated, Any

from fastapi import APIRouter, Path, Query

from ...core.models import Article
from ...core.types import InvalidCategoryError
from ..dependencies import AggregatorDependency
from ..errors import InvalidCategoryAPIError

router = APIRouter()


def _serialize(articles: list[Article]) -> list[dict[str, Any]]:
    return [article.model_dump(by_alias=True) for article in articles]


@router.get("")
async def get_all_news(aggregator: AggregatorDependency):
    """
    Fetch every category from every provider.

    A category whose providers all failed is returned as an empty list.
    """
    news = await aggregator.fetch_all()
    return {
        "categories": {category: _serialize(articles) for category, articles in news.items()},
        "meta": {
            "total": sum(len(articles) for articles in news.values()),
        },
    }


@router.get("/categories")
async def get_categories(aggregator: AggregatorDependency):
    """List the configured category set."""
    return {"categories": list(aggregator.categories)}


@router.get("/{category}")
async def get_top_news(
    aggregator: AggregatorDependency,
    category: Annotated[str, Path(min_length=1, max_length=50, description="News category")],
    limit: Annotated[int, Query(ge=0, le=100, description="Max results")] = 10,
):
    """Get the most recent articles for one category."""
    try:
        articles = await aggregator.get_top_news_by_category(category, limit)
    except InvalidCategoryError as e:
        raise InvalidCategoryAPIError(e.category, e.categories) from e

    return {
        "category": category,
        "articles": _serialize(articles),
        "count": len(articles),
    }
