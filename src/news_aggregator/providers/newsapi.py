"""NewsAPI.org top-headlines adapter."""

from ..core.http import ExternalAPIError
from ..core.models import Article, NewsApiResponse
from .base import NewsProvider


class NewsApiProvider(NewsProvider):
    """
    Headlines adapter backed by NewsAPI.org ``/top-headlines``.

    The category is sent as ``category``; results are restricted to one
    language (English by default).
    """

    BASE_URL = "https://newsapi.org/v2"
    provider_name = "NewsAPI"
    source_label = "NewsAPI"

    def __init__(self, api_key: str | None = None, *, language: str = "en", **kwargs):
        super().__init__(api_key, **kwargs)
        self.language = language

    async def _fetch(self, category: str) -> list[Article]:
        params = {
            "category": category,
            "apiKey": self.api_key,
            "language": self.language,
        }
        data = NewsApiResponse.model_validate(await self._get("/top-headlines", params=params))

        # NewsAPI reports failures in-band as well as via HTTP status
        if data.status != "ok":
            raise ExternalAPIError(f"NewsAPI error: {data.message or 'Unknown error'}")

        return [
            Article(
                title=item.title,
                author=item.author,
                description=item.description,
                url=item.url,
                category=category,
                source=self.source_label,
                published_at=item.published_at,
            )
            for item in data.articles
        ]
