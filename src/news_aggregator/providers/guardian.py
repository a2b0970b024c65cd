"""Guardian Open Platform content-search adapter."""

from ..core.http import ExternalAPIError
from ..core.models import Article, GuardianFields, GuardianSearchResponse
from .base import NewsProvider

DEFAULT_SHOW_FIELDS = "headline,byline,trailText"


class GuardianProvider(NewsProvider):
    """
    Content-search adapter backed by the Guardian ``/search`` endpoint.

    The category is sent as ``section``. Headline, byline and trail text are
    requested through ``show-fields`` and mapped to title, author and
    description.
    """

    BASE_URL = "https://content.guardianapis.com"
    provider_name = "Guardian"
    source_label = "The Guardian"

    def __init__(self, api_key: str | None = None, *, show_fields: str = DEFAULT_SHOW_FIELDS, **kwargs):
        super().__init__(api_key, **kwargs)
        self.show_fields = show_fields

    async def _fetch(self, category: str) -> list[Article]:
        params = {
            "section": category,
            "api-key": self.api_key,
            "show-fields": self.show_fields,
        }
        body = GuardianSearchResponse.model_validate(await self._get("/search", params=params)).response

        if body.status != "ok":
            raise ExternalAPIError(f"Guardian error: {body.message or 'Unknown error'}")

        articles = []
        for result in body.results:
            fields = result.show_fields or GuardianFields()
            articles.append(
                Article(
                    title=fields.headline,
                    author=fields.byline,
                    description=fields.trail_text,
                    url=result.web_url,
                    category=category,
                    source=self.source_label,
                    published_at=result.web_publication_date,
                )
            )
        return articles
