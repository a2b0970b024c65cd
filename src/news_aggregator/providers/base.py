"""
Base news provider contract.

Defines the interface that every provider adapter implements, so the
aggregator can treat the headlines API and the content-search API alike.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import httpx

from ..core.http import BaseApiClient, ExternalAPIError
from ..core.models import Article

logger = logging.getLogger(__name__)


class NewsProvider(BaseApiClient, ABC):
    """
    Abstract provider adapter.

    The provider is responsible for:
    1. Making one API call per category to the external service
    2. Validating the response shape
    3. Mapping remote records to Article, stamped with the requested
       category and the provider's source label

    The provider is NOT responsible for:
    - Checking the category against the configured set (aggregator's job)
    - Sorting, merging or truncating results
    - Retrying failed requests
    """

    # Provider identifier used in logs (e.g., "newsapi", "guardian")
    provider_name: str = ""

    # Value written to Article.source
    source_label: str = ""

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        super().__init__(base_url=base_url, timeout=timeout, transport=transport)
        self.api_key = api_key or ""
        if not self.api_key:
            logger.warning(f"{self.provider_name}: no API key configured, requests will likely be rejected")

    def is_configured(self) -> bool:
        """Check if an API key is configured."""
        return bool(self.api_key)

    async def fetch(self, category: str) -> list[Article]:
        """
        Fetch articles for one category.

        Never raises for provider failures: any error is logged and an
        empty list is returned so other providers and categories still
        contribute results.
        """
        try:
            if not category:
                raise ValueError("category must be a non-empty string")
            articles = await self._fetch(category)
        except ExternalAPIError as e:
            logger.error(
                f"Error fetching from {self.provider_name} ({category}) [{e.code} {e.status_code}]: {e.message}"
            )
            return []
        except Exception as e:
            logger.error(f"Error fetching from {self.provider_name} ({category}): {e}")
            return []

        logger.debug(f"{self.provider_name}: {len(articles)} articles for {category}")
        return articles

    @abstractmethod
    async def _fetch(self, category: str) -> list[Article]:
        """
        Issue the provider request and map the response.

        Implementations may raise freely; fetch() turns failures into [].
        """
        ...
