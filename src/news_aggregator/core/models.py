"""
Pydantic models for articles and provider payloads.

These models are used for:
- Validating provider responses before they are mapped
- The immutable Article value returned to callers
- API response serialization (``publishedAt`` on the wire)
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Article
# =============================================================================


class Article(BaseModel):
    """Normalized news article produced by any provider."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: Optional[str] = None
    author: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    category: str
    source: str
    # Raw provider timestamp; parsed only when sorting.
    published_at: Optional[str] = Field(default=None, alias="publishedAt")


# =============================================================================
# NewsAPI (top-headlines) payload
# =============================================================================


class NewsApiArticle(BaseModel):
    """One entry of ``articles`` in a NewsAPI response."""

    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = None
    author: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    published_at: Optional[str] = Field(default=None, alias="publishedAt")


class NewsApiResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    status: str
    message: Optional[str] = None
    articles: list[NewsApiArticle] = Field(default_factory=list)


# =============================================================================
# Guardian (content search) payload
# =============================================================================


class GuardianFields(BaseModel):
    """Requested ``show-fields`` subset."""

    model_config = ConfigDict(extra="ignore")

    headline: Optional[str] = None
    byline: Optional[str] = None
    trail_text: Optional[str] = Field(default=None, alias="trailText")


class GuardianResult(BaseModel):
    model_config = ConfigDict(extra="ignore")

    web_url: Optional[str] = Field(default=None, alias="webUrl")
    web_publication_date: Optional[str] = Field(default=None, alias="webPublicationDate")
    show_fields: Optional[GuardianFields] = Field(default=None, alias="fields")


class GuardianSearchBody(BaseModel):
    model_config = ConfigDict(extra="ignore")

    status: str
    message: Optional[str] = None
    results: list[GuardianResult] = Field(default_factory=list)


class GuardianSearchResponse(BaseModel):
    """Envelope: the Guardian nests everything under ``response``."""

    model_config = ConfigDict(extra="ignore")

    response: GuardianSearchBody
