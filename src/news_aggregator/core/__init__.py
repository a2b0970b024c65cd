"""
Core module for the News Aggregator.

This module provides the foundational components:
- Configuration management (config.py)
- Article and provider payload models (models.py)
- Category set and validation (types.py)
- Shared HTTP client infrastructure (http.py)

Usage:
    from news_aggregator.core import Settings, get_settings
    from news_aggregator.core import Article, DEFAULT_CATEGORIES, validate_category
    from news_aggregator.core.http import BaseApiClient, ExternalAPIError
"""

# Configuration
from .config import Settings, get_settings

# Types
from .types import DEFAULT_CATEGORIES, InvalidCategoryError, validate_category

# Models
from .models import Article

# HTTP
from .http import BaseApiClient, ExternalAPIError

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Types
    "DEFAULT_CATEGORIES",
    "InvalidCategoryError",
    "validate_category",
    # Models
    "Article",
    # HTTP
    "BaseApiClient",
    "ExternalAPIError",
]
