"""API routers."""

from . import news

__all__ = ["news"]
