"""Dependency injection for API endpoints."""

from typing import Annotated

from fastapi import Depends, Request

from ..services import NewsAggregator


def get_aggregator(request: Request) -> NewsAggregator:
    """Return the aggregator created by the application lifespan."""
    return request.app.state.aggregator


AggregatorDependency = Annotated[NewsAggregator, Depends(get_aggregator)]
