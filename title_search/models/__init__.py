"""Data models for title search."""

from .response import (
    TitleMatch,
    SearchResponse,
    ErrorResponse,
    HealthResponse,
    MetricsResponse,
)
from .request import SearchRequest

__all__ = [
    "TitleMatch",
    "SearchResponse",
    "ErrorResponse",
    "HealthResponse",
    "MetricsResponse",
    "SearchRequest",
]
