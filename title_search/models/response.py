"""Response models for API endpoints."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class TitleMatch(BaseModel):
    """Individual title search result."""

    score: float = Field(..., ge=0.0, le=1.0, description="Match score (0-1)")
    content_key: str = Field(..., description="Catalog key of the matched title")
    name: str = Field(..., description="Display name of the matched title")
    record: Dict[str, Any] = Field(..., description="Catalog metadata for the title")


class SearchResponse(BaseModel):
    """Response for title search queries."""

    query: str = Field(..., description="Original search query")
    execution_time_ms: float = Field(..., description="Query execution time in milliseconds")
    exact_match: bool = Field(..., description="Whether an exact title match was found")
    total_results: int = Field(..., description="Total number of results")
    results: List[TitleMatch] = Field(..., description="Search results")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    uptime: float = Field(..., description="Service uptime in seconds")
    total_titles: int = Field(..., description="Number of indexed titles")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Check timestamp")


class MetricsResponse(BaseModel):
    """Performance metrics response."""

    total_queries: int = Field(..., description="Total queries processed")
    average_response_time_ms: float = Field(..., description="Average response time")
    exact_match_rate: float = Field(..., description="Share of queries with an exact hit")
    fuzzy_match_rate: float = Field(..., description="Share of queries with fuzzy hits only")
    no_match_rate: float = Field(..., description="Share of queries with no results")
    memory_usage_mb: float = Field(..., description="Process resident memory in MB")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Metrics timestamp")
