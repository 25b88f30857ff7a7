"""Request models for API endpoints."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class SearchRequest(BaseModel):
    """Request model for title search queries."""

    query: str = Field(..., min_length=1, max_length=200, description="Title query")
    min_score: Optional[float] = Field(
        None, ge=0.0, le=1.0, description="Custom minimum match score"
    )
    max_results: Optional[int] = Field(
        None, ge=1, le=500, description="Maximum number of results to return"
    )

    @field_validator('query')
    @classmethod
    def validate_query(cls, v: str) -> str:
        """Validate and normalize query input."""
        if not v or not v.strip():
            raise ValueError("Query cannot be empty")
        return v.strip()
