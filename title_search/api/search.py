"""Title search API endpoints."""

import time
from typing import Optional

from fastapi import APIRouter, HTTPException, Path, Query

from ..config import get_settings
from ..core.exceptions import InvalidArgumentError
from ..engine_instance import get_search_engine
from ..models.request import SearchRequest
from ..models.response import SearchResponse

router = APIRouter(prefix="/api/v1", tags=["search"])
settings = get_settings()


def _run_search(
    query: str,
    min_score: Optional[float],
    max_results: Optional[int]
) -> SearchResponse:
    """Search the published engine and wrap the results."""
    if len(query) > settings.max_query_length:
        raise HTTPException(
            status_code=400,
            detail=f"Query too long. Maximum length is {settings.max_query_length} characters"
        )

    start_time = time.time()
    search_engine = get_search_engine()
    try:
        results = search_engine.search(
            query,
            min_score=min_score,
            max_results=max_results or settings.max_results
        )
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return SearchResponse(
        query=query,
        execution_time_ms=(time.time() - start_time) * 1000,
        exact_match=search_engine.is_exact(query, results),
        total_results=len(results),
        results=results
    )


@router.get(
    "/search",
    response_model=SearchResponse,
    summary="Search titles",
    description="Search catalog titles with the searchQuery query parameter"
)
async def search_titles(
    searchQuery: str = Query(..., min_length=1, description="Title to search for"),
    min_score: Optional[float] = Query(
        None, ge=0.0, le=1.0, description="Custom minimum match score (0.0-1.0)"
    ),
    max_results: Optional[int] = Query(
        None, ge=1, le=500, description="Maximum number of results to return"
    )
) -> SearchResponse:
    """Search catalog titles matching a free-text query."""
    return _run_search(searchQuery, min_score, max_results)


@router.get(
    "/search/{query}",
    response_model=SearchResponse,
    summary="Search titles by path",
    description="Search catalog titles with the query in the URL path"
)
async def search_title_path(
    query: str = Path(..., min_length=1, description="Title to search for"),
    min_score: Optional[float] = Query(
        None, ge=0.0, le=1.0, description="Custom minimum match score (0.0-1.0)"
    ),
    max_results: Optional[int] = Query(
        None, ge=1, le=500, description="Maximum number of results to return"
    )
) -> SearchResponse:
    """
    Search catalog titles matching a query.

    Exact titles (ignoring case and surrounding whitespace) return a single
    result with score 1.0; anything else is ranked by n-gram similarity.
    """
    return _run_search(query, min_score, max_results)


@router.post(
    "/search",
    response_model=SearchResponse,
    summary="Search with request body",
    description="Search catalog titles using a structured request body"
)
async def search_with_body(request: SearchRequest) -> SearchResponse:
    """Search catalog titles using a JSON request body."""
    return _run_search(request.query, request.min_score, request.max_results)
