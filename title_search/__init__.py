"""
Title Search - fuzzy title matching over a content catalog.

This package indexes catalog titles by character n-grams and resolves
free-text queries to ranked catalog records using cosine similarity,
cascading gram sizes and optional edit-distance reranking.
"""

__version__ = "1.0.0"

from .core.engine import TitleSearchEngine
from .core.index import Entry, GramIndex, Match, build
from .models.response import TitleMatch, SearchResponse

__all__ = [
    "TitleSearchEngine",
    "GramIndex",
    "Entry",
    "Match",
    "build",
    "TitleMatch",
    "SearchResponse",
]
