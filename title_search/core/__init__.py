"""Core title matching functionality."""

from .engine import TitleSearchEngine
from .exceptions import (
    CatalogError,
    ConfigurationError,
    InvalidArgumentError,
    TitleSearchError,
)
from .fuzzy_matcher import FuzzyMatcher
from .index import Entry, GramIndex, Match, build
from .normalizer import TextNormalizer

__all__ = [
    "TitleSearchEngine",
    "GramIndex",
    "Entry",
    "Match",
    "build",
    "FuzzyMatcher",
    "TextNormalizer",
    "TitleSearchError",
    "ConfigurationError",
    "InvalidArgumentError",
    "CatalogError",
]
