"""Published search engine instance shared by the API routers."""

from typing import Optional

from .core.engine import TitleSearchEngine

# Replaced wholesale on rebuild; readers never see a half-built index.
_search_engine: Optional[TitleSearchEngine] = None


def publish_search_engine(engine: TitleSearchEngine) -> None:
    """Swap in a fully built engine."""
    global _search_engine
    _search_engine = engine


def get_search_engine() -> TitleSearchEngine:
    """Get the published engine, or an empty one before any catalog loads."""
    global _search_engine
    if _search_engine is None:
        _search_engine = TitleSearchEngine({})
    return _search_engine
