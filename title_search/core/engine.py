"""Title search facade over the n-gram index."""

import time
from typing import Any, Dict, List, Mapping, Optional

import structlog

from ..models.response import TitleMatch
from .index import DEFAULT_MIN_SCORE, GramIndex

logger = structlog.get_logger(__name__)


class TitleSearchEngine:
    """Resolves free-text title queries against a catalog."""

    def __init__(
        self,
        catalog: Mapping[str, Mapping[str, Any]],
        name_field: str = "name",
        index: Optional[GramIndex] = None,
        min_score: float = DEFAULT_MIN_SCORE,
        max_results: Optional[int] = None
    ) -> None:
        """
        Build the title index from a catalog.

        Args:
            catalog: Mapping of content key to its metadata record
            name_field: Record field holding the display name
            index: Empty index to populate (a default GramIndex if None)
            min_score: Default minimum score for search results
            max_results: Default cap on returned results (None for no cap)
        """
        self.catalog = catalog
        self.name_field = name_field
        self.index = index if index is not None else GramIndex()
        self.min_score = min_score
        self.max_results = max_results

        self._stats = {
            "total_queries": 0,
            "exact_matches": 0,
            "fuzzy_matches": 0,
            "no_matches": 0,
            "total_execution_time": 0.0,
            "skipped_titles": 0,
            "duplicate_titles": 0,
        }
        self._load_catalog()

    @classmethod
    def from_settings(
        cls,
        catalog: Mapping[str, Mapping[str, Any]],
        settings: Any
    ) -> "TitleSearchEngine":
        """Create an engine configured from application settings."""
        index = GramIndex(
            gram_size_lower=settings.gram_size_lower,
            gram_size_upper=settings.gram_size_upper,
            use_edit_distance=settings.use_edit_distance,
            refinement_limit=settings.refinement_limit,
        )
        return cls(
            catalog,
            name_field=settings.catalog_name_field,
            index=index,
            min_score=settings.min_score,
            max_results=settings.max_results,
        )

    def _load_catalog(self) -> None:
        start_time = time.time()

        for content_key, record in self.catalog.items():
            name = record.get(self.name_field) if isinstance(record, Mapping) else None
            if not isinstance(name, str) or not name.strip():
                self._stats["skipped_titles"] += 1
                continue
            if not self.index.add((name, content_key)):
                self._stats["duplicate_titles"] += 1

        logger.info(
            "Title index built",
            total_titles=len(self.index),
            skipped_titles=self._stats["skipped_titles"],
            duplicate_titles=self._stats["duplicate_titles"],
            build_time_ms=round((time.time() - start_time) * 1000, 2)
        )

    def search(
        self,
        query: str,
        min_score: Optional[float] = None,
        max_results: Optional[int] = None
    ) -> List[TitleMatch]:
        """
        Search the catalog for titles matching a query.

        Args:
            query: Free-text title query
            min_score: Custom minimum score
            max_results: Custom cap on returned results

        Returns:
            Matching catalog records, best first
        """
        start_time = time.time()
        self._stats["total_queries"] += 1

        min_score = self.min_score if min_score is None else min_score
        max_results = max_results or self.max_results

        matches = self.index.query(query, min_score)
        if max_results:
            matches = matches[:max_results]

        results = []
        for score, entry in matches:
            record = self.catalog[entry.payload]
            results.append(
                TitleMatch(
                    score=score,
                    content_key=str(entry.payload),
                    name=entry.text,
                    record=dict(record)
                )
            )

        if not results:
            self._stats["no_matches"] += 1
        elif self.is_exact(query, results):
            self._stats["exact_matches"] += 1
        else:
            self._stats["fuzzy_matches"] += 1
        self._stats["total_execution_time"] += (time.time() - start_time) * 1000

        return results

    def is_exact(self, query: str, results: List[TitleMatch]) -> bool:
        """Whether results are the single exact hit for query."""
        normalize = self.index.normalizer.normalize
        return (
            len(results) == 1
            and results[0].score == 1.0
            and normalize(query) == normalize(results[0].name)
        )

    def get_stats(self) -> Dict[str, Any]:
        """Get engine statistics."""
        stats = self._stats.copy()

        if stats["total_queries"] > 0:
            stats["average_execution_time_ms"] = (
                stats["total_execution_time"] / stats["total_queries"]
            )
            stats["exact_match_rate"] = stats["exact_matches"] / stats["total_queries"]
            stats["fuzzy_match_rate"] = stats["fuzzy_matches"] / stats["total_queries"]
            stats["no_match_rate"] = stats["no_matches"] / stats["total_queries"]
        else:
            stats["average_execution_time_ms"] = 0.0
            stats["exact_match_rate"] = 0.0
            stats["fuzzy_match_rate"] = 0.0
            stats["no_match_rate"] = 0.0

        stats["index_stats"] = self.index.get_stats()

        return stats
