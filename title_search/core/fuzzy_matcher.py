"""Edit-distance scoring used to refine n-gram candidates."""

from typing import List, Optional, Sequence, Tuple

from rapidfuzz.distance import Levenshtein

from .exceptions import InvalidArgumentError


class FuzzyMatcher:
    """Rescores candidate strings by normalized Levenshtein similarity."""

    def __init__(self, limit: int = 50) -> None:
        """
        Initialize the fuzzy matcher.

        Args:
            limit: Maximum number of candidates rescored per query
        """
        self.limit = limit

    def similarity(self, first: Optional[str], second: Optional[str]) -> float:
        """
        Calculate edit-distance similarity between two strings.

        The Levenshtein distance is normalized by the longer string, so
        identical strings score 1.0 and fully different ones approach 0.0.

        Args:
            first: First string
            second: Second string

        Returns:
            Similarity score between 0 and 1

        Raises:
            InvalidArgumentError: If both strings are None or both are empty
        """
        if first is None and second is None:
            raise InvalidArgumentError("Cannot compare two null values")
        if first is None or second is None:
            return 0.0

        first = str(first)
        second = str(second)
        max_len = max(len(first), len(second))
        if max_len == 0:
            raise InvalidArgumentError("Cannot compare two empty strings")
        if not first or not second:
            return 0.0

        distance = Levenshtein.distance(first, second)
        return 1.0 - distance / max_len

    def rescore(
        self,
        query: str,
        candidates: Sequence[Tuple[float, str]]
    ) -> List[Tuple[float, str]]:
        """
        Replace cosine scores with edit-distance scores.

        Only the first ``limit`` candidates are kept; the rest are dropped
        rather than rescored.

        Args:
            query: Normalized query text
            candidates: (score, normalized key) pairs, best first

        Returns:
            Rescored pairs sorted by descending similarity
        """
        rescored = [
            (self.similarity(key, query), key)
            for _, key in candidates[:self.limit]
        ]
        rescored.sort(key=lambda x: x[0], reverse=True)
        return rescored
