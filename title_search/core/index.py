"""N-gram index for approximate title matching."""

from typing import Any, Dict, Iterable, List, NamedTuple, Optional, Tuple

from .exceptions import ConfigurationError, InvalidArgumentError
from .fuzzy_matcher import FuzzyMatcher
from .normalizer import TextNormalizer

DEFAULT_MIN_SCORE = 0.33


class Entry(NamedTuple):
    """A display string and the caller's opaque payload."""

    text: str
    payload: Any


class Match(NamedTuple):
    """One ranked query result."""

    score: float
    entry: Entry

    @property
    def payload(self) -> Any:
        return self.entry.payload


class GramIndex:
    """
    Cosine-similarity index over character n-grams.

    Every entry is indexed at each gram size in ``[gram_size_lower,
    gram_size_upper]``. Queries try the largest gram size first and fall
    back to smaller ones only when nothing matched, optionally reranking
    the survivors by edit distance.

    The index is built once and then only read; concurrent queries are
    safe, concurrent ``add`` calls are not.
    """

    def __init__(
        self,
        gram_size_lower: int = 2,
        gram_size_upper: int = 3,
        use_edit_distance: bool = True,
        refinement_limit: int = 50
    ) -> None:
        """
        Initialize an empty index.

        Args:
            gram_size_lower: Smallest (most permissive) gram size
            gram_size_upper: Largest (most selective) gram size
            use_edit_distance: Rerank cosine candidates by edit distance
            refinement_limit: Number of top candidates the rerank considers

        Raises:
            ConfigurationError: If the gram size bounds or limit are invalid
        """
        for name, value in (
            ("gram_size_lower", gram_size_lower),
            ("gram_size_upper", gram_size_upper),
            ("refinement_limit", refinement_limit),
        ):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{name} must be an integer, got {value!r}")
            if value < 1:
                raise ConfigurationError(f"{name} must be at least 1, got {value}")
        if gram_size_lower > gram_size_upper:
            raise ConfigurationError(
                f"gram_size_lower ({gram_size_lower}) cannot exceed "
                f"gram_size_upper ({gram_size_upper})"
            )

        self.gram_size_lower = gram_size_lower
        self.gram_size_upper = gram_size_upper
        self.use_edit_distance = use_edit_distance
        self.normalizer = TextNormalizer()
        self.fuzzy_matcher = FuzzyMatcher(limit=refinement_limit)

        self._exact_set: Dict[str, Entry] = {}
        # gram size -> [(vector norm, normalized key)]
        self._items: Dict[int, List[Tuple[float, str]]] = {
            size: [] for size in self.gram_sizes
        }
        # gram size -> gram -> [(item index, count)]
        self._postings: Dict[int, Dict[str, List[Tuple[int, int]]]] = {
            size: {} for size in self.gram_sizes
        }

    @classmethod
    def build(cls, entries: Iterable[Any], **config: Any) -> "GramIndex":
        """
        Create an index and add every entry to it.

        Args:
            entries: Entry objects or (text, payload) pairs; None is skipped
            **config: Constructor keyword arguments

        Returns:
            The populated index
        """
        index = cls(**config)
        for entry in entries:
            if entry is not None:
                index.add(entry)
        return index

    @property
    def gram_sizes(self) -> range:
        return range(self.gram_size_lower, self.gram_size_upper + 1)

    @property
    def refinement_limit(self) -> int:
        return self.fuzzy_matcher.limit

    def add(self, entry: Any) -> bool:
        """
        Add an entry to the index.

        Args:
            entry: An Entry or a (text, payload) pair

        Returns:
            True if inserted, False if the text is empty or its key is
            already present (the first entry for a key always wins)
        """
        text, payload = entry
        if not isinstance(text, str):
            return False
        key = self.normalizer.normalize(text)
        if not key or key in self._exact_set:
            return False

        for gram_size in self.gram_sizes:
            counts = self.normalizer.gram_counts(key, gram_size)
            items = self._items[gram_size]
            postings = self._postings[gram_size]
            index = len(items)
            items.append((self.normalizer.vector_norm(counts), key))
            for gram, count in counts.items():
                postings.setdefault(gram, []).append((index, count))

        self._exact_set[key] = entry if isinstance(entry, Entry) else Entry(text, payload)
        return True

    def query(self, text: str, min_score: float = DEFAULT_MIN_SCORE) -> List[Match]:
        """
        Find the entries most similar to text.

        Args:
            text: Free-text query
            min_score: Results scoring below this are dropped

        Returns:
            Matches ordered by descending score; empty if nothing qualifies

        Raises:
            InvalidArgumentError: If text is not a string or min_score is
                outside [0, 1]
        """
        if not isinstance(text, str):
            raise InvalidArgumentError(
                f"Query must be a string, got {type(text).__name__}"
            )
        if not 0.0 <= min_score <= 1.0:
            raise InvalidArgumentError(f"min_score must be within [0, 1], got {min_score}")

        key = self.normalizer.normalize(text)
        exact = self._exact_set.get(key)
        if exact is not None:
            return [Match(1.0, exact)]

        candidates: List[Tuple[float, str]] = []
        for gram_size in reversed(self.gram_sizes):
            candidates = self._score_candidates(key, gram_size)
            if candidates:
                break

        if candidates and self.use_edit_distance:
            candidates = self.fuzzy_matcher.rescore(key, candidates)

        return [
            Match(score, self._exact_set[matched_key])
            for score, matched_key in candidates
            if score >= min_score
        ]

    def get(
        self,
        text: str,
        default: Any = None,
        min_score: float = DEFAULT_MIN_SCORE
    ) -> Any:
        """Query the index, returning default instead of an empty result."""
        results = self.query(text, min_score)
        return results if results else default

    def _score_candidates(self, key: str, gram_size: int) -> List[Tuple[float, str]]:
        """
        Score every entry sharing a gram with key at one gram size.

        Args:
            key: Normalized query text
            gram_size: Gram size to match at

        Returns:
            (cosine score, normalized key) pairs, best first, ties in
            insertion order; empty if no gram is shared
        """
        counts = self.normalizer.gram_counts(key, gram_size)
        postings = self._postings[gram_size]
        items = self._items[gram_size]

        dot_products: Dict[int, int] = {}
        for gram, query_count in counts.items():
            for index, item_count in postings.get(gram, ()):
                dot_products[index] = dot_products.get(index, 0) + query_count * item_count

        if not dot_products:
            return []

        query_norm = self.normalizer.vector_norm(counts)
        scored = []
        for index in sorted(dot_products):
            item_norm, item_key = items[index]
            score = min(1.0, dot_products[index] / (query_norm * item_norm))
            scored.append((score, item_key))

        scored.sort(key=lambda x: x[0], reverse=True)
        return scored

    def values(self) -> List[str]:
        """Normalized keys of all entries, in insertion order."""
        return list(self._exact_set.keys())

    def is_empty(self) -> bool:
        return not self._exact_set

    def get_stats(self) -> Dict[str, Any]:
        """Get index statistics."""
        return {
            "total_entries": len(self._exact_set),
            "gram_sizes": list(self.gram_sizes),
            "distinct_grams": {
                size: len(postings) for size, postings in self._postings.items()
            },
            "use_edit_distance": self.use_edit_distance,
            "refinement_limit": self.refinement_limit,
        }

    def __len__(self) -> int:
        return len(self._exact_set)

    def __contains__(self, text: object) -> bool:
        if not isinstance(text, str):
            return False
        return self.normalizer.normalize(text) in self._exact_set


def build(entries: Iterable[Any], **config: Any) -> GramIndex:
    """Build a GramIndex from entries; see GramIndex.build."""
    return GramIndex.build(entries, **config)
