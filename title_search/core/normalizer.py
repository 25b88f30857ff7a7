"""Text normalization and n-gram helpers for title matching."""

import math
import re
from collections import Counter
from typing import Dict, List

# Characters that survive gramming: ASCII letters and digits, Latin-1
# letters (U+00C0 to U+00FF), comma and space.
NON_WORD_PATTERN = re.compile(r"[^a-zA-Z0-9\u00C0-\u00FF, ]+")

BOUNDARY_MARKER = "-"


class TextNormalizer:
    """Turns display strings into keys and gram count vectors."""

    def normalize(self, text: str) -> str:
        """
        Normalize text into its lookup key.

        Args:
            text: Input text to normalize

        Returns:
            The text trimmed and lower-cased
        """
        if not text:
            return ""
        return text.strip().lower()

    def simplify(self, text: str) -> str:
        """Strip every character outside the gram alphabet."""
        return NON_WORD_PATTERN.sub("", text.lower())

    def pad(self, text: str, gram_size: int) -> str:
        """
        Wrap simplified text in boundary markers.

        Tokens shorter than the gram size are right-padded with markers
        so that at least one gram is produced.

        Args:
            text: Normalized text
            gram_size: Gram length the token will be cut into

        Returns:
            Padded token
        """
        token = f"{BOUNDARY_MARKER}{self.simplify(text)}{BOUNDARY_MARKER}"
        if len(token) < gram_size:
            token += BOUNDARY_MARKER * (gram_size - len(token))
        return token

    def iterate_grams(self, text: str, gram_size: int = 2) -> List[str]:
        """
        Cut text into overlapping grams.

        Args:
            text: Normalized text
            gram_size: Length of each gram

        Returns:
            Grams in order of appearance, duplicates included
        """
        token = self.pad(text, gram_size)
        return [token[i:i + gram_size] for i in range(len(token) - gram_size + 1)]

    def gram_counts(self, text: str, gram_size: int = 2) -> Dict[str, int]:
        """Count the occurrences of each distinct gram in text."""
        return dict(Counter(self.iterate_grams(text, gram_size)))

    @staticmethod
    def vector_norm(counts: Dict[str, int]) -> float:
        """Euclidean norm of a gram count vector."""
        return math.sqrt(sum(count ** 2 for count in counts.values()))
