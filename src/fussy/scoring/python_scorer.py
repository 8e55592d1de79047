"""
In-process scorer backed by Textual's fuzzy search.

``FuzzySearch`` keeps its own LRU cache of (query, candidate) results, which
makes repeated keystrokes over the same pool cheap. It also tries every way
the query can be laid over the candidate, so candidates with too many
possible layouts are scored on their leftmost match instead.
"""

from __future__ import annotations

from collections import Counter

from textual.fuzzy import FuzzySearch

from fussy.domain.types import MatchScore
from fussy.utils import fold_case

# Upper bound on query layouts handed to FuzzySearch
MAX_COMBINATIONS = 5000


def combination_bound(candidate: str, query: str, limit: int = MAX_COMBINATIONS) -> int:
    """
    Upper bound on the ways ``query`` can be laid over ``candidate``.

    The product of each query character's occurrence count, counted until
    it exceeds ``limit``.
    """
    occurrences = Counter(candidate)
    bound = 1
    for character in query:
        bound *= occurrences[character]
        if bound == 0 or bound > limit:
            break
    return bound


def leftmost_indices(candidate: str, query: str) -> tuple[int, ...] | None:
    """Positions of the leftmost subsequence match, or None."""
    indices = []
    position = 0
    for character in query:
        position = candidate.find(character, position)
        if position == -1:
            return None
        indices.append(position)
        position += 1
    return tuple(indices)


class PythonScorer:
    """Pure Python scorer; always available."""

    name = "python"

    def __init__(self, max_combinations: int = MAX_COMBINATIONS) -> None:
        # Case is folded here, one character at a time, so offsets always
        # index the original candidate.
        self._search = FuzzySearch(case_sensitive=True)
        self._max_combinations = max_combinations

    def match(self, candidate: str, query: str, ignore_case: bool) -> MatchScore | None:
        text = fold_case(candidate) if ignore_case else candidate
        needle = fold_case(query) if ignore_case else query

        if needle not in text:
            bound = combination_bound(text, needle, self._max_combinations)
            if bound == 0:
                return None
            if bound > self._max_combinations:
                return self._leftmost(text, needle)

        score, offsets = self._search.match(needle, text)
        if score <= 0:
            return None
        return MatchScore(score=score, indices=tuple(offsets))

    def _leftmost(self, text: str, needle: str) -> MatchScore | None:
        indices = leftmost_indices(text, needle)
        if indices is None:
            return None
        return MatchScore(score=self._search.score(text, indices), indices=indices)
