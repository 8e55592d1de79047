"""Shared fixtures for fussy tests."""

from typing import Optional

import pytest

from fussy.domain.types import AnnotatedCandidate, MatchScore


class StubScorer:
    """Greedy subsequence scorer that records its calls.

    Scores are deterministic: 100 minus the position of the first match,
    so earlier matches rank higher.
    """

    name = "stub"

    def __init__(self, scores: Optional[dict[str, float]] = None):
        self.scores = scores or {}
        self.calls: list[tuple[str, str, bool]] = []

    def match(self, candidate: str, query: str, ignore_case: bool) -> Optional[MatchScore]:
        self.calls.append((candidate, query, ignore_case))
        text = candidate.lower() if ignore_case else candidate
        needle = query.lower() if ignore_case else query

        indices = []
        position = 0
        for character in needle:
            position = text.find(character, position)
            if position == -1:
                return None
            indices.append(position)
            position += 1

        score = self.scores.get(candidate, 100 - indices[0])
        return MatchScore(score=score, indices=tuple(indices))


@pytest.fixture
def stub_scorer() -> StubScorer:
    return StubScorer()


@pytest.fixture
def make_candidates():
    def _make(*texts: str) -> list[AnnotatedCandidate]:
        return [AnnotatedCandidate(text=text) for text in texts]

    return _make
