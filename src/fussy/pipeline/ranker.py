"""
Scoring of the bounded candidate subset and the result ordering.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace

from fussy.domain.protocols import ScoringStrategy
from fussy.domain.types import AnnotatedCandidate
from fussy.logger import get_logger

logger = get_logger("pipeline.ranker")


@dataclass(slots=True)
class RankResult:
    """Scored candidates plus whether scoring was bypassed.

    ``forced`` is set on the empty/overlong query fast path: every candidate
    is included and should be highlighted as fully matched.
    """

    candidates: list[AnnotatedCandidate]
    forced: bool = False


class Ranker:
    """Runs the scorer over candidates under the configured length ceilings."""

    def __init__(
        self,
        scorer: ScoringStrategy,
        max_query_length: int = 128,
        max_word_length: int = 1000,
        ignore_case: bool = True,
    ) -> None:
        self._scorer = scorer
        self._max_query_length = max_query_length
        self._max_word_length = max_word_length
        self._ignore_case = ignore_case

    @property
    def scorer(self) -> ScoringStrategy:
        return self._scorer

    def bypasses(self, query: str) -> bool:
        """True when ``query`` is too short or too long to be worth scoring."""
        return not query or len(query) > self._max_query_length

    def score(
        self,
        to_score: Sequence[AnnotatedCandidate],
        query: str,
        host_ignore_case: bool = False,
    ) -> RankResult:
        """
        Score ``to_score`` against ``query``.

        Args:
            to_score: Candidates selected by the partitioner
            query: Text typed for the current field
            host_ignore_case: The host's own case-folding setting; applies
                only when the ``ignore_case`` policy is off

        Returns:
            Matching candidates as scored copies, in input order. Candidates
            longer than the word ceiling are kept with a score of 0 and no
            indices. Non-matching candidates are dropped.
        """
        if self.bypasses(query):
            logger.debug(f"Skipping scoring for query of length {len(query)}; {len(to_score)} candidates forced")
            return RankResult(candidates=[replace(c, forced=True) for c in to_score], forced=True)

        ignore_case = self._ignore_case or host_ignore_case
        results: list[AnnotatedCandidate] = []
        skipped = 0
        for candidate in to_score:
            if len(candidate.text) > self._max_word_length:
                skipped += 1
                results.append(replace(candidate, score=0, indices=()))
                continue

            match = self._scorer.match(candidate.text, query, ignore_case)
            if match is None:
                continue
            results.append(replace(candidate, score=match.score, indices=match.indices))

        logger.debug(
            f"Scored {len(to_score) - skipped} candidates with {self._scorer.name} scorer: "
            f"{len(results) - skipped} matched, {skipped} too long to score"
        )
        return RankResult(candidates=results)


def score_of(candidate: AnnotatedCandidate) -> float:
    return candidate.score if candidate.score is not None else 0


def compare(a: AnnotatedCandidate, b: AnnotatedCandidate) -> int:
    """Order by score descending, then by text length ascending."""
    score_a, score_b = score_of(a), score_of(b)
    if score_a != score_b:
        return -1 if score_a > score_b else 1
    return len(a.text) - len(b.text)


def sort_key(candidate: AnnotatedCandidate) -> tuple[float, int]:
    return (-score_of(candidate), len(candidate.text))


def sort_candidates(candidates: Iterable[AnnotatedCandidate]) -> list[AnnotatedCandidate]:
    """Sort for display; installed as the host's display and cycle sort."""
    return sorted(candidates, key=sort_key)


