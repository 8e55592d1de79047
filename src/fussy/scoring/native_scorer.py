"""
Native scorer built on rapidfuzz's Indel alignment.

``query`` is a subsequence of ``candidate`` exactly when their longest common
subsequence is the whole query, i.e. when the Indel distance equals
``len(candidate) - len(query)``. The ``equal`` opcodes of the alignment then
give the matched positions, which are scored by :func:`score_indices`.
"""

from __future__ import annotations

from rapidfuzz.distance import Indel

from fussy.domain.types import MatchScore
from fussy.utils import fold_case

# Characters after which a match counts as the start of a word
WORD_SEPARATORS = frozenset(" -_./:\\")

MATCH_BONUS = 16
FIRST_CHAR_BONUS = 24
WORD_START_BONUS = 20
CAMEL_BONUS = 12
CONSECUTIVE_BONUS = 12
GAP_PENALTY = 2
LEADING_PENALTY = 1
MAX_LEADING_PENALTY = 8


def _is_word_start(text: str, index: int) -> bool:
    if index == 0:
        return True
    previous = text[index - 1]
    return previous in WORD_SEPARATORS


def _is_camel_hump(text: str, index: int) -> bool:
    return index > 0 and text[index].isupper() and text[index - 1].islower()


def score_indices(text: str, indices: tuple[int, ...]) -> int:
    """
    Score a set of matched positions in ``text``.

    Rewards matches at the start of the text, at word starts and camel-case
    humps, and runs of adjacent matches; penalises gaps and a late first match.

    Args:
        text: Candidate text (original casing)
        indices: Matched positions, strictly increasing

    Returns:
        A positive integer score; higher is better
    """
    if not indices:
        return 0

    score = len(indices) * MATCH_BONUS
    score -= min(indices[0] * LEADING_PENALTY, MAX_LEADING_PENALTY)

    previous = None
    for index in indices:
        if index == 0:
            score += FIRST_CHAR_BONUS
        elif _is_word_start(text, index):
            score += WORD_START_BONUS
        elif _is_camel_hump(text, index):
            score += CAMEL_BONUS

        if previous is not None:
            gap = index - previous - 1
            if gap == 0:
                score += CONSECUTIVE_BONUS
            else:
                score -= min(gap, MAX_LEADING_PENALTY) * GAP_PENALTY
        previous = index

    return max(score, 1)


class NativeScorer:
    """rapidfuzz-backed scorer."""

    name = "native"

    def match(self, candidate: str, query: str, ignore_case: bool) -> MatchScore | None:
        if len(query) > len(candidate):
            return None

        source = fold_case(query) if ignore_case else query
        target = fold_case(candidate) if ignore_case else candidate
        if Indel.distance(source, target) != len(target) - len(source):
            return None

        indices = tuple(
            position
            for op in Indel.opcodes(source, target)
            if op.tag == "equal"
            for position in range(op.dest_start, op.dest_end)
        )
        return MatchScore(score=score_indices(candidate, indices), indices=indices)
