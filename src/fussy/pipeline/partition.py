"""
Cost control for large pools.

Scoring is the expensive step, so pools of ``limit`` or more candidates are
split into a scored subset of the ``limit`` shortest candidates and a
passthrough remainder that is returned unranked.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from fussy.logger import get_logger

logger = get_logger("pipeline.partition")

T = TypeVar("T")


def _text_length(candidate) -> int:
    return len(candidate.text)


def partition(candidates: Sequence[T], limit: int) -> tuple[list[T], list[T]]:
    """
    Split ``candidates`` into ``(to_score, passthrough)``.

    Args:
        candidates: Candidates exposing a ``text`` attribute
        limit: Maximum number of candidates to score

    Returns:
        Both lists; together they hold every input candidate exactly once.
        Below the limit the input order is kept and passthrough is empty;
        otherwise both lists follow a stable ascending sort by text length.
    """
    if len(candidates) < limit:
        return list(candidates), []

    if limit <= 0:
        logger.debug(f"Scoring disabled (limit={limit}); {len(candidates)} candidates pass through")
        return [], list(candidates)

    by_length = sorted(candidates, key=_text_length)
    logger.debug(f"Partitioned {len(candidates)} candidates: scoring {limit} shortest")
    return by_length[:limit], by_length[limit:]
