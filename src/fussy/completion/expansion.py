"""
Flex prefix expansion for ``try_completion``.

The ranking core does not change this step: candidates that contain the
query as a subsequence are collected, and the input is expanded to their
longest common prefix when that prefix extends the query.
"""

from __future__ import annotations

from collections.abc import Sequence

from fussy.domain.types import Candidate, Pattern
from fussy.logger import get_logger
from fussy.pipeline.pattern import flex_regex
from fussy.utils import common_prefix

logger = get_logger("completion.expansion")

TryResult = bool | tuple[str, int] | None


def _same(a: str, b: str, ignore_case: bool) -> bool:
    return a.lower() == b.lower() if ignore_case else a == b


def flex_matches(
    candidates: Sequence[Candidate],
    query: str,
    ignore_case: bool,
    max_length: int | None = None,
) -> list[Candidate]:
    """
    Candidates containing ``query`` as a subsequence; all of them for an empty query.

    Candidates longer than ``max_length`` are kept without being matched.
    """
    if not query:
        return list(candidates)
    regex = flex_regex(query, ignore_case)
    return [
        candidate
        for candidate in candidates
        if (max_length is not None and len(candidate.text) > max_length) or regex.search(candidate.text)
    ]


def try_expand(candidates: Sequence[Candidate], pattern: Pattern, ignore_case: bool) -> TryResult:
    """
    Expand the field at the cursor.

    Args:
        candidates: Pool after the host predicate
        pattern: Compiled input
        ignore_case: Fold case when matching and comparing

    Returns:
        None when nothing matches, True when the query is the only match and
        matches it exactly, otherwise ``(new_text, new_point)``; the input is
        returned unchanged when no expansion is possible.
    """
    matches = flex_matches(candidates, pattern.query, ignore_case)
    if not matches:
        logger.debug(f"No flex match for {pattern.query!r}")
        return None

    texts = [candidate.text for candidate in matches]
    if len(set(texts)) == 1 and _same(texts[0], pattern.query, ignore_case):
        return True

    if len(set(texts)) == 1:
        expansion = texts[0]
    else:
        prefix = common_prefix(texts, ignore_case)
        extends = len(prefix) > len(pattern.query) and _same(prefix[: len(pattern.query)], pattern.query, ignore_case)
        expansion = prefix if extends else pattern.query

    head = pattern.before + expansion
    logger.debug(f"Expanded {pattern.query!r} to {expansion!r} ({len(matches)} matches)")
    return head + pattern.after, len(head)
