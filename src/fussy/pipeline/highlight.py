"""
Highlighting strategies and rendering.

Strategies only compute :class:`HighlightSpan` tuples; :func:`render` turns
them into a ``rich`` ``Text`` for display.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from rich.text import Text

from fussy.domain.types import AnnotatedCandidate, HighlightKind, HighlightSpan, Pattern
from fussy.logger import get_logger

from .pattern import flex_regex

logger = get_logger("pipeline.highlight")

# Characters after the last match marked as the first divergence
DIVERGENCE_WIDTH = 2


def run_spans(indices: Sequence[int], length: int) -> tuple[HighlightSpan, ...]:
    """
    Spans for contiguous runs of matched indices.

    Every maximal run of adjacent indices becomes one MATCHED span. The one
    or two characters after the last index become a DIVERGENCE span.

    Args:
        indices: Matched positions, strictly increasing
        length: Length of the candidate text

    Returns:
        Spans in text order
    """
    if not indices:
        return ()

    spans: list[HighlightSpan] = []
    start = previous = indices[0]
    for index in indices[1:]:
        if index != previous + 1:
            spans.append(HighlightSpan(start, previous + 1))
            start = index
        previous = index
    spans.append(HighlightSpan(start, previous + 1))

    tail_end = min(previous + 1 + DIVERGENCE_WIDTH, length)
    if previous + 1 < tail_end:
        spans.append(HighlightSpan(previous + 1, tail_end, HighlightKind.DIVERGENCE))
    return tuple(spans)


def _whole(candidate: AnnotatedCandidate) -> tuple[HighlightSpan, ...]:
    if not candidate.text:
        return ()
    return (HighlightSpan(0, len(candidate.text)),)


class RunHighlighter:
    """Highlights contiguous runs of the scorer's matched indices."""

    def highlight(
        self,
        candidates: Sequence[AnnotatedCandidate],
        pattern: Pattern,
        forced: bool = False,
    ) -> list[AnnotatedCandidate]:
        if forced:
            return [replace(c, spans=_whole(c)) for c in candidates]
        return [replace(c, spans=run_spans(c.indices, len(c.text))) for c in candidates]


class PatternHighlighter:
    """Highlights by re-matching the pattern against each candidate.

    Used for file names: the pattern's groups mark the matched characters
    and the single character after the last group marks the first
    divergence, the way path completion highlights segments.
    """

    def __init__(self, ignore_case: bool = True) -> None:
        self._ignore_case = ignore_case

    def highlight(
        self,
        candidates: Sequence[AnnotatedCandidate],
        pattern: Pattern,
        forced: bool = False,
    ) -> list[AnnotatedCandidate]:
        if forced or pattern.is_empty:
            return [replace(c, spans=_whole(c)) for c in candidates]

        regex = flex_regex(pattern.query, self._ignore_case)
        return [replace(c, spans=self._spans(regex, c.text)) for c in candidates]

    def _spans(self, regex, text: str) -> tuple[HighlightSpan, ...]:
        found = regex.search(text)
        if found is None:
            return ()

        positions = [found.start(group) for group in range(1, (found.lastindex or 0) + 1)]
        spans = list(run_spans(positions, len(text)))
        if spans and spans[-1].kind is HighlightKind.DIVERGENCE:
            last = spans.pop()
            spans.append(HighlightSpan(last.start, last.start + 1, HighlightKind.DIVERGENCE))
        return tuple(spans)


class NullHighlighter:
    """Highlighting disabled; candidates pass through untouched."""

    def highlight(
        self,
        candidates: Sequence[AnnotatedCandidate],
        pattern: Pattern,
        forced: bool = False,
    ) -> list[AnnotatedCandidate]:
        return list(candidates)


def render(
    candidate: AnnotatedCandidate,
    matched_style: str = "bold magenta",
    divergence_style: str = "bold underline",
) -> Text:
    """Render ``candidate`` as rich ``Text`` with its spans stylized."""
    text = Text(candidate.text)
    for span in candidate.spans:
        style = matched_style if span.kind is HighlightKind.MATCHED else divergence_style
        text.stylize(style, span.start, span.end)
    return text
