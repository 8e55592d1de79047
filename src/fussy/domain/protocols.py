"""Strategy protocols for the pluggable parts of the pipeline.

Concrete implementations are picked when the completion style is built,
never swapped per call.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from fussy.domain.types import (
    AnnotatedCandidate,
    CompletionContext,
    CompletionMetadata,
    MatchScore,
    Pattern,
)

__all__ = ["ScoringStrategy", "HighlightStrategy", "MetadataAdjustmentStrategy"]


class ScoringStrategy(Protocol):
    """Opaque subsequence scorer."""

    name: str

    def match(self, candidate: str, query: str, ignore_case: bool) -> MatchScore | None:
        """Score ``candidate`` against ``query``.

        Args:
            candidate: Text to score
            query: Non-empty query text
            ignore_case: Fold case before matching

        Returns:
            The score and matched indices, or None if ``query`` is not a
            subsequence of ``candidate``
        """
        ...


class HighlightStrategy(Protocol):
    """Turns match data into highlight spans."""

    def highlight(
        self,
        candidates: Sequence[AnnotatedCandidate],
        pattern: Pattern,
        forced: bool = False,
    ) -> list[AnnotatedCandidate]:
        """Return copies of ``candidates`` carrying highlight spans."""
        ...


class MetadataAdjustmentStrategy(Protocol):
    """Decides which sort functions the host uses for the results."""

    def adjust(self, metadata: CompletionMetadata, context: CompletionContext) -> CompletionMetadata:
        ...
