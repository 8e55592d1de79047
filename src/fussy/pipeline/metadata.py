"""
Metadata adjustment: which sort functions the host applies to the results.
"""

from __future__ import annotations

from dataclasses import replace

from fussy.domain.types import CompletionContext, CompletionMetadata
from fussy.logger import get_logger

from .ranker import sort_candidates

logger = get_logger("pipeline.metadata")


class FuzzySortAdjustment:
    """Installs the score comparator as the display and cycle sort.

    Only installed while the input area is non-empty; an empty input is
    taken to mean nothing is being filtered (e.g. a plain file listing).
    This is an approximation: a non-empty input does not guarantee that
    the candidates were filtered by this style.
    """

    def adjust(self, metadata: CompletionMetadata, context: CompletionContext) -> CompletionMetadata:
        if not context.input_text:
            return metadata
        logger.debug(f"Installing score sort for category {metadata.category}")
        return replace(metadata, display_sort=sort_candidates, cycle_sort=sort_candidates)


class HostDefaultAdjustment:
    """Leaves the host's sort functions untouched."""

    def adjust(self, metadata: CompletionMetadata, context: CompletionContext) -> CompletionMetadata:
        return metadata
