"""Domain types and protocols for the completion pipeline."""

from fussy.domain.protocols import HighlightStrategy, MetadataAdjustmentStrategy, ScoringStrategy
from fussy.domain.types import (
    AnnotatedCandidate,
    Candidate,
    CompletionContext,
    CompletionMetadata,
    CompletionResult,
    HighlightKind,
    HighlightSpan,
    MatchScore,
    Pattern,
    Pool,
    SortFunction,
    normalize_pool,
)

__all__ = [
    "AnnotatedCandidate",
    "Candidate",
    "CompletionContext",
    "CompletionMetadata",
    "CompletionResult",
    "HighlightKind",
    "HighlightSpan",
    "HighlightStrategy",
    "MatchScore",
    "MetadataAdjustmentStrategy",
    "Pattern",
    "Pool",
    "ScoringStrategy",
    "SortFunction",
    "normalize_pool",
]
