"""
fussy: fuzzy completion ranking.

Ranks completion candidates against a typed query by subsequence matching,
bounds the scoring work on large pools, and marks the matched characters
for highlighting.

Example Usage:
    from fussy import FussyCompletionStyle

    style = FussyCompletionStyle()
    for candidate in style.complete("ap", ["apple", "banana", "apricot"]):
        print(candidate.score, candidate.text)
"""

from fussy.completion import FussyCompletionStyle
from fussy.config import FussyConfig, load_config
from fussy.domain.types import (
    AnnotatedCandidate,
    Candidate,
    CompletionContext,
    CompletionMetadata,
    CompletionResult,
    HighlightKind,
    HighlightSpan,
)

__version__ = "0.1.0"
__all__ = [
    "AnnotatedCandidate",
    "Candidate",
    "CompletionContext",
    "CompletionMetadata",
    "CompletionResult",
    "FussyCompletionStyle",
    "FussyConfig",
    "HighlightKind",
    "HighlightSpan",
    "load_config",
]
