"""Host-facing completion style."""

from .expansion import TryResult, flex_matches, try_expand
from .style import FussyCompletionStyle, Predicate

__all__ = ["FussyCompletionStyle", "Predicate", "TryResult", "flex_matches", "try_expand"]
