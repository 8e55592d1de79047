"""
Ranking pipeline stages.

Leaf-first: pattern compilation, partitioning, scoring and ordering,
highlighting, and the metadata adjustment that installs the ordering.
"""

from .highlight import NullHighlighter, PatternHighlighter, RunHighlighter, render, run_spans
from .metadata import FuzzySortAdjustment, HostDefaultAdjustment
from .partition import partition
from .pattern import compile_pattern, flex_regex
from .ranker import Ranker, RankResult, compare, sort_candidates, sort_key

__all__ = [
    "FuzzySortAdjustment",
    "HostDefaultAdjustment",
    "NullHighlighter",
    "PatternHighlighter",
    "RankResult",
    "Ranker",
    "RunHighlighter",
    "compare",
    "compile_pattern",
    "flex_regex",
    "partition",
    "render",
    "run_spans",
    "sort_candidates",
    "sort_key",
]
