"""
Scoring backends and their selection.

Two interchangeable scorers exist: :class:`NativeScorer` (rapidfuzz, compiled)
and :class:`PythonScorer` (Textual's fuzzy search). Whether the native one can
be imported is checked once per process.
"""

from __future__ import annotations

import importlib.util
from functools import cache
from typing import Literal

from fussy.domain.protocols import ScoringStrategy
from fussy.logger import get_logger

from .python_scorer import PythonScorer

logger = get_logger("scoring")

ScorerChoice = Literal["auto", "native", "python"]

__all__ = ["PythonScorer", "ScorerChoice", "native_available", "select_scorer"]


@cache
def native_available() -> bool:
    """Return True when the rapidfuzz extension can be imported."""
    available = importlib.util.find_spec("rapidfuzz") is not None
    logger.debug(f"Native scorer available: {available}")
    return available


def select_scorer(choice: ScorerChoice = "auto") -> ScoringStrategy:
    """
    Build the scorer for a completion style.

    Args:
        choice: ``"native"`` or ``"python"`` to force a backend, ``"auto"`` to
            prefer the native one when it is installed

    Returns:
        A scoring strategy instance

    Raises:
        ValueError: If ``choice`` is unknown
    """
    if choice not in ("auto", "native", "python"):
        raise ValueError(f"Unknown scorer: {choice!r}")

    if choice == "python" or (choice == "auto" and not native_available()):
        logger.debug(f"Using Python scorer (choice={choice})")
        return PythonScorer()

    from .native_scorer import NativeScorer

    logger.debug(f"Using native scorer (choice={choice})")
    return NativeScorer()
