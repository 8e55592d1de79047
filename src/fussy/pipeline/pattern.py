"""
Pattern compilation.

Classifies the call (file names or generic candidates), finds the field
boundary around the cursor and builds the flex regex used for filtering and
delegated highlighting. Nothing here affects scores.
"""

from __future__ import annotations

import re
from functools import lru_cache

from fussy.domain.types import Pattern

FILE_CATEGORY = "file"


def compile_pattern(text: str, point: int | None = None, category: str | None = None) -> Pattern:
    """
    Compile the input around the cursor into a :class:`Pattern`.

    Args:
        text: Full input text
        point: Cursor position; defaults to the end of ``text``
        category: Completion category of the pool; ``"file"`` enables
            filename handling

    Returns:
        The compiled pattern. Never fails; an empty query matches everything.
    """
    if point is None:
        point = len(text)
    point = max(0, min(point, len(text)))

    filename = category == FILE_CATEGORY
    before_point = text[:point]
    boundary = before_point.rfind("/") + 1 if filename else 0

    return Pattern(
        query=before_point[boundary:],
        before=before_point[:boundary],
        after=text[point:],
        point=point,
        base_size=boundary,
        filename=filename,
    )


@lru_cache(maxsize=128)
def flex_regex(query: str, ignore_case: bool) -> re.Pattern[str]:
    """
    Regex matching any text that contains ``query`` as a subsequence.

    Each query character is its own group so callers can recover the
    leftmost matched positions. Every gap is a negated class anchored at
    the start of the text, so a failed match costs one pass over it.
    """
    body = r"\A" + "".join(f"[^{re.escape(character)}]*({re.escape(character)})" for character in query)
    return re.compile(body, re.IGNORECASE if ignore_case else 0)
