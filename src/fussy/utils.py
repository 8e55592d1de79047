"""
Utility functions for fussy.
"""

import os
from collections.abc import Iterable


def get_project_root() -> str:
    """
    Get the project root directory (parent of src/fussy).

    Returns:
        Absolute path to the project root directory
    """
    return os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def common_prefix(strings: Iterable[str], ignore_case: bool = False) -> str:
    """
    Longest prefix shared by all strings.

    The returned prefix keeps the casing of the first string.

    Args:
        strings: Strings to compare
        ignore_case: Compare characters case-insensitively

    Returns:
        The shared prefix, or "" when ``strings`` is empty
    """
    items = list(strings)
    if not items:
        return ""

    first = items[0]
    end = len(first)
    for other in items[1:]:
        end = min(end, len(other))
        for i in range(end):
            a, b = first[i], other[i]
            if a != b and not (ignore_case and a.lower() == b.lower()):
                end = i
                break
    return first[:end]


def fold_case(text: str) -> str:
    """
    Lowercase ``text`` one character at a time, keeping its length.

    Characters whose lowercase form is longer than one code point (e.g. "İ")
    are kept as they are, so positions in the result are positions in
    ``text``.

    Args:
        text: Text to fold

    Returns:
        The folded text, same length as ``text``
    """
    lowered = text.lower()
    if len(lowered) == len(text):
        return lowered
    return "".join(c if len(c.lower()) != 1 else c.lower() for c in text)
