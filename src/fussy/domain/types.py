"""Value types shared by every stage of the completion pipeline."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

__all__ = [
    "Candidate",
    "MatchScore",
    "Pattern",
    "HighlightKind",
    "HighlightSpan",
    "AnnotatedCandidate",
    "CompletionContext",
    "CompletionMetadata",
    "CompletionResult",
    "Pool",
    "SortFunction",
    "normalize_pool",
]


@dataclass(frozen=True, slots=True)
class Candidate:
    """One completion candidate: display text plus an opaque payload."""

    text: str
    payload: Any = None


@dataclass(frozen=True, slots=True)
class MatchScore:
    """Result of a successful fuzzy match.

    ``indices`` are zero-based positions in the candidate consumed by the
    query, strictly increasing.
    """

    score: float
    indices: tuple[int, ...]


@dataclass(frozen=True, slots=True)
class Pattern:
    """Compiled query plus the positional context it was taken from.

    Attributes
    ----------
    query : str
        Text between the field boundary and the cursor; what gets scored.
    before : str
        Input text before the field boundary (e.g. the directory part of a path).
    after : str
        Input text after the cursor.
    point : int
        Cursor position in the full input.
    base_size : int
        Offset of the field boundary; the host prepends ``input[:base_size]``
        to whichever candidate is chosen.
    filename : bool
        The pool holds file names; highlighting is delegated to the
        pattern highlighter.
    """

    query: str
    before: str = ""
    after: str = ""
    point: int = 0
    base_size: int = 0
    filename: bool = False

    @property
    def is_empty(self) -> bool:
        """An empty pattern matches everything."""
        return not self.query


class HighlightKind(str, Enum):
    """Visual categories of highlight spans."""

    MATCHED = "matched"
    DIVERGENCE = "divergence"


@dataclass(frozen=True, slots=True)
class HighlightSpan:
    """Half-open character range ``[start, end)`` marked for emphasis."""

    start: int
    end: int
    kind: HighlightKind = HighlightKind.MATCHED


@dataclass(frozen=True, slots=True)
class AnnotatedCandidate:
    """A candidate travelling through the pipeline with its annotations.

    ``score`` is ``None`` for candidates that were never scored (passthrough,
    or the empty/overlong query fast path); the comparator reads it as 0.
    """

    text: str
    payload: Any = None
    score: float | None = None
    indices: tuple[int, ...] = ()
    spans: tuple[HighlightSpan, ...] = ()
    forced: bool = False

    @classmethod
    def wrap(cls, candidate: Candidate) -> AnnotatedCandidate:
        return cls(text=candidate.text, payload=candidate.payload)

    @property
    def scored(self) -> bool:
        return self.score is not None


@dataclass(frozen=True, slots=True)
class CompletionContext:
    """Per-call state the host would otherwise keep globally.

    Attributes
    ----------
    input_text : str
        Contents of the interactive input area. A non-empty input is taken
        as a sign that the pool is being filtered.
    category : str | None
        Completion category of the pool; ``"file"`` selects filename handling.
    host_ignore_case : bool
        The host's ambient case-folding setting, used when the style's own
        ``ignore_case`` policy is off.
    """

    input_text: str = ""
    category: str | None = None
    host_ignore_case: bool = False


SortFunction = Callable[[list[AnnotatedCandidate]], list[AnnotatedCandidate]]


@dataclass(frozen=True, slots=True)
class CompletionMetadata:
    """Sorting hooks the host applies to the result list."""

    category: str | None = None
    display_sort: SortFunction | None = None
    cycle_sort: SortFunction | None = None


@dataclass(slots=True)
class CompletionResult:
    """Output of ``all_completions``.

    ``candidates`` holds the scored group followed by the passthrough group;
    the host applies the total order through ``CompletionMetadata``.
    """

    candidates: list[AnnotatedCandidate] = field(default_factory=list)
    base_size: int = 0

    @property
    def texts(self) -> list[str]:
        return [candidate.text for candidate in self.candidates]

    def __len__(self) -> int:
        return len(self.candidates)


Pool = Union[Mapping[str, Any], Iterable[Union[str, Candidate, Sequence[Any]]]]


def normalize_pool(pool: Pool) -> list[Candidate]:
    """Turn any supported pool shape into a list of ``Candidate``.

    Accepted shapes: a mapping of text to payload, or an iterable of strings,
    ``Candidate`` objects, or ``(text, payload)`` pairs.
    """
    if isinstance(pool, Mapping):
        return [Candidate(str(text), payload) for text, payload in pool.items()]

    candidates: list[Candidate] = []
    for item in pool:
        if isinstance(item, Candidate):
            candidates.append(item)
        elif isinstance(item, str):
            candidates.append(Candidate(item))
        else:
            text, payload = item
            candidates.append(Candidate(str(text), payload))
    return candidates
