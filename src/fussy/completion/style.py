"""
The fussy completion style: the host-facing adapter.

``all_completions`` runs the full pipeline: pattern compilation, flex
filtering, partitioning, scoring and highlighting. The result is not
totally ordered; the host sorts it with the functions installed by
``adjust_metadata``.
"""

from __future__ import annotations

from collections.abc import Callable

from fussy.config import FussyConfig
from fussy.domain.protocols import HighlightStrategy, MetadataAdjustmentStrategy, ScoringStrategy
from fussy.domain.types import (
    AnnotatedCandidate,
    CompletionContext,
    CompletionMetadata,
    CompletionResult,
    Pool,
    normalize_pool,
)
from fussy.logger import get_logger
from fussy.pipeline import (
    FuzzySortAdjustment,
    HostDefaultAdjustment,
    NullHighlighter,
    PatternHighlighter,
    Ranker,
    RunHighlighter,
    compile_pattern,
    partition,
)
from fussy.scoring import select_scorer

from .expansion import TryResult, flex_matches, try_expand

logger = get_logger("completion.style")

Predicate = Callable[[str], bool]


class FussyCompletionStyle:
    """Fuzzy completion style with score-based ordering."""

    def __init__(
        self,
        config: FussyConfig | None = None,
        scorer: ScoringStrategy | None = None,
        highlighter: HighlightStrategy | None = None,
        metadata_adjustment: MetadataAdjustmentStrategy | None = None,
    ) -> None:
        self.config = config or FussyConfig()
        self._scorer = scorer or select_scorer(self.config.scorer)
        self._ranker = Ranker(
            self._scorer,
            max_query_length=self.config.max_query_length,
            max_word_length=self.config.max_word_length_to_score,
            ignore_case=self.config.ignore_case,
        )

        if highlighter is not None:
            self._highlighter = highlighter
        elif self.config.highlight == "none":
            self._highlighter = NullHighlighter()
        else:
            self._highlighter = RunHighlighter()

        if metadata_adjustment is not None:
            self._metadata_adjustment = metadata_adjustment
        elif self.config.metadata_adjustment == "host":
            self._metadata_adjustment = HostDefaultAdjustment()
        else:
            self._metadata_adjustment = FuzzySortAdjustment()

        logger.debug(
            f"FussyCompletionStyle ready (scorer={self._scorer.name}, "
            f"highlighter={type(self._highlighter).__name__}, "
            f"metadata={type(self._metadata_adjustment).__name__})"
        )

    @property
    def scorer(self) -> ScoringStrategy:
        return self._scorer

    def _ignore_case(self, context: CompletionContext) -> bool:
        return self.config.ignore_case or context.host_ignore_case

    def _context(self, text: str, context: CompletionContext | None) -> CompletionContext:
        return context if context is not None else CompletionContext(input_text=text)

    def _highlighter_for(self, filename: bool, ignore_case: bool) -> HighlightStrategy:
        if isinstance(self._highlighter, NullHighlighter) or not filename:
            return self._highlighter
        return PatternHighlighter(ignore_case=ignore_case)

    def try_completion(
        self,
        text: str,
        pool: Pool,
        predicate: Predicate | None = None,
        point: int | None = None,
        context: CompletionContext | None = None,
    ) -> TryResult:
        """
        Expand ``text`` at ``point`` against ``pool``.

        Returns:
            None for no match, True for a unique exact match, otherwise
            ``(new_text, new_point)``
        """
        context = self._context(text, context)
        pattern = compile_pattern(text, point, context.category)
        candidates = [c for c in normalize_pool(pool) if predicate is None or predicate(c.text)]
        return try_expand(candidates, pattern, self._ignore_case(context))

    def all_completions(
        self,
        text: str,
        pool: Pool,
        predicate: Predicate | None = None,
        point: int | None = None,
        context: CompletionContext | None = None,
    ) -> CompletionResult:
        """
        Return the candidates of ``pool`` that fuzzily match ``text``.

        Args:
            text: Full input text
            pool: Candidates; strings, ``Candidate``s, ``(text, payload)``
                pairs or a mapping of text to payload
            predicate: Optional filter applied to candidate text first
            point: Cursor position, defaults to the end of ``text``
            context: Per-call host state; defaults to ``text`` as the input

        Returns:
            Scored, highlighted candidates followed by the unscored
            passthrough candidates, and the field's base size
        """
        context = self._context(text, context)
        pattern = compile_pattern(text, point, context.category)
        ignore_case = self._ignore_case(context)

        candidates = [c for c in normalize_pool(pool) if predicate is None or predicate(c.text)]
        if not self._ranker.bypasses(pattern.query):
            candidates = flex_matches(
                candidates, pattern.query, ignore_case, max_length=self.config.max_word_length_to_score
            )

        annotated = [AnnotatedCandidate.wrap(c) for c in candidates]
        to_score, passthrough = partition(annotated, self.config.max_candidate_limit)

        ranked = self._ranker.score(to_score, pattern.query, host_ignore_case=context.host_ignore_case)
        highlighter = self._highlighter_for(pattern.filename, ignore_case)
        highlighted = highlighter.highlight(ranked.candidates, pattern, forced=ranked.forced)

        logger.debug(
            f"all_completions({pattern.query!r}): {len(highlighted)} ranked, {len(passthrough)} passthrough"
        )
        return CompletionResult(candidates=highlighted + passthrough, base_size=pattern.base_size)

    def adjust_metadata(
        self,
        metadata: CompletionMetadata | None = None,
        context: CompletionContext | None = None,
    ) -> CompletionMetadata:
        """Return the metadata the host should sort the results with."""
        context = context or CompletionContext()
        metadata = metadata or CompletionMetadata(category=context.category)
        return self._metadata_adjustment.adjust(metadata, context)

    def complete(
        self,
        text: str,
        pool: Pool,
        predicate: Predicate | None = None,
        point: int | None = None,
        context: CompletionContext | None = None,
    ) -> list[AnnotatedCandidate]:
        """
        Run both phases the way a host does: collect, then sort.

        The result is ordered by the adjusted ``display_sort`` when one is
        installed, and left in collection order otherwise.
        """
        context = self._context(text, context)
        result = self.all_completions(text, pool, predicate, point, context)
        metadata = self.adjust_metadata(CompletionMetadata(category=context.category), context)
        if metadata.display_sort is None:
            return result.candidates
        return metadata.display_sort(result.candidates)
