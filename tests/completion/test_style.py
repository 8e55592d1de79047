"""End-to-end tests for FussyCompletionStyle."""

import time

import pytest

from fussy.completion import FussyCompletionStyle
from fussy.config import FussyConfig
from fussy.domain.types import (
    Candidate,
    CompletionContext,
    CompletionMetadata,
    HighlightKind,
    HighlightSpan,
)
from fussy.pipeline.highlight import NullHighlighter
from fussy.pipeline.ranker import sort_candidates


@pytest.fixture(params=["python", "native"])
def style(request) -> FussyCompletionStyle:
    return FussyCompletionStyle(FussyConfig(scorer=request.param))


class TestAllCompletions:
    """Tests for the full ranking pipeline."""

    def test_matching_candidates_rank_above_non_matching(self, style):
        ranked = style.complete("ap", ["apple", "banana", "apricot"])

        assert {c.text for c in ranked} == {"apple", "apricot"}
        assert all(c.score > 0 for c in ranked)

    def test_matched_characters_are_highlighted(self, style):
        result = style.all_completions("ap", ["apricot"])

        [candidate] = result.candidates
        assert candidate.indices == (0, 1)
        assert candidate.spans == (
            HighlightSpan(0, 2, HighlightKind.MATCHED),
            HighlightSpan(2, 4, HighlightKind.DIVERGENCE),
        )

    def test_payload_round_trip(self, style):
        payload = {"doc": "a fruit"}

        [candidate] = style.all_completions("ap", [("apple", payload), ("kiwi", None)]).candidates

        assert candidate.text == "apple"
        assert candidate.payload is payload
        assert candidate.spans

    def test_mapping_pool(self, style):
        result = style.all_completions("ki", {"kiwi": 1, "apple": 2})

        assert [(c.text, c.payload) for c in result.candidates] == [("kiwi", 1)]

    def test_source_pool_is_not_mutated(self, style):
        pool = [Candidate("apple"), Candidate("apricot")]
        snapshot = list(pool)

        style.all_completions("ap", pool)

        assert pool == snapshot

    def test_predicate_filters_first(self, style):
        result = style.all_completions("ap", ["apple", "apricot"], predicate=lambda text: text != "apple")

        assert result.texts == ["apricot"]

    def test_empty_query_highlights_everything(self, style):
        result = style.all_completions("", ["apple", "banana"])

        assert result.texts == ["apple", "banana"]
        assert all(c.forced for c in result.candidates)
        assert all(c.spans == (HighlightSpan(0, len(c.text)),) for c in result.candidates)


class TestCostControls:
    """Tests for the partitioning and length ceilings."""

    def test_partitioned_pool_with_empty_query(self, stub_scorer):
        style = FussyCompletionStyle(FussyConfig(max_candidate_limit=2), scorer=stub_scorer)

        result = style.all_completions("", ["a", "bb", "ccc", "dddd"])

        assert result.texts == ["a", "bb", "ccc", "dddd"]
        scored, passthrough = result.candidates[:2], result.candidates[2:]
        assert all(c.forced and c.spans for c in scored)
        assert all(not c.forced and c.spans == () and c.score is None for c in passthrough)
        assert stub_scorer.calls == []

    def test_only_limit_candidates_are_scored(self, stub_scorer):
        style = FussyCompletionStyle(FussyConfig(max_candidate_limit=3), scorer=stub_scorer)
        pool = [f"item{'x' * n}" for n in range(10)]

        result = style.all_completions("it", pool)

        assert len(stub_scorer.calls) == 3
        assert len(result) == 10
        assert [c.scored for c in result.candidates] == [True] * 3 + [False] * 7

    def test_passthrough_sorts_after_scored(self, stub_scorer):
        style = FussyCompletionStyle(FussyConfig(max_candidate_limit=1), scorer=stub_scorer)

        ranked = style.complete("b", ["abbbbbb", "b"])

        assert [c.text for c in ranked] == ["b", "abbbbbb"]

    def test_overlong_query_skips_scoring(self, stub_scorer):
        style = FussyCompletionStyle(FussyConfig(max_query_length=4), scorer=stub_scorer)

        result = style.all_completions("zzzzz", ["apple", "banana"])

        assert stub_scorer.calls == []
        assert result.texts == ["apple", "banana"]
        assert all(c.forced and c.spans for c in result.candidates)

    def test_long_words_kept_unscored(self, stub_scorer):
        style = FussyCompletionStyle(FussyConfig(max_word_length_to_score=5), scorer=stub_scorer)

        result = style.all_completions("ap", ["apple", "applesauce"])

        assert result.texts == ["apple", "applesauce"]
        assert result.candidates[1].score == 0
        assert result.candidates[1].spans == ()

    def test_long_words_skip_the_subsequence_filter(self, stub_scorer):
        style = FussyCompletionStyle(FussyConfig(max_word_length_to_score=5), scorer=stub_scorer)

        result = style.all_completions("ap", ["apple", "zzzzzz", "zzz"])

        assert result.texts == ["apple", "zzzzzz"]
        assert result.candidates[1].score == 0
        assert [call[0] for call in stub_scorer.calls] == ["apple"]

    @pytest.mark.parametrize("scorer", ["python", "native"])
    def test_repeated_letters_complete_quickly(self, scorer):
        style = FussyCompletionStyle(FussyConfig(scorer=scorer))

        start = time.time()
        result = style.all_completions("aaaaab", ["a" * 40 + "cb"])
        elapsed = time.time() - start

        assert elapsed < 0.5
        assert len(result) == 1
        indices = result.candidates[0].indices
        assert len(indices) == 6
        assert indices[-1] == 41

    @pytest.mark.parametrize("scorer", ["python", "native"])
    def test_near_miss_on_long_candidate_is_fast(self, scorer):
        style = FussyCompletionStyle(FussyConfig(scorer=scorer))

        start = time.time()
        result = style.all_completions("abcdz", ["abcd" * 250] * 20)
        elapsed = time.time() - start

        assert elapsed < 0.5
        assert len(result) == 0


class TestFileCompletion:
    """Tests for filename pools."""

    def test_base_size_and_delegated_highlight(self):
        style = FussyCompletionStyle(FussyConfig(scorer="python"))
        context = CompletionContext(input_text="src/fy", category="file")

        result = style.all_completions("src/fy", ["fussy.py", "main.c"], context=context)

        assert result.base_size == 4
        [candidate] = result.candidates
        assert candidate.text == "fussy.py"
        assert candidate.spans[-1] == HighlightSpan(5, 6, HighlightKind.DIVERGENCE)

    def test_disabled_highlighting_applies_to_files(self, stub_scorer):
        style = FussyCompletionStyle(FussyConfig(highlight="none"), scorer=stub_scorer)
        context = CompletionContext(category="file")

        result = style.all_completions("f", ["fussy.py"], context=context)

        assert result.candidates[0].spans == ()


class TestStrategies:
    """Tests for strategy selection from configuration."""

    def test_highlight_none_uses_null_highlighter(self, stub_scorer):
        style = FussyCompletionStyle(FussyConfig(highlight="none"), scorer=stub_scorer)

        result = style.all_completions("ap", ["apple"])

        assert result.candidates[0].spans == ()
        assert result.candidates[0].score is not None

    def test_injected_highlighter(self, stub_scorer):
        style = FussyCompletionStyle(scorer=stub_scorer, highlighter=NullHighlighter())

        assert style.all_completions("ap", ["apple"]).candidates[0].spans == ()

    def test_configured_scorer(self):
        assert FussyCompletionStyle(FussyConfig(scorer="python")).scorer.name == "python"

    def test_case_policy_off_respects_host(self, stub_scorer):
        style = FussyCompletionStyle(FussyConfig(ignore_case=False), scorer=stub_scorer)

        assert style.all_completions("AP", ["apple"]).candidates == []
        context = CompletionContext(input_text="AP", host_ignore_case=True)
        assert style.all_completions("AP", ["apple"], context=context).texts == ["apple"]


class TestMetadata:
    """Tests for adjust_metadata() and complete()."""

    def test_fuzzy_sort_installed_for_active_input(self):
        style = FussyCompletionStyle(FussyConfig(scorer="python"))

        metadata = style.adjust_metadata(CompletionMetadata(), CompletionContext(input_text="ap"))

        assert metadata.display_sort is sort_candidates
        assert metadata.cycle_sort is sort_candidates

    def test_host_adjustment_keeps_collection_order(self, stub_scorer):
        style = FussyCompletionStyle(FussyConfig(metadata_adjustment="host"), scorer=stub_scorer)

        ranked = style.complete("a", ["banana", "apple"])

        assert [c.text for c in ranked] == ["banana", "apple"]

    def test_complete_orders_best_first(self, stub_scorer):
        style = FussyCompletionStyle(scorer=stub_scorer)

        ranked = style.complete("a", ["banana", "apple", "grape"])

        assert [c.text for c in ranked] == ["apple", "banana", "grape"]


class TestTryCompletion:
    """Tests for try_completion()."""

    def test_expands_common_prefix(self, stub_scorer):
        style = FussyCompletionStyle(scorer=stub_scorer)

        assert style.try_completion("app", ["apple", "application"]) == ("appl", 4)

    def test_no_match(self, stub_scorer):
        assert FussyCompletionStyle(scorer=stub_scorer).try_completion("q", ["apple"]) is None

    def test_sole_exact_match(self, stub_scorer):
        assert FussyCompletionStyle(scorer=stub_scorer).try_completion("apple", ["apple"]) is True

    def test_predicate(self, stub_scorer):
        style = FussyCompletionStyle(scorer=stub_scorer)

        result = style.try_completion("app", ["apple", "application"], predicate=lambda t: t.startswith("appli"))

        assert result == ("application", 11)
