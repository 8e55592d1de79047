"""
Textual autocomplete overlay ranked by the fussy completion style.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from textual.content import Content
from textual_autocomplete import AutoComplete, DropdownItem, TargetState

from fussy.completion import FussyCompletionStyle
from fussy.domain.types import CompletionContext
from fussy.logger import get_logger
from fussy.pipeline import render

logger = get_logger("presentation.autocomplete")


def rank_dropdown_items(
    style: FussyCompletionStyle,
    items: Sequence[DropdownItem],
    search_string: str,
    context: CompletionContext | None = None,
) -> list[DropdownItem]:
    """
    Rank and highlight dropdown items for ``search_string``.

    Each original item rides through the pipeline as the candidate payload,
    so its prefix and id survive.

    Args:
        style: Completion style doing the ranking
        items: Unfiltered dropdown items
        search_string: Text to match
        context: Host state; defaults to ``search_string`` as the input

    Returns:
        New dropdown items, best first, with highlighted main text
    """
    pool = [(item.value, item) for item in items]
    ranked = style.complete(search_string, pool, context=context)

    config = style.config
    ranked_items: list[DropdownItem] = []
    for candidate in ranked:
        original: DropdownItem = candidate.payload
        text = render(candidate, config.matched_style, config.divergence_style)
        ranked_items.append(
            DropdownItem(main=Content.from_rich_text(text), prefix=original.prefix, id=original.id)
        )
    return ranked_items


class FussyAutoComplete(AutoComplete):
    """AutoComplete whose matching and ordering come from the fussy style."""

    def __init__(
        self,
        target: Any,
        candidates: Any = None,
        *,
        style: FussyCompletionStyle | None = None,
        category: str | None = None,
        **kwargs: Any,
    ) -> None:
        self.completion_style = style or FussyCompletionStyle()
        self.completion_category = category
        super().__init__(target=target, candidates=candidates, **kwargs)

    def get_matches(
        self,
        target_state: TargetState,
        candidates: list[DropdownItem],
        search_string: str,
    ) -> list[DropdownItem]:
        context = CompletionContext(input_text=target_state.text, category=self.completion_category)
        try:
            matches = rank_dropdown_items(self.completion_style, candidates, search_string, context)
        except Exception:
            logger.exception("Fuzzy ranking failed; using default matching")
            return super().get_matches(target_state, candidates, search_string)

        logger.debug(f"Ranked {len(matches)} of {len(candidates)} candidates for {search_string!r}")
        return matches
