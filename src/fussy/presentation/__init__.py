"""Terminal UI integrations."""

from .autocomplete import FussyAutoComplete, rank_dropdown_items

__all__ = ["FussyAutoComplete", "rank_dropdown_items"]
