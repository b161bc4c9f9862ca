"""Filter/sort engine — (cards, query, sort mode) → ordered view.

A pure function of its inputs: presentation layers hand it the current
card set and ViewState and redraw whatever comes back.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from poemforms.models import CardRecord, SortMode, ViewState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SortSpec:
    key: Callable[[CardRecord], Any]
    descending: bool = False


_SORT_SPECS: dict[SortMode, SortSpec] = {
    SortMode.MOST_LINES: SortSpec(key=lambda c: c.line_count, descending=True),
    SortMode.FEWEST_LINES: SortSpec(key=lambda c: c.line_count),
    SortMode.LONGEST_LINE: SortSpec(key=lambda c: c.max_line_length, descending=True),
    SortMode.TITLE: SortSpec(key=lambda c: c.search_title),
}


def parse_sort_mode(value: SortMode | str | None) -> SortMode:
    """Coerce a selector value to a SortMode; unknown values mean default order."""
    if isinstance(value, SortMode):
        return value
    try:
        return SortMode(value)
    except ValueError:
        logger.debug("Unrecognized sort mode %r, using default order", value)
        return SortMode.DEFAULT


def normalize_query(query: str | None) -> str:
    return (query or "").strip().lower()


def make_filter(query: str | None) -> Callable[[CardRecord], bool]:
    """Predicate for case-insensitive substring match on title or author."""
    q = normalize_query(query)
    if not q:
        return lambda card: True
    return lambda card: q in card.search_title or q in card.search_author


def sort_spec(mode: SortMode | str | None) -> SortSpec | None:
    """Key extractor and direction for a mode; None means original order."""
    return _SORT_SPECS.get(parse_sort_mode(mode))


def compute_view(
    cards: Sequence[CardRecord],
    query: str | None = "",
    sort_mode: SortMode | str | None = SortMode.DEFAULT,
) -> list[CardRecord]:
    """Visible subset of ``cards`` in display order.

    Sorting is stable in both directions: ``sorted(..., reverse=True)``
    keeps tied elements in their original relative order.
    """
    keep = make_filter(query)
    visible = [card for card in cards if keep(card)]

    spec = sort_spec(sort_mode)
    if spec is None:
        return visible
    return sorted(visible, key=spec.key, reverse=spec.descending)


def compute_state_view(cards: Sequence[CardRecord], state: ViewState) -> list[CardRecord]:
    return compute_view(cards, state.query, state.sort_mode)
