"""Grid owner — the current card set plus the ephemeral view state.

Reloads replace the card set wholesale and reset the view state. Each reload
takes a generation token; a reload that finishes after a newer one has begun
is discarded instead of overwriting the newer grid.
"""

import logging
from typing import Sequence

import requests

from poemforms.cards import build_cards
from poemforms.config import Config
from poemforms.models import CardRecord, SortMode, ViewState
from poemforms.sources import LoadResult, SourceKind, load_poems
from poemforms.view import compute_state_view, parse_sort_mode

logger = logging.getLogger(__name__)


class Grid:
    def __init__(self, config: Config) -> None:
        self.config = config
        self.cards: list[CardRecord] = []
        self.state = ViewState()
        self.source: SourceKind | None = None
        self._generation = 0
        self._installed = 0

    def begin_reload(self) -> int:
        self._generation += 1
        return self._generation

    def install(self, token: int, cards: Sequence[CardRecord], source: SourceKind | None = None) -> bool:
        """Swap in a freshly built card set unless a newer reload superseded it."""
        if token < self._generation:
            logger.info("Discarding stale reload %d (latest is %d)", token, self._generation)
            return False
        self.cards = list(cards)
        self.source = source
        self.state = ViewState()
        self._installed = token
        logger.info("Grid rebuilt with %d cards (reload %d)", len(self.cards), token)
        return True

    def reload(self, session: requests.Session | None = None) -> LoadResult:
        token = self.begin_reload()
        result = load_poems(self.config, session=session)
        self.install(token, build_cards(result.poems, self.config.glyph), result.source)
        return result

    def set_query(self, query: str | None) -> None:
        self.state = self.state.model_copy(update={"query": query or ""})

    def set_sort(self, mode: SortMode | str | None) -> None:
        self.state = self.state.model_copy(update={"sort_mode": parse_sort_mode(mode)})

    def view(self) -> list[CardRecord]:
        return compute_state_view(self.cards, self.state)

    @property
    def generation(self) -> int:
        return self._installed
