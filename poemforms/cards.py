"""Card builder — one PoemRecord in, one fully-derived CardRecord out."""

import logging
from typing import Iterable

from poemforms.colors import derive_color
from poemforms.config import GlyphConfig
from poemforms.glyph import GlyphOptions, generate_glyph, line_lengths
from poemforms.grouping import classify
from poemforms.models import CardRecord, PoemRecord

logger = logging.getLogger(__name__)


def build_card(poem: PoemRecord, glyph_config: GlyphConfig | None = None) -> CardRecord:
    """Derive display content and filter/sort/group metadata for a poem.

    The glyph is filled with the author's color so cards by the same poet
    share a hue.
    """
    gc = glyph_config or GlyphConfig()
    color = derive_color(poem.author)
    glyph = generate_glyph(
        poem.lines,
        GlyphOptions(
            bar_thickness=gc.bar_thickness,
            gap=gc.gap,
            max_width=gc.max_width,
            fill_color=color.css,
            corner_radius=gc.corner_radius,
        ),
    )
    return CardRecord(
        title=poem.title,
        author=poem.author,
        line_count=len(poem.lines),
        max_line_length=max([0, *line_lengths(poem.lines)]),
        glyph=glyph,
        color=color,
        groups=classify(poem),
        lines=poem.lines,
    )


def build_cards(
    poems: Iterable[PoemRecord], glyph_config: GlyphConfig | None = None,
) -> list[CardRecord]:
    cards = [build_card(p, glyph_config) for p in poems]
    logger.debug("Built %d cards", len(cards))
    return cards
