"""Contact sheet — the current view rasterized into one shareable PNG.

Cards are laid out left to right, top to bottom, in view order. Each cell
holds the title, the author in the author's color, and the glyph scaled to
the cell width.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from PIL import Image, ImageDraw, ImageFont

from poemforms.config import SheetConfig
from poemforms.models import CardRecord

logger = logging.getLogger(__name__)

# --- Fonts ---

_FONT_BOLD = "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf"
_FONT_REGULAR = "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf"


def _font(size: int, bold: bool = False) -> ImageFont.ImageFont | ImageFont.FreeTypeFont:
    path = _FONT_BOLD if bold else _FONT_REGULAR
    try:
        return ImageFont.truetype(path, size)
    except OSError:
        logger.debug("Font %s unavailable, using Pillow default", path)
        return ImageFont.load_default()


# --- Colors ---

TEXT = (230, 237, 243)
TEXT_DIM = (110, 118, 129)

TITLE_SIZE = 15
AUTHOR_SIZE = 12
TEXT_BLOCK = 40  # title + author + spacing above the glyph


@dataclass
class SheetLayout:
    columns: int
    rows: int
    cell_width: int
    row_heights: list[int]
    padding: int

    @property
    def width(self) -> int:
        return self.columns * self.cell_width + (self.columns + 1) * self.padding

    @property
    def height(self) -> int:
        return sum(self.row_heights) + (self.rows + 1) * self.padding


def _scaled_height(card: CardRecord, cell_width: int) -> int:
    return round(card.glyph.height * cell_width / card.glyph.width)


def layout_sheet(view: Sequence[CardRecord], config: SheetConfig) -> SheetLayout:
    columns = max(1, min(config.columns, len(view))) if view else 1
    rows = max(1, -(-len(view) // columns))
    row_heights = []
    for r in range(rows):
        row = view[r * columns:(r + 1) * columns]
        glyph_h = max((_scaled_height(c, config.cell_width) for c in row), default=0)
        row_heights.append(TEXT_BLOCK + glyph_h)
    return SheetLayout(columns, rows, config.cell_width, row_heights, config.padding)


def _draw_card(draw: ImageDraw.ImageDraw, card: CardRecord, x: int, y: int, cell_width: int) -> None:
    draw.text((x, y), card.title, fill=TEXT, font=_font(TITLE_SIZE, bold=True))
    draw.text((x, y + TITLE_SIZE + 4), card.author, fill=card.color.rgb, font=_font(AUTHOR_SIZE))

    scale = cell_width / card.glyph.width
    top = y + TEXT_BLOCK
    radius = card.glyph.corner_radius * scale
    for bar in card.glyph.bars:
        x0 = x + bar.x * scale
        y0 = top + bar.y * scale
        x1 = x0 + max(1.0, bar.width * scale)
        y1 = y0 + max(1.0, bar.height * scale)
        draw.rounded_rectangle((x0, y0, x1, y1), radius=radius, fill=card.color.rgb)


def render_contact_sheet(
    view: Sequence[CardRecord], output_path: Path, config: SheetConfig | None = None,
) -> Path:
    """Draw ``view`` into a PNG at ``output_path``."""
    config = config or SheetConfig()
    layout = layout_sheet(view, config)
    img = Image.new("RGB", (layout.width, layout.height), tuple(config.background))
    draw = ImageDraw.Draw(img)

    if not view:
        draw.text((config.padding, config.padding), "No poems match.", fill=TEXT_DIM, font=_font(TITLE_SIZE))

    y = config.padding
    for r, row_h in enumerate(layout.row_heights):
        row = view[r * layout.columns:(r + 1) * layout.columns]
        for c, card in enumerate(row):
            x = config.padding + c * (layout.cell_width + config.padding)
            _draw_card(draw, card, x, y, layout.cell_width)
        y += row_h + config.padding

    output_path.parent.mkdir(parents=True, exist_ok=True)
    img.save(output_path, "PNG")
    logger.info("Contact sheet saved to %s (%dx%d, %d cards)", output_path, layout.width, layout.height, len(view))
    return output_path
