"""Tests for the PNG contact sheet."""

from PIL import Image

from poemforms.config import SheetConfig
from poemforms.output.contact_sheet import TEXT_BLOCK, layout_sheet, render_contact_sheet


class TestLayout:
    def test_columns_capped_by_card_count(self, cards):
        layout = layout_sheet(cards[:2], SheetConfig(columns=4, cell_width=100, padding=10))
        assert layout.columns == 2
        assert layout.rows == 1
        assert layout.width == 2 * 100 + 3 * 10

    def test_rows_and_heights(self, cards):
        layout = layout_sheet(cards, SheetConfig(columns=3, cell_width=320, padding=10))
        assert layout.rows == 2
        # first row holds the 14-line poem: 14 * 8 - 2 = 110 canvas units at scale 1
        assert layout.row_heights[0] == TEXT_BLOCK + 110
        # second row holds a 4-line poem: 4 * 8 - 2 = 30
        assert layout.row_heights[1] == TEXT_BLOCK + 30

    def test_empty(self):
        layout = layout_sheet([], SheetConfig())
        assert layout.columns == 1
        assert layout.rows == 1


class TestRenderContactSheet:
    def test_writes_png(self, tmp_path, cards):
        config = SheetConfig(columns=2, cell_width=160, padding=8)
        out = render_contact_sheet(cards, tmp_path / "sheet.png", config)
        with Image.open(out) as img:
            assert img.format == "PNG"
            layout = layout_sheet(cards, config)
            assert img.size == (layout.width, layout.height)

    def test_bars_drawn_in_author_color(self, tmp_path, cards):
        config = SheetConfig(columns=1, cell_width=320, padding=10)
        out = render_contact_sheet(cards[:1], tmp_path / "one.png", config)
        with Image.open(out) as img:
            # middle of the first bar
            pixel = img.convert("RGB").getpixel((10 + 100, 10 + TEXT_BLOCK + 3))
        assert pixel == cards[0].color.rgb

    def test_empty_view(self, tmp_path):
        out = render_contact_sheet([], tmp_path / "empty.png")
        assert out.exists()
