"""Glyph generator — poem lines as a stack of horizontal bars.

Each line becomes one bar whose width is proportional to the line's trimmed
length relative to the longest line, so the glyph reads as a silhouette of
the poem's shape on the page regardless of how many lines it has.

The glyph is kept as a vector description (bars in canvas units) and is
serialized to SVG on demand, so it renders crisply at any display size.
"""

from dataclasses import dataclass, field
from html import escape
from typing import Sequence

SVG_NS = "http://www.w3.org/2000/svg"
MIN_BAR_WIDTH = 2.0
DEFAULT_FILL = "hotpink"


@dataclass(frozen=True)
class GlyphOptions:
    bar_thickness: int = 6
    gap: int = 2
    max_width: int = 300
    fill_color: str = DEFAULT_FILL
    corner_radius: int = 2


@dataclass(frozen=True)
class Bar:
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class Glyph:
    width: int
    height: int
    fill_color: str = DEFAULT_FILL
    corner_radius: int = 2
    bars: tuple[Bar, ...] = field(default_factory=tuple)

    def to_svg(self, title: str | None = None) -> str:
        """Serialize to a standalone SVG document."""
        parts = [
            f'<svg xmlns="{SVG_NS}" viewBox="0 0 {self.width} {self.height}" role="img">'
        ]
        if title:
            parts.append(f"<title>{escape(title)}</title>")
        fill = escape(self.fill_color, quote=True)
        for bar in self.bars:
            parts.append(
                f'<rect x="{bar.x:g}" y="{bar.y:g}" width="{bar.width:.1f}" '
                f'height="{bar.height:g}" rx="{self.corner_radius}" fill="{fill}"/>'
            )
        parts.append("</svg>")
        return "".join(parts)


def text_length(text: str) -> int:
    """Length in UTF-16 code units, so astral characters count as two."""
    return len(text.encode("utf-16-le", "surrogatepass")) // 2


def line_lengths(lines: Sequence[str]) -> list[int]:
    """Trimmed length of each line, in order."""
    return [text_length(line.strip()) for line in lines]


def generate_glyph(lines: Sequence[str], options: GlyphOptions | None = None) -> Glyph:
    """Map an ordered sequence of poem lines to a bar-chart glyph.

    Bar i spans ``max(2, len_i / longest * max_width)`` and sits at
    ``i * (bar_thickness + gap)``. An empty poem yields a bar-less canvas
    ``bar_thickness`` tall.
    """
    opts = options or GlyphOptions()
    lengths = line_lengths(lines)
    longest = max([1, *lengths])
    step = opts.bar_thickness + opts.gap
    height = max(opts.bar_thickness, len(lengths) * step - opts.gap)

    bars = tuple(
        Bar(
            x=0,
            y=i * step,
            width=max(MIN_BAR_WIDTH, (length / longest) * opts.max_width),
            height=opts.bar_thickness,
        )
        for i, length in enumerate(lengths)
    )
    return Glyph(
        width=opts.max_width,
        height=height,
        fill_color=opts.fill_color,
        corner_radius=opts.corner_radius,
        bars=bars,
    )
