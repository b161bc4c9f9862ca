#!/usr/bin/env python3
"""Poem Forms MCP Server — search and sort the poem grid."""

import json
import logging
import sys
from typing import Optional

from mcp.server.fastmcp import FastMCP

from poemforms.config import load_config
from poemforms.grid import Grid
from poemforms.grouping import group_cards
from poemforms.server import card_summary
from poemforms.view import compute_view

mcp = FastMCP("poemforms")
logger = logging.getLogger(__name__)

# Redirect all logging to stderr so stdout stays clean for MCP stdio transport
logging.basicConfig(
    stream=sys.stderr,
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

_grid: Grid | None = None


def _get_grid() -> Grid:
    global _grid
    if _grid is None:
        _grid = Grid(load_config())
        _grid.reload()
    return _grid


@mcp.tool()
def reload_poems() -> str:
    """Fetch a fresh set of poems and rebuild the grid."""
    grid = _get_grid()
    result = grid.reload()
    return json.dumps({"poems": len(result.poems), "source": result.source.value})


@mcp.tool()
def search_poems(query: str = "", sort_mode: Optional[str] = None) -> str:
    """Filter by title/author substring and order by most-lines, fewest-lines, longest-line, or title."""
    cards = compute_view(_get_grid().cards, query, sort_mode)
    return json.dumps([card_summary(c) for c in cards])


@mcp.tool()
def get_glyph(title: str) -> str:
    """Get the SVG glyph for the first poem whose title matches exactly (case-insensitive)."""
    wanted = title.strip().lower()
    for card in _get_grid().cards:
        if card.search_title == wanted:
            return json.dumps({"title": card.title, "svg": card.glyph.to_svg(title=card.title)})
    return json.dumps({"error": f"Poem not found: {title}"})


@mcp.tool()
def list_groups(prefix: str = "") -> str:
    """List grouping tags (author:..., length:...) with the titles in each."""
    groups = group_cards(_get_grid().cards, prefix)
    return json.dumps({tag: [c.title for c in cards] for tag, cards in groups.items()})


if __name__ == "__main__":
    mcp.run()
