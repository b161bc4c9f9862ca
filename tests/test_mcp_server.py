"""Tests for poem forms MCP server tool registration and basic returns."""

import json

import pytest

import poemforms.mcp_server as mcp_mod
from poemforms.grid import Grid
from poemforms.mcp_server import mcp

EXPECTED_TOOLS = {
    "reload_poems",
    "search_poems",
    "get_glyph",
    "list_groups",
}


@pytest.fixture()
def loaded_grid(offline_config, cards, monkeypatch):
    grid = Grid(offline_config)
    grid.install(grid.begin_reload(), cards)
    monkeypatch.setattr(mcp_mod, "_grid", grid)
    return grid


class TestMCPToolRegistration:
    def test_all_tools_registered(self):
        # FastMCP stores tools in _tool_manager._tools dict
        registered = set(mcp._tool_manager._tools.keys())
        assert EXPECTED_TOOLS.issubset(registered), (
            f"Missing tools: {EXPECTED_TOOLS - registered}"
        )


class TestMCPToolReturns:
    def test_search_poems(self, loaded_grid):
        data = json.loads(mcp_mod.search_poems(query="emily", sort_mode="longest-line"))
        assert [c["title"] for c in data] == [
            "Hope is the thing with feathers",
            "Because I could not stop",
        ]

    def test_search_poems_defaults(self, loaded_grid):
        data = json.loads(mcp_mod.search_poems())
        assert len(data) == 4

    def test_get_glyph(self, loaded_grid):
        data = json.loads(mcp_mod.get_glyph("ozymandias"))
        assert data["title"] == "Ozymandias"
        assert data["svg"].startswith("<svg")

    def test_get_glyph_missing_returns_error(self, loaded_grid):
        data = json.loads(mcp_mod.get_glyph("Nonexistent"))
        assert data == {"error": "Poem not found: Nonexistent"}

    def test_list_groups(self, loaded_grid):
        data = json.loads(mcp_mod.list_groups(prefix="length:"))
        assert set(data) == {"length:short", "length:medium"}

    def test_reload_poems(self, loaded_grid):
        data = json.loads(mcp_mod.reload_poems())
        assert data == {"poems": 2, "source": "sample_file"}
        assert len(loaded_grid.cards) == 2
