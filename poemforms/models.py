"""Pydantic models for poem forms."""

from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from poemforms.colors import Color
from poemforms.glyph import Glyph

UNTITLED = "Untitled"
UNKNOWN_AUTHOR = "Unknown"


class SortMode(str, Enum):
    DEFAULT = "default"
    MOST_LINES = "most-lines"
    FEWEST_LINES = "fewest-lines"
    LONGEST_LINE = "longest-line"
    TITLE = "title"


def _clean_name(value: Any, fallback: str) -> str:
    if not isinstance(value, str):
        return fallback
    return value.strip() or fallback


# --- Input records ---


class PoemRecord(BaseModel):
    """A poem as fetched, normalized so every field is usable."""

    model_config = ConfigDict(frozen=True)

    title: str = UNTITLED
    author: str = UNKNOWN_AUTHOR
    lines: tuple[str, ...] = ()

    @field_validator("title", mode="before")
    @classmethod
    def _normalize_title(cls, value: Any) -> str:
        return _clean_name(value, UNTITLED)

    @field_validator("author", mode="before")
    @classmethod
    def _normalize_author(cls, value: Any) -> str:
        return _clean_name(value, UNKNOWN_AUTHOR)

    @field_validator("lines", mode="before")
    @classmethod
    def _normalize_lines(cls, value: Any) -> tuple[str, ...]:
        if not isinstance(value, (list, tuple)):
            return ()
        stripped = (s.rstrip() for s in value if isinstance(s, str))
        return tuple(s for s in stripped if s)

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "PoemRecord":
        """Build a record from a PoetryDB-shaped mapping, defaulting missing fields."""
        return cls(
            title=raw.get("title"),
            author=raw.get("author"),
            lines=raw.get("lines"),
        )


# --- Derived records ---


class CardRecord(BaseModel):
    """Renderable card for one poem: glyph plus filter/sort/group metadata."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    title: str
    author: str
    line_count: int
    max_line_length: int
    glyph: Glyph
    color: Color
    groups: frozenset[str]
    lines: tuple[str, ...] = ()

    @property
    def search_title(self) -> str:
        return self.title.lower()

    @property
    def search_author(self) -> str:
        return self.author.lower()

    @property
    def stats_label(self) -> str:
        return f"{self.line_count} line(s) · longest line: {self.max_line_length} chars"


class ViewState(BaseModel):
    query: str = ""
    sort_mode: SortMode = SortMode.DEFAULT
