"""Shared test fixtures for poem forms tests."""

import json

import pytest

from poemforms.cards import build_cards
from poemforms.config import Config, SourceConfig
from poemforms.models import PoemRecord


def make_poem(title: str, author: str, line_lengths: list[int]) -> PoemRecord:
    """Poem whose lines are runs of 'x' with the given lengths."""
    return PoemRecord(title=title, author=author, lines=["x" * n for n in line_lengths])


@pytest.fixture()
def sample_file(tmp_path):
    """A local sample-poems file with two records in PoetryDB's shape."""
    path = tmp_path / "sample-poems.json"
    path.write_text(json.dumps([
        {"title": "Fire and Ice", "author": "Robert Frost",
         "lines": ["Some say the world will end in fire,", "Some say in ice."]},
        {"title": "  ", "author": None, "lines": ["only line   ", "   "]},
    ]))
    return path


@pytest.fixture()
def offline_config(tmp_path, sample_file):
    """Config that never touches the network and reads the temp sample file."""
    return Config(source=SourceConfig(offline=True, sample_path=str(sample_file)))


@pytest.fixture()
def online_config(tmp_path):
    """Config with the network enabled and a sample path that does not exist."""
    return Config(source=SourceConfig(
        api_base="https://poetrydb.test", count=3, timeout=1.0,
        sample_path=str(tmp_path / "missing.json"),
    ))


@pytest.fixture()
def poems():
    """Four poems with distinct stats plus a tie on line count."""
    return [
        make_poem("This Is Just To Say", "William Carlos Williams", [12, 9, 11, 10, 9, 17, 6, 12, 10, 18, 8, 12]),
        make_poem("Hope is the thing with feathers", "Emily Dickinson", [34, 23, 37, 23]),
        make_poem("Ozymandias", "Percy Bysshe Shelley", [38] * 14),
        make_poem("Because I could not stop", "Emily Dickinson", [30, 24, 29, 12]),
    ]


@pytest.fixture()
def cards(poems):
    return build_cards(poems)
