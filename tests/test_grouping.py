"""Tests for the grouping policy."""

import pytest

from conftest import make_poem
from poemforms.grouping import classify, group_cards, length_bucket
from poemforms.models import PoemRecord


class TestLengthBucket:
    @pytest.mark.parametrize("count, bucket", [
        (0, "length:short"),
        (11, "length:short"),
        (12, "length:medium"),
        (29, "length:medium"),
        (30, "length:long"),
        (200, "length:long"),
    ])
    def test_boundaries(self, count, bucket):
        assert length_bucket(count) == bucket


class TestClassify:
    def test_two_tags(self):
        tags = classify(make_poem("T", "Emily Dickinson", [5] * 12))
        assert tags == frozenset({"author:Emily Dickinson", "length:medium"})

    def test_uses_normalized_author(self):
        tags = classify(PoemRecord(title="T", author="   ", lines=[]))
        assert tags == frozenset({"author:Unknown", "length:short"})


class TestGroupCards:
    def test_groups_by_prefix_keeping_order(self, cards):
        groups = group_cards(cards, "author:")
        assert list(groups) == [
            "author:William Carlos Williams",
            "author:Emily Dickinson",
            "author:Percy Bysshe Shelley",
        ]
        assert [c.title for c in groups["author:Emily Dickinson"]] == [
            "Hope is the thing with feathers",
            "Because I could not stop",
        ]

    def test_length_groups(self, cards):
        groups = group_cards(cards, "length:")
        assert set(groups) == {"length:short", "length:medium"}
        assert len(groups["length:short"]) == 2

    def test_no_prefix_returns_all_tags(self, cards):
        groups = group_cards(cards)
        assert sum(len(v) for v in groups.values()) == 2 * len(cards)
