"""Grouping tags: one per author, one per length bucket."""

from collections import defaultdict
from typing import Iterable

from poemforms.models import CardRecord, PoemRecord

SHORT_MAX = 12  # exclusive
MEDIUM_MAX = 30  # exclusive

AUTHOR_PREFIX = "author:"
LENGTH_PREFIX = "length:"


def length_bucket(line_count: int) -> str:
    if line_count < SHORT_MAX:
        return "length:short"
    if line_count < MEDIUM_MAX:
        return "length:medium"
    return "length:long"


def classify(poem: PoemRecord) -> frozenset[str]:
    """Return exactly two tags: the author tag and the length bucket."""
    return frozenset({f"{AUTHOR_PREFIX}{poem.author}", length_bucket(len(poem.lines))})


def group_cards(cards: Iterable[CardRecord], prefix: str = "") -> dict[str, list[CardRecord]]:
    """Group cards by tag, keeping only tags that start with ``prefix``.

    Tags appear in order of first occurrence; cards keep their input order
    within each group.
    """
    groups: dict[str, list[CardRecord]] = defaultdict(list)
    for card in cards:
        for tag in sorted(card.groups):
            if tag.startswith(prefix):
                groups[tag].append(card)
    return dict(groups)
