"""Poem sources — PoetryDB first, then a local sample file, then built-ins.

Whatever fails along the way is logged and skipped; ``load_poems`` always
returns something to render.
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

import requests

from poemforms.config import Config
from poemforms.models import PoemRecord

logger = logging.getLogger(__name__)

EMBEDDED_POEMS: list[dict[str, Any]] = [
    {
        "title": "Hope is the thing with feathers",
        "author": "Emily Dickinson",
        "lines": [
            "'Hope' is the thing with feathers—",
            "That perches in the soul—",
            "And sings the tune without the words—",
            "And never stops—at all—",
        ],
    },
    {
        "title": "This Is Just To Say",
        "author": "William Carlos Williams",
        "lines": [
            "I have eaten", "the plums", "that were in", "the icebox",
            "and which", "you were probably", "saving", "for breakfast",
            "Forgive me", "they were delicious", "so sweet", "and so cold",
        ],
    },
]


class SourceError(Exception):
    """A poem source could not produce records."""


class SourceKind(str, Enum):
    POETRYDB = "poetrydb"
    SAMPLE_FILE = "sample_file"
    EMBEDDED = "embedded"


@dataclass
class LoadResult:
    poems: list[PoemRecord]
    source: SourceKind

    def __repr__(self) -> str:
        return f"LoadResult({len(self.poems)} poems from {self.source.value})"


def parse_records(payload: Any) -> list[PoemRecord]:
    """Normalize a JSON payload (a list of poem objects) into records.

    Entries that are not objects are dropped; missing fields get defaults.
    """
    if not isinstance(payload, list):
        raise SourceError(f"Expected a list of poems, got {type(payload).__name__}")
    poems: list[PoemRecord] = []
    for i, raw in enumerate(payload):
        if not isinstance(raw, dict):
            logger.warning("Skipping poem #%d: not an object (%s)", i, type(raw).__name__)
            continue
        poems.append(PoemRecord.from_raw(raw))
    return poems


def random_url(api_base: str, count: int) -> str:
    return f"{api_base.rstrip('/')}/random/{count}"


def fetch_poetrydb(
    config: Config, session: requests.Session | None = None,
) -> list[PoemRecord]:
    """Fetch ``count`` random poems from PoetryDB."""
    url = random_url(config.source.api_base, config.source.count)
    http = session or requests
    try:
        resp = http.get(
            url,
            timeout=config.source.timeout,
            headers={"Cache-Control": "no-store", "Accept": "application/json"},
        )
        resp.raise_for_status()
        payload = resp.json()
    except requests.RequestException as e:
        raise SourceError(f"PoetryDB request failed: {e}") from e
    except ValueError as e:
        raise SourceError(f"PoetryDB returned invalid JSON: {e}") from e

    # PoetryDB reports errors as {"status": ..., "reason": ...} with HTTP 200
    if isinstance(payload, dict) and "status" in payload:
        raise SourceError(f"PoetryDB error {payload.get('status')}: {payload.get('reason')}")

    poems = parse_records(payload)
    logger.info("Fetched %d poems from %s", len(poems), url)
    return poems


def load_sample_file(path: Path) -> list[PoemRecord]:
    """Read poems from a local JSON file in PoetryDB's shape."""
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise SourceError(f"Cannot read sample poems at {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise SourceError(f"Invalid JSON in {path}: {e}") from e
    return parse_records(payload)


def embedded_poems() -> list[PoemRecord]:
    return [PoemRecord.from_raw(p) for p in EMBEDDED_POEMS]


def load_poems(config: Config, session: requests.Session | None = None) -> LoadResult:
    """Load poems from the first source that yields any.

    Order: PoetryDB (unless ``source.offline``), the sample file, then the
    built-in poems. Failures are logged as warnings, never raised.
    """
    if not config.source.offline:
        try:
            poems = fetch_poetrydb(config, session=session)
            if poems:
                return LoadResult(poems, SourceKind.POETRYDB)
            logger.warning("PoetryDB returned no poems")
        except SourceError as e:
            logger.warning("Falling back to sample poems: %s", e)

    sample_path = config.resolved_sample_path
    try:
        poems = load_sample_file(sample_path)
        if poems:
            return LoadResult(poems, SourceKind.SAMPLE_FILE)
        logger.warning("Sample file %s has no poems", sample_path)
    except SourceError as e:
        logger.warning("Falling back to built-in poems: %s", e)

    return LoadResult(embedded_poems(), SourceKind.EMBEDDED)
