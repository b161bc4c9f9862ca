"""Configuration loading for poem forms."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


class SourceConfig(BaseModel):
    api_base: str = "https://poetrydb.org"
    count: int = 64
    timeout: float = 10.0
    sample_path: str = "data/sample-poems.json"
    offline: bool = False  # skip the network source entirely


class GlyphConfig(BaseModel):
    bar_thickness: int = 6
    gap: int = 2
    max_width: int = 320
    corner_radius: int = 2


class SheetConfig(BaseModel):
    columns: int = 4
    cell_width: int = 320
    padding: int = 24
    background: tuple[int, int, int] = (13, 17, 23)


class ServerConfig(BaseModel):
    host: str = "127.0.0.1"
    port: int = 8000


class Config(BaseModel):
    source: SourceConfig = Field(default_factory=SourceConfig)
    glyph: GlyphConfig = Field(default_factory=GlyphConfig)
    sheet: SheetConfig = Field(default_factory=SheetConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)

    @property
    def resolved_sample_path(self) -> Path:
        """Resolve sample_path relative to project root."""
        p = Path(self.source.sample_path).expanduser()
        if p.is_absolute():
            return p
        return _project_root() / p


def _project_root() -> Path:
    """Return the poemforms project root directory."""
    return Path(__file__).parent.parent


def load_config(config_path: Path | None = None) -> Config:
    """Load config from YAML file. Falls back to defaults if file missing."""
    if config_path is None:
        config_path = _project_root() / "config.yaml"

    if config_path.exists():
        raw: dict[str, Any] = yaml.safe_load(config_path.read_text()) or {}
        return Config(**raw)

    return Config()
