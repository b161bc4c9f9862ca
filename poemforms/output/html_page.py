"""Render the poem grid as a self-contained HTML page."""

import json
from datetime import datetime
from html import escape
from pathlib import Path
from typing import Sequence

from poemforms.models import CardRecord, SortMode, ViewState

SORT_LABELS: dict[SortMode, str] = {
    SortMode.DEFAULT: "Original order",
    SortMode.MOST_LINES: "Most lines",
    SortMode.FEWEST_LINES: "Fewest lines",
    SortMode.LONGEST_LINE: "Longest line",
    SortMode.TITLE: "Title (A–Z)",
}


def _card_html(card: CardRecord) -> str:
    groups = escape(json.dumps(sorted(card.groups)), quote=True)
    return f"""<article class="card" data-groups="{groups}" data-title="{escape(card.search_title, quote=True)}" data-author="{escape(card.search_author, quote=True)}" data-lines="{card.line_count}" data-maxline="{card.max_line_length}">
  <div class="shape">{card.glyph.to_svg(title=card.title)}</div>
  <div class="meta">
    <div class="title">{escape(card.title)}</div>
    <div class="author" style="color: {card.color.css}">{escape(card.author)}</div>
    <div class="stats">{escape(card.stats_label)}</div>
  </div>
</article>"""


def _sort_options(selected: SortMode) -> str:
    return "\n".join(
        f'<option value="{mode.value}"{" selected" if mode == selected else ""}>{label}</option>'
        for mode, label in SORT_LABELS.items()
    )


def _controls_html(state: ViewState, reload_action: str) -> str:
    return f"""<div class="controls">
  <form method="get" action="/">
    <input id="search" type="search" name="q" placeholder="Search title or author" value="{escape(state.query, quote=True)}">
    <select id="sort" name="sort">
{_sort_options(state.sort_mode)}
    </select>
    <button type="submit">Apply</button>
  </form>
  <form method="post" action="{escape(reload_action, quote=True)}"><button id="reload" type="submit">Reload</button></form>
</div>
"""


def render_page(
    view: Sequence[CardRecord],
    state: ViewState | None = None,
    total: int | None = None,
    *,
    source: str | None = None,
    reload_action: str | None = "/reload",
) -> str:
    """Render the ordered view as a full HTML document.

    ``view`` is drawn in the order given. ``reload_action`` is where the
    reload button posts. Pass None for a static export: search, sort and
    reload need the server, so the export shows the baked-in view only.
    """
    state = state or ViewState()
    total = len(view) if total is None else total
    cards_html = "\n".join(_card_html(c) for c in view) or '<p class="empty">No poems match.</p>'
    controls_html = _controls_html(state, reload_action) if reload_action else ""
    source_note = f" &middot; source: {escape(source)}" if source else ""
    generated_at = datetime.now().strftime("%Y-%m-%d %H:%M")

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>Poem Forms</title>
<style>
  * {{ margin: 0; padding: 0; box-sizing: border-box; }}
  body {{ font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
         background: #0d1117; color: #c9d1d9; padding: 20px; }}
  h1 {{ color: #58a6ff; margin-bottom: 4px; }}
  .subtitle {{ color: #8b949e; margin-bottom: 16px; font-size: 14px; }}
  .controls {{ display: flex; gap: 12px; margin-bottom: 24px; align-items: center; }}
  .controls input, .controls select, .controls button {{
         background: #161b22; color: #c9d1d9; border: 1px solid #30363d; border-radius: 6px;
         padding: 6px 10px; font-size: 14px; }}
  #grid {{ display: grid; grid-template-columns: repeat(auto-fill, minmax(260px, 1fr)); gap: 12px; }}
  .card {{ background: #161b22; border: 1px solid #30363d; border-radius: 6px; padding: 14px; }}
  .shape svg {{ width: 100%; height: auto; display: block; margin-bottom: 10px; }}
  .title {{ font-weight: 600; font-size: 14px; }}
  .author {{ font-size: 13px; margin-top: 2px; }}
  .stats {{ font-size: 11px; color: #8b949e; margin-top: 6px; }}
  .empty {{ color: #8b949e; }}
</style>
</head>
<body>

<h1>Poem Forms</h1>
<p class="subtitle">Showing {len(view)} of {total} poems{source_note} &middot; generated {generated_at}</p>

{controls_html}
<main id="grid">
{cards_html}
</main>

</body>
</html>
"""


def write_page(html: str, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(html, encoding="utf-8")
    return output_path
