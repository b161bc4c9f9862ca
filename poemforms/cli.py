"""CLI entry point for poem forms."""

import argparse
import logging
from pathlib import Path

from poemforms.config import load_config
from poemforms.grid import Grid
from poemforms.grouping import group_cards
from poemforms.models import SortMode

SORT_CHOICES = [m.value for m in SortMode]


def _add_view_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("-q", "--query", default="", help="Title/author substring filter")
    p.add_argument(
        "-s", "--sort", default=SortMode.DEFAULT.value,
        help=f"Sort mode: {', '.join(SORT_CHOICES)} (unknown values keep original order)",
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Poem Forms")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("-c", "--config", type=Path, default=None, help="Path to config.yaml")
    parser.add_argument(
        "--offline", action="store_true",
        help="Skip PoetryDB and use the local sample file or built-in poems",
    )
    sub = parser.add_subparsers(dest="command")

    # list command
    list_parser = sub.add_parser("list", help="Print the filtered, sorted view")
    list_parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    _add_view_args(list_parser)

    # page command
    page_parser = sub.add_parser("page", help="Write the grid as a static HTML page")
    page_parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    _add_view_args(page_parser)
    page_parser.add_argument("-o", "--output", type=Path, default=Path("output/poems.html"))

    # glyph command
    glyph_parser = sub.add_parser("glyph", help="Print the SVG glyph of a poem")
    glyph_parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    glyph_parser.add_argument("title", help="Poem title (case-insensitive exact match)")

    # sheet command
    sheet_parser = sub.add_parser("sheet", help="Render the view as a PNG contact sheet")
    sheet_parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    _add_view_args(sheet_parser)
    sheet_parser.add_argument("-o", "--output", type=Path, default=Path("output/poems.png"))

    # groups command
    groups_parser = sub.add_parser("groups", help="Show poems grouped by tag")
    groups_parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    groups_parser.add_argument(
        "--prefix", default="", help="Only tags starting with this (e.g. 'length:')",
    )

    # serve command
    serve_parser = sub.add_parser("serve", help="Serve the interactive grid over HTTP")
    serve_parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    serve_parser.add_argument("--host", default=None)
    serve_parser.add_argument("--port", type=int, default=None)

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    if args.offline:
        config.source.offline = True

    if args.command == "serve":
        from poemforms.server import serve
        serve(config, host=args.host, port=args.port)
        return

    if args.command is None:
        parser.print_help()
        return

    grid = Grid(config)
    result = grid.reload()
    print(result)

    if args.command == "list":
        grid.set_query(args.query)
        grid.set_sort(args.sort)
        view = grid.view()
        for card in view:
            print(f"  {card.title} — {card.author} ({card.stats_label})")
        print(f"\nShowing {len(view)} of {len(grid.cards)} poems")

    elif args.command == "page":
        from poemforms.output.html_page import render_page, write_page

        grid.set_query(args.query)
        grid.set_sort(args.sort)
        html = render_page(
            grid.view(), grid.state, len(grid.cards),
            source=result.source.value, reload_action=None,
        )
        print(f"Output: {write_page(html, args.output)}")

    elif args.command == "glyph":
        wanted = args.title.strip().lower()
        card = next((c for c in grid.cards if c.search_title == wanted), None)
        if card is None:
            print(f"Poem not found: {args.title}")
            return
        print(card.glyph.to_svg(title=card.title))

    elif args.command == "sheet":
        from poemforms.output.contact_sheet import render_contact_sheet

        grid.set_query(args.query)
        grid.set_sort(args.sort)
        path = render_contact_sheet(grid.view(), args.output, config.sheet)
        print(f"Output: {path}")

    elif args.command == "groups":
        for tag, cards in group_cards(grid.cards, args.prefix).items():
            print(f"{tag} ({len(cards)}):")
            for card in cards:
                print(f"  {card.title}")


if __name__ == "__main__":
    main()
