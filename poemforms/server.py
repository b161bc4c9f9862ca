"""Local HTTP server for the poem grid.

Routes:
    GET  /                  grid page for ?q=<query>&sort=<mode>
    GET  /api/view          same view as JSON
    GET  /glyph/<n>.svg     glyph of the n-th card in the current card set
    POST /reload            fetch a fresh corpus, then redirect to /
"""

import json
import logging
import re
from http.server import BaseHTTPRequestHandler, HTTPServer
from urllib.parse import parse_qs, urlsplit

from poemforms.config import Config
from poemforms.grid import Grid
from poemforms.models import CardRecord
from poemforms.output.html_page import render_page

logger = logging.getLogger(__name__)

_GLYPH_PATH = re.compile(r"^/glyph/(\d+)\.svg$")


def card_summary(card: CardRecord) -> dict[str, object]:
    return {
        "title": card.title,
        "author": card.author,
        "line_count": card.line_count,
        "max_line_length": card.max_line_length,
        "color": card.color.css,
        "groups": sorted(card.groups),
    }


class PoemGridHandler(BaseHTTPRequestHandler):
    grid: Grid  # set by make_server

    def _send(self, status: int, body: bytes, content_type: str) -> None:
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(body)))
        self.send_header("Cache-Control", "no-store")
        self.end_headers()
        self.wfile.write(body)

    def _json_response(self, data: object) -> None:
        self._send(200, json.dumps(data).encode(), "application/json")

    def _apply_params(self, query: str) -> None:
        params = parse_qs(query)
        self.grid.set_query(params.get("q", [""])[0])
        self.grid.set_sort(params.get("sort", [None])[0])

    def do_GET(self) -> None:
        url = urlsplit(self.path)

        if url.path == "/":
            self._apply_params(url.query)
            html = render_page(
                self.grid.view(), self.grid.state, len(self.grid.cards),
                source=self.grid.source.value if self.grid.source else None,
            )
            self._send(200, html.encode("utf-8"), "text/html; charset=utf-8")
            return

        if url.path == "/api/view":
            self._apply_params(url.query)
            self._json_response({
                "query": self.grid.state.query,
                "sort": self.grid.state.sort_mode.value,
                "total": len(self.grid.cards),
                "cards": [card_summary(c) for c in self.grid.view()],
            })
            return

        m = _GLYPH_PATH.match(url.path)
        if m:
            index = int(m.group(1))
            if index >= len(self.grid.cards):
                self.send_error(404)
                return
            card = self.grid.cards[index]
            self._send(200, card.glyph.to_svg(title=card.title).encode("utf-8"), "image/svg+xml")
            return

        self.send_error(404)

    def do_POST(self) -> None:
        if urlsplit(self.path).path == "/reload":
            self._reload()
            return
        self.send_error(404)

    def _reload(self) -> None:
        result = self.grid.reload()
        logger.info("Reloaded: %s", result)
        self.send_response(303)
        self.send_header("Location", "/")
        self.send_header("Content-Length", "0")
        self.end_headers()

    def log_message(self, format, *args):
        logger.debug("%s - %s", self.address_string(), format % args)


def make_server(grid: Grid, host: str, port: int) -> HTTPServer:
    handler = type("BoundPoemGridHandler", (PoemGridHandler,), {"grid": grid})
    return HTTPServer((host, port), handler)


def serve(config: Config, host: str | None = None, port: int | None = None) -> None:
    grid = Grid(config)
    grid.reload()
    server = make_server(grid, host or config.server.host, port or config.server.port)
    logger.info("Poem Forms at http://%s:%d", *server.server_address[:2])
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("Shutting down")
    finally:
        server.server_close()
