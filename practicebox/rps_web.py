"""Rock, paper, scissors served over HTTP with a JSON game endpoint."""

from __future__ import annotations

import argparse
import html
import json
import logging
import mimetypes
import posixpath
import random
from dataclasses import dataclass
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from urllib.parse import quote, unquote, urlsplit

from practicebox.rps import Choice, computer_choice, determine_winner

log = logging.getLogger(__name__)

ROCK = "rock"
PAPER = "paper"
SCISSORS = "scissors"

WIN = "win"
LOSE = "lose"
DRAW = "draw"

_OUTCOMES = {
    "win": (WIN, "You win!"),
    "lose": (LOSE, "Computer wins!"),
    "tie": (DRAW, "It's a draw!"),
}


@dataclass(frozen=True)
class GameResponse:
    """The outcome of one round as sent back to the browser."""

    player_choice: str
    computer_choice: str
    result: str
    message: str

    def to_json(self) -> str:
        return json.dumps(
            {
                "playerChoice": self.player_choice,
                "computerChoice": self.computer_choice,
                "result": self.result,
                "message": self.message,
            },
            separators=(",", ":"),
        )


def _player_choice_from(body: bytes | str) -> str:
    try:
        text = body.decode("utf-8") if isinstance(body, bytes) else body
        value, _ = json.JSONDecoder().raw_decode(text.lstrip(" \t\r\n"))
    except ValueError as exc:
        raise ValueError("Invalid request body") from exc

    if value is None:
        return ""
    if not isinstance(value, dict):
        raise ValueError("Invalid request body")
    choice = ""
    for key, item in value.items():
        if key.casefold() != "playerchoice" or item is None:
            continue
        if not isinstance(item, str):
            raise ValueError("Invalid request body")
        choice = item
    return choice


def play_round(body: bytes | str, rng: random.Random | None = None) -> GameResponse:
    """Play one round from a JSON request body.

    Raises ValueError with 'Invalid request body' or 'Invalid choice'.
    """
    player = _player_choice_from(body)
    if player not in (ROCK, PAPER, SCISSORS):
        raise ValueError("Invalid choice")
    computer = computer_choice(rng)
    result, message = _OUTCOMES[determine_winner(Choice[player.upper()], computer)]
    return GameResponse(player, computer.label, result, message)


def _listing(directory: Path) -> bytes:
    entries = []
    for entry in sorted(directory.iterdir(), key=lambda p: p.name):
        name = entry.name + ("/" if entry.is_dir() else "")
        entries.append(f'<a href="{quote(name)}">{html.escape(name)}</a>\n')
    page = (
        "<!doctype html>\n"
        '<meta name="viewport" content="width=device-width">\n'
        "<pre>\n" + "".join(entries) + "</pre>\n"
    )
    return page.encode("utf-8")


def make_handler(
    template_path: str = "index.html",
    static_dir: str = "static",
    rng: random.Random | None = None,
) -> type[BaseHTTPRequestHandler]:
    """Build a request handler class serving the page, static files and /play."""
    rng = rng or random.Random()
    template = Path(template_path)
    static_root = Path(static_dir)

    class GameHandler(BaseHTTPRequestHandler):
        def log_message(self, format: str, *args: object) -> None:
            log.debug("%s - %s", self.address_string(), format % args)

        def _send(
            self,
            status: int,
            body: bytes,
            content_type: str,
            headers: dict[str, str] | None = None,
        ) -> None:
            self.send_response(status)
            self.send_header("Content-Type", content_type)
            self.send_header("Content-Length", str(len(body)))
            for name, value in (headers or {}).items():
                self.send_header(name, value)
            self.end_headers()
            self.wfile.write(body)

        def _error(self, status: int, message: str) -> None:
            self._send(
                status,
                (message + "\n").encode("utf-8"),
                "text/plain; charset=utf-8",
                {"X-Content-Type-Options": "nosniff"},
            )

        def _redirect(self, location: str) -> None:
            self._send(
                HTTPStatus.MOVED_PERMANENTLY,
                b"",
                "text/html; charset=utf-8",
                {"Location": location},
            )

        def _dispatch(self) -> None:
            path = unquote(urlsplit(self.path).path)
            if path == "/static":
                self._redirect("/static/")
            elif path.startswith("/static/"):
                self._serve_static(path, path[len("/static/"):])
            elif path == "/play":
                self._play()
            else:
                self._home()

        do_GET = do_POST = do_PUT = do_DELETE = do_PATCH = _dispatch

        def _home(self) -> None:
            try:
                page = template.read_bytes()
            except OSError as exc:
                self._error(
                    HTTPStatus.INTERNAL_SERVER_ERROR,
                    f"open {template}: {exc.strerror or exc}",
                )
                return
            self._send(HTTPStatus.OK, page, "text/html; charset=utf-8")

        def _serve_static(self, request_path: str, name: str) -> None:
            relative = posixpath.normpath("/" + name).lstrip("/")
            target = static_root / relative if relative else static_root
            if target.is_dir():
                if not request_path.endswith("/"):
                    self._redirect(request_path + "/")
                    return
                index = target / "index.html"
                if index.is_file():
                    target = index
                else:
                    self._send(HTTPStatus.OK, _listing(target), "text/html; charset=utf-8")
                    return
            try:
                content = target.read_bytes()
            except OSError:
                self._error(HTTPStatus.NOT_FOUND, "404 page not found")
                return
            content_type = mimetypes.guess_type(target.name)[0] or "application/octet-stream"
            self._send(HTTPStatus.OK, content, content_type)

        def _play(self) -> None:
            if self.command != "POST":
                self._error(HTTPStatus.METHOD_NOT_ALLOWED, "Method not allowed")
                return
            length = int(self.headers.get("Content-Length") or 0)
            body = self.rfile.read(length)
            try:
                outcome = play_round(body, rng)
            except ValueError as exc:
                self._error(HTTPStatus.BAD_REQUEST, str(exc))
                return
            self._send(
                HTTPStatus.OK,
                (outcome.to_json() + "\n").encode("utf-8"),
                "application/json",
            )

    return GameHandler


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Serve rock, paper, scissors.")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--template", default="index.html")
    parser.add_argument("--static", default="static")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    log.info("Server is running on port %d...", args.port)
    try:
        with ThreadingHTTPServer(
            ("", args.port), make_handler(args.template, args.static)
        ) as server:
            server.serve_forever()
    except OSError as exc:
        log.error("Error starting server: %s", exc)
        return 1
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    raise SystemExit(main())