"""A WSGI application that records and reports player wins."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterable
from http import HTTPStatus
from wsgiref.simple_server import make_server

from learnkit.player_store import InMemoryPlayerStore, PlayerStore

_PLAYERS_PREFIX = "/players/"
_TEXT_PLAIN = "text/plain; charset=utf-8"

StartResponse = Callable[..., object]


def _status_line(status: HTTPStatus) -> str:
    return f"{status.value} {status.phrase}"


def _request_path(environ: dict) -> str:
    raw = environ.get("PATH_INFO", "") or "/"
    return raw.encode("latin-1").decode("utf-8", "replace")


class PlayerServer:
    """Serves ``/players/<name>`` (GET for the score, POST to record a win) and ``/league``."""

    def __init__(self, store: PlayerStore) -> None:
        self.store = store

    def __call__(self, environ: dict, start_response: StartResponse) -> Iterable[bytes]:
        path = _request_path(environ)
        method = environ.get("REQUEST_METHOD", "GET").upper()
        headers: list[tuple[str, str]] = []

        if path == "/league":
            status, body = HTTPStatus.OK, b""
        elif path == _PLAYERS_PREFIX.rstrip("/"):
            location = _PLAYERS_PREFIX
            query = environ.get("QUERY_STRING", "")
            if query:
                location += "?" + query
            status = HTTPStatus.MOVED_PERMANENTLY
            headers.append(("Location", location))
            body = b""
            if method == "GET":
                body = f'<a href="{location}">Moved Permanently</a>.\n\n'.encode()
                headers.append(("Content-Type", "text/html; charset=utf-8"))
        elif path.startswith(_PLAYERS_PREFIX):
            status, body = self._players(method, path.removeprefix(_PLAYERS_PREFIX))
        else:
            status, body = HTTPStatus.NOT_FOUND, b"404 page not found\n"

        if body and not any(name == "Content-Type" for name, _ in headers):
            headers.append(("Content-Type", _TEXT_PLAIN))
        headers.append(("Content-Length", str(len(body))))
        start_response(_status_line(status), headers)
        return [body]

    def _players(self, method: str, player: str) -> tuple[HTTPStatus, bytes]:
        if method == "POST":
            self.store.record_win(player)
            return HTTPStatus.ACCEPTED, b""
        if method == "GET":
            score = self.store.get_player_score(player)
            status = HTTPStatus.NOT_FOUND if score == 0 else HTTPStatus.OK
            return status, str(score).encode()
        return HTTPStatus.OK, b""


def main(argv: list[str] | None = None) -> int:
    """Serve the player server with an in-memory store."""
    parser = argparse.ArgumentParser(description="Serve player scores over HTTP.")
    parser.add_argument("--host", default="")
    parser.add_argument("--port", type=int, default=8080)
    args = parser.parse_args(argv)
    app = PlayerServer(InMemoryPlayerStore())
    with make_server(args.host, args.port, app) as httpd:
        try:
            httpd.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0