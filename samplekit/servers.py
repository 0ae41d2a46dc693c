"""Small echo, counter and request-describing web servers."""

from __future__ import annotations

import argparse
import sys
import threading
from typing import Any, Callable, Iterable
from urllib.parse import parse_qsl, quote
from wsgiref.simple_server import make_server

from samplekit.formatting import _quote

_FORM_TYPE = "application/x-www-form-urlencoded"
_BODY_METHODS = {"POST", "PUT", "PATCH"}

StartResponse = Callable[..., Any]
App = Callable[[dict[str, Any], StartResponse], Iterable[bytes]]


class Counter:
    """A request counter safe to share between threads."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._count = 0

    def increment(self) -> int:
        """Add one and return the new count."""
        with self._lock:
            self._count += 1
            return self._count

    @property
    def value(self) -> int:
        with self._lock:
            return self._count


def _request_path(environ: dict[str, Any]) -> str:
    raw = environ.get("SCRIPT_NAME", "") + environ.get("PATH_INFO", "")
    try:
        return raw.encode("latin-1").decode("utf-8", errors="replace")
    except UnicodeEncodeError:
        return raw


def _quote_list(values: list[str]) -> str:
    return "[" + " ".join(_quote(v) for v in values) + "]"


def echo_response(path: str) -> str:
    """Return the body that echoes the request path."""
    return f"URL.Path = {_quote(path)}\n"


def _headers(environ: dict[str, Any]) -> Iterable[tuple[str, str]]:
    for key, value in environ.items():
        if key.startswith("HTTP_") and key != "HTTP_HOST":
            name = key[5:]
        elif key in ("CONTENT_TYPE", "CONTENT_LENGTH") and value:
            name = key
        else:
            continue
        yield "-".join(part.capitalize() for part in name.split("_")), str(value)


def _form(environ: dict[str, Any]) -> tuple[dict[str, list[str]], str | None]:
    form: dict[str, list[str]] = {}
    problem = None
    method = environ.get("REQUEST_METHOD", "GET")
    content_type = environ.get("CONTENT_TYPE", "").split(";")[0].strip().lower()
    if method in _BODY_METHODS and content_type == _FORM_TYPE:
        try:
            length = int(environ.get("CONTENT_LENGTH") or 0)
            stream = environ.get("wsgi.input")
            body = stream.read(length) if stream is not None and length > 0 else b""
            for key, value in parse_qsl(body.decode("utf-8"), keep_blank_values=True):
                form.setdefault(key, []).append(value)
        except (ValueError, OSError) as err:
            problem = str(err)
    for key, value in parse_qsl(environ.get("QUERY_STRING", ""), keep_blank_values=True):
        form.setdefault(key, []).append(value)
    return form, problem


def describe_request(environ: dict[str, Any]) -> str:
    """Return a description of the request: method, URL, headers, host, peer and form."""
    url = quote(_request_path(environ), safe="/:@!$&'()*+,;=~")
    query = environ.get("QUERY_STRING", "")
    if query:
        url += "?" + query
    lines = [
        f"{environ.get('REQUEST_METHOD', 'GET')} {url} "
        f"{environ.get('SERVER_PROTOCOL', 'HTTP/1.1')}"
    ]
    for name, value in _headers(environ):
        lines.append(f"Header[{_quote(name)}] = {_quote_list([value])}")
    host = environ.get("HTTP_HOST") or (
        f"{environ.get('SERVER_NAME', '')}:{environ.get('SERVER_PORT', '')}"
    )
    lines.append(f"Host = {_quote(host)}")
    remote = environ.get("REMOTE_ADDR", "")
    if environ.get("REMOTE_PORT"):
        remote += f":{environ['REMOTE_PORT']}"
    lines.append(f"RemoteAddr = {_quote(remote)}")
    form, problem = _form(environ)
    if problem is not None:
        print(problem, file=sys.stderr)
    for key, values in form.items():
        lines.append(f"Form[{_quote(key)}] = {_quote_list(values)}")
    return "".join(line + "\n" for line in lines)


def _text(start_response: StartResponse, body: str) -> list[bytes]:
    data = body.encode("utf-8")
    start_response(
        "200 OK",
        [("Content-Type", "text/plain; charset=utf-8"), ("Content-Length", str(len(data)))],
    )
    return [data]


def _echo_app(environ: dict[str, Any], start_response: StartResponse) -> list[bytes]:
    return _text(start_response, echo_response(_request_path(environ)))


def _describe_app(environ: dict[str, Any], start_response: StartResponse) -> list[bytes]:
    return _text(start_response, describe_request(environ))


def make_app() -> App:
    """Return an app that echoes paths, counts those requests, and reports at ``/count``."""
    counter = Counter()

    def app(environ: dict[str, Any], start_response: StartResponse) -> list[bytes]:
        path = _request_path(environ)
        if path == "/count":
            return _text(start_response, f"Count {counter.value}\n")
        counter.increment()
        return _text(start_response, echo_response(path))

    return app


def main(argv: list[str] | None = None) -> int:
    """Serve the echo, counting or describing app."""
    parser = argparse.ArgumentParser(prog="server", description="Minimal web servers.")
    parser.add_argument("--mode", choices=["echo", "count", "describe"], default="count")
    parser.add_argument("--host", default="localhost")
    parser.add_argument("--port", type=int, default=8000)
    opts = parser.parse_args(argv)
    app = {"echo": _echo_app, "count": make_app(), "describe": _describe_app}[opts.mode]
    try:
        with make_server(opts.host, opts.port, app) as server:
            server.serve_forever()
    except OSError as err:
        print(f"server: {err}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())