"""Building fake HTTP requests and running them against WSGI applications."""

from __future__ import annotations

import io
import re
import sys
from dataclasses import dataclass, field
from typing import Any, Callable
from urllib.parse import unquote, urlsplit

__all__ = [
    "RequestData",
    "MockRequest",
    "MockResponse",
    "new_http_request",
    "mock_request",
]

_TOKEN_RE = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")


def _canonical_header(key: str) -> str:
    return "-".join(part[:1].upper() + part[1:].lower() for part in key.split("-"))


def _read_body(body) -> bytes:
    if isinstance(body, (bytes, bytearray)):
        return bytes(body)
    if isinstance(body, str):
        return body.encode("utf-8")
    data = body.read()
    return data.encode("utf-8") if isinstance(data, str) else bytes(data)


@dataclass
class RequestData:
    """Optional data for a fake request."""

    headers: dict[str, str] = field(default_factory=dict)
    body: Any = None
    body_string: str = ""
    before_send: Callable[["MockRequest"], None] | None = None


@dataclass
class MockRequest:
    """A fake HTTP request."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None

    @property
    def request_uri(self) -> str:
        return self.url


@dataclass
class MockResponse:
    """What a WSGI application answered."""

    status_code: int = 200
    status: str = "200 OK"
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


def new_http_request(method: str, path: str, data: RequestData | None = None) -> MockRequest:
    """Build a fake request; raises ValueError for an invalid method or URL."""
    method = method or "GET"
    if not _TOKEN_RE.fullmatch(method):
        raise ValueError(f"net/http: invalid method {method!r}")
    try:
        urlsplit(path)
    except ValueError as exc:
        raise ValueError(f"invalid URL {path!r}") from exc

    body = None
    if data is not None:
        if data.body is not None:
            body = _read_body(data.body)
        elif data.body_string:
            body = data.body_string.encode("utf-8")

    req = MockRequest(method=method, url=path, body=body)
    if data is not None:
        for key, val in data.headers.items():
            req.headers[_canonical_header(key)] = val
        if data.before_send is not None:
            data.before_send(req)
    return req


def _environ(req: MockRequest) -> dict:
    parts = urlsplit(req.url)
    host = parts.hostname or "localhost"
    port = str(parts.port or (443 if parts.scheme == "https" else 80))
    body = req.body or b""
    environ = {
        "REQUEST_METHOD": req.method,
        "SCRIPT_NAME": "",
        "PATH_INFO": unquote(parts.path or "/", encoding="latin-1"),
        "QUERY_STRING": parts.query,
        "SERVER_NAME": host,
        "SERVER_PORT": port,
        "SERVER_PROTOCOL": "HTTP/1.1",
        "REQUEST_URI": req.request_uri,
        "wsgi.version": (1, 0),
        "wsgi.url_scheme": parts.scheme or "http",
        "wsgi.input": io.BytesIO(body),
        "wsgi.errors": sys.stderr,
        "wsgi.multithread": False,
        "wsgi.multiprocess": False,
        "wsgi.run_once": True,
    }
    if req.body is not None:
        environ["CONTENT_LENGTH"] = str(len(body))
    for key, val in req.headers.items():
        name = key.upper().replace("-", "_")
        if name in ("CONTENT_TYPE", "CONTENT_LENGTH"):
            environ[name] = val
        else:
            environ["HTTP_" + name] = val
    return environ


def mock_request(app: Callable, method: str, path: str, data: RequestData | None = None) -> MockResponse:
    """Run a fake request through a WSGI application and record the response."""
    req = new_http_request(method, path, data)
    resp = MockResponse()
    chunks: list[bytes] = []

    def start_response(status, headers, exc_info=None):
        if exc_info is not None and chunks:
            raise exc_info[1].with_traceback(exc_info[2])
        resp.status = status
        resp.status_code = int(status.split(" ", 1)[0])
        resp.headers = {}
        for key, val in headers:
            key = _canonical_header(key)
            resp.headers[key] = f"{resp.headers[key]}, {val}" if key in resp.headers else val
        return chunks.append

    result = app(_environ(req), start_response)
    try:
        for chunk in result:
            chunks.append(chunk)
    finally:
        close = getattr(result, "close", None)
        if close is not None:
            close()

    resp.body = b"".join(chunks)
    return resp