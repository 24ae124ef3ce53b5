"""A small chainable HTTP requester, status checks and request/response dumps."""

from __future__ import annotations

import base64
import ipaddress
import urllib.error
import urllib.request
from collections.abc import Mapping
from http import HTTPStatus
from typing import Any, Callable
from urllib.parse import urlsplit

__all__ = [
    "CONTENT_TYPE_KEY",
    "CT_CSS",
    "CT_HTML",
    "CT_TEXT",
    "CT_PLAIN",
    "CT_XML2",
    "CT_XML",
    "CT_YML",
    "CT_YAML",
    "CT_JSON",
    "CT_JSONP",
    "CT_JS",
    "CT_JS2",
    "CT_MSGPACK",
    "CT_MSGPACK2",
    "CT_PROTOBUF",
    "CT_FORM",
    "CT_FORM_DATA",
    "CT_BINARY",
    "MIME_HTML",
    "MIME_TEXT",
    "MIME_PLAIN",
    "MIME_JSON",
    "MIME_XML",
    "MIME_XML2",
    "MIME_YAML",
    "MIME_POST_FORM",
    "MIME_MULTI_DATA_FORM",
    "MIME_PROTOBUF",
    "MIME_MSGPACK",
    "MIME_MSGPACK2",
    "HttpReq",
    "is_ok",
    "is_successful",
    "is_redirect",
    "is_forbidden",
    "is_not_found",
    "is_client_error",
    "is_server_error",
    "build_basic_auth",
    "add_headers_to_request",
    "to_query_values",
    "request_to_string",
    "response_to_string",
]

CONTENT_TYPE_KEY = "Content-Type"

# Content-Type values with charset.
CT_CSS = "text/css; charset=utf-8"
CT_HTML = "text/html; charset=utf-8"
CT_TEXT = "text/plain; charset=utf-8"
CT_PLAIN = "text/plain; charset=utf-8"
CT_XML2 = "text/xml; charset=utf-8"
CT_XML = "application/xml; charset=utf-8"
CT_YML = "application/x-yaml; charset=utf-8"
CT_YAML = "application/x-yaml; charset=utf-8"
CT_JSON = "application/json; charset=utf-8"
CT_JSONP = "application/javascript; charset=utf-8"
CT_JS = "application/javascript; charset=utf-8"
CT_JS2 = "text/javascript; charset=utf-8"
CT_MSGPACK = "application/x-msgpack; charset=utf-8"
CT_MSGPACK2 = "application/msgpack; charset=utf-8"
CT_PROTOBUF = "application/x-protobuf"
CT_FORM = "application/x-www-form-urlencoded"
CT_FORM_DATA = "multipart/form-data"
CT_BINARY = "application/octet-stream"

# Plain MIME types.
MIME_HTML = "text/html"
MIME_TEXT = "text/plain"
MIME_PLAIN = "text/plain"
MIME_JSON = "application/json"
MIME_XML = "application/xml"
MIME_XML2 = "text/xml"
MIME_YAML = "application/x-yaml"
MIME_POST_FORM = "application/x-www-form-urlencoded"
MIME_MULTI_DATA_FORM = "multipart/form-data"
MIME_PROTOBUF = "application/x-protobuf"
MIME_MSGPACK = "application/x-msgpack"
MIME_MSGPACK2 = "application/msgpack"

_PROTOCOLS = {9: "HTTP/0.9", 10: "HTTP/1.0", 11: "HTTP/1.1"}

_direct_opener = urllib.request.build_opener(urllib.request.ProxyHandler({}))


def _is_loopback(url: str) -> bool:
    host = urlsplit(url).hostname or ""
    if host == "localhost":
        return True
    try:
        return ipaddress.ip_address(host).is_loopback
    except ValueError:
        return False


def _default_do(req: urllib.request.Request):
    """Send a request; error statuses are returned as responses, not raised."""
    try:
        if _is_loopback(req.full_url):
            return _direct_opener.open(req)
        return urllib.request.urlopen(req)
    except urllib.error.HTTPError as err:
        return err


def _read_body(body) -> bytes | None:
    if body is None:
        return None
    if isinstance(body, (bytes, bytearray)):
        return bytes(body)
    if isinstance(body, str):
        return body.encode("utf-8")
    data = body.read()
    return data.encode("utf-8") if isinstance(data, str) else bytes(data)


class HttpReq:
    """A chainable HTTP requester.

    The client is any callable taking a urllib Request, or an object with a
    ``do(request)`` method; it returns the response.
    """

    def __init__(self, base_url: str = "") -> None:
        self._client: Any = _default_do
        self._method = "GET"
        self._base_url = base_url
        self._headers: dict[str, str] = {}
        self._body: Any = None
        self._before_send: Callable[[urllib.request.Request], None] | None = None

    def base_url(self, url: str) -> "HttpReq":
        self._base_url = url
        return self

    def method(self, method: str) -> "HttpReq":
        self._method = method
        return self

    def with_header(self, key: str, val: str) -> "HttpReq":
        self._headers[key] = val
        return self

    def with_headers(self, kv_map: Mapping[str, str]) -> "HttpReq":
        self._headers.update(kv_map)
        return self

    def content_type(self, c_type: str) -> "HttpReq":
        return self.with_header(CONTENT_TYPE_KEY, c_type)

    def before_send(self, fn: Callable[[urllib.request.Request], None]) -> "HttpReq":
        """Set a callback run on the request just before it is sent."""
        self._before_send = fn
        return self

    def with_body(self, body) -> "HttpReq":
        """Use a file-like object, bytes or text as body."""
        self._body = body
        return self

    def bytes_body(self, bs: bytes) -> "HttpReq":
        self._body = bytes(bs)
        return self

    def json_bytes_body(self, bs: bytes) -> "HttpReq":
        self._body = bytes(bs)
        return self.content_type(CT_JSON)

    def string_body(self, s: str) -> "HttpReq":
        self._body = s.encode("utf-8")
        return self

    def client(self, c) -> "HttpReq":
        self._client = c
        return self

    def send(self, url: str):
        """Send the request and return the response.

        A URL not starting with "http" is appended to the base URL.
        Raises ValueError for an invalid URL.
        """
        if self._base_url and not url.startswith("http"):
            url = self._base_url + url

        req = urllib.request.Request(url, data=_read_body(self._body), method=self._method)
        for key, val in self._headers.items():
            req.add_header(key, val)
        if self._before_send is not None:
            self._before_send(req)

        do = getattr(self._client, "do", self._client)
        return do(req)

    def must_send(self, url: str):
        """Send the request; any failure is raised."""
        return self.send(url)


def is_ok(status_code: int) -> bool:
    return status_code == HTTPStatus.OK


def is_successful(status_code: int) -> bool:
    return HTTPStatus.OK <= status_code < 300


def is_redirect(status_code: int) -> bool:
    return status_code in (
        HTTPStatus.MOVED_PERMANENTLY,
        HTTPStatus.FOUND,
        HTTPStatus.SEE_OTHER,
        HTTPStatus.TEMPORARY_REDIRECT,
    )


def is_forbidden(status_code: int) -> bool:
    return status_code == HTTPStatus.FORBIDDEN


def is_not_found(status_code: int) -> bool:
    return status_code == HTTPStatus.NOT_FOUND


def is_client_error(status_code: int) -> bool:
    return HTTPStatus.BAD_REQUEST <= status_code < HTTPStatus.INTERNAL_SERVER_ERROR


def is_server_error(status_code: int) -> bool:
    return HTTPStatus.INTERNAL_SERVER_ERROR <= status_code <= 600


def build_basic_auth(username: str, password: str) -> str:
    """Value for a basic Authorization header."""
    auth = f"{username}:{password}".encode("utf-8")
    return "Basic " + base64.b64encode(auth).decode("ascii")


def add_headers_to_request(req: urllib.request.Request, header: Mapping[str, Any]) -> None:
    """Add headers to a request; values for existing keys are appended."""
    for key, values in header.items():
        if isinstance(values, str):
            values = [values]
        name = key.capitalize()
        for value in values:
            existing = req.get_header(name)
            req.add_header(key, f"{existing}, {value}" if existing else value)


def to_query_values(data) -> dict[str, list[str]]:
    """Turn a string map (or a map of string lists) into query values."""
    result: dict[str, list[str]] = {}
    if not isinstance(data, Mapping):
        return result
    for key, val in data.items():
        if isinstance(val, str):
            result.setdefault(key, []).append(val)
        elif isinstance(val, (list, tuple)):
            result.setdefault(key, []).extend(val)
    return result


def _group_headers(items) -> dict[str, list[str]]:
    grouped: dict[str, list[str]] = {}
    for key, val in items:
        grouped.setdefault(key, []).append(val)
    return grouped


def _header_lines(items) -> str:
    return "".join(f"{key}: {';'.join(vals)}\n" for key, vals in _group_headers(items).items())


def request_to_string(req: urllib.request.Request) -> str:
    """Method, URL, headers and body of a request as text."""
    text = f"{req.get_method()} {req.full_url}\n" + _header_lines(req.header_items())
    body = _read_body(req.data)
    if body is not None:
        text += "\n" + body.decode("utf-8", errors="replace")
    return text


def response_to_string(resp) -> str:
    """Protocol, status, headers and body of a response as text."""
    code = getattr(resp, "status", None) or getattr(resp, "code", 0)
    reason = getattr(resp, "reason", None)
    if not reason:
        try:
            reason = HTTPStatus(code).phrase
        except ValueError:
            reason = ""
    proto = _PROTOCOLS.get(getattr(resp, "version", 11), "HTTP/1.1")

    headers = getattr(resp, "headers", None)
    items = headers.items() if headers is not None else []
    text = f"{proto} {code} {reason}\n" + _header_lines(items)

    read = getattr(resp, "read", None)
    if read is not None:
        text += "\n" + read().decode("utf-8", errors="replace")
    return text