"""Escaping and encoding of strings for HTML, JavaScript, base64 and URLs."""

from __future__ import annotations

import base64
import re
from urllib.parse import quote_plus, unquote_plus

__all__ = ["escape_js", "escape_html", "b64_encode", "url_encode", "url_decode"]

_HTML_TABLE = str.maketrans(
    {
        "\0": "\ufffd",
        '"': "&#34;",
        "'": "&#39;",
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
    }
)

_JS_SPECIAL = {
    "\\": "\\\\",
    "'": "\\'",
    '"': '\\"',
    "<": "\\u003C",
    ">": "\\u003E",
    "&": "\\u0026",
    "=": "\\u003D",
}

_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _js_char(c: str) -> str:
    if c in _JS_SPECIAL:
        return _JS_SPECIAL[c]
    code = ord(c)
    if code < 0x20:
        return f"\\u{code:04X}"
    if code >= 0x80 and not c.isprintable():
        return f"\\u{code:04X}"
    return c


def escape_js(s: str) -> str:
    """Escape a string for safe use inside JavaScript source."""
    return "".join(_js_char(c) for c in s)


def escape_html(s: str) -> str:
    """Escape the HTML special characters of a string."""
    return s.translate(_HTML_TABLE)


def b64_encode(s: str) -> str:
    """Standard base64 encoding of the UTF-8 bytes of ``s``."""
    return base64.b64encode(s.encode("utf-8")).decode("ascii")


def url_encode(s: str) -> str:
    """Query-escape everything after the first "?"."""
    pos = s.find("?")
    if pos < 0:
        return s
    return s[: pos + 1] + quote_plus(s[pos + 1 :], safe="")


def url_decode(s: str) -> str:
    """Unescape everything after the first "?"; left unchanged if malformed."""
    pos = s.find("?")
    if pos < 0:
        return s
    query = s[pos + 1 :]
    if _BAD_ESCAPE_RE.search(query):
        return s
    return s[: pos + 1] + unquote_plus(query, errors="replace")