"""Conversions between strings and other values."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from utilbox import mathutil
from utilbox.mathutil import ConvertError
from utilbox.strsplit import split

__all__ = [
    "InvalidParamError",
    "join",
    "implode",
    "any_to_string",
    "to_string",
    "must_string",
    "byte2str",
    "to_bytes",
    "to_bool",
    "must_bool",
    "to_int",
    "must_int",
    "ints",
    "to_ints",
    "to_int_slice",
    "to_slice",
    "to_array",
    "to_strings",
    "strings",
    "layout_to_format",
    "to_time",
    "must_to_time",
]

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_ATOI_RE = re.compile(r"[+-]?[0-9]+")

_TRUE_WORDS = frozenset({"1", "on", "yes", "true"})
_FALSE_WORDS = frozenset({"0", "off", "no", "false"})

# Layouts picked by input length when none is given.
_AUTO_LAYOUTS = {
    8: "20060102",
    10: "2006-01-02",
    13: "2006-01-02 15",
    16: "2006-01-02 15:04",
    19: "2006-01-02 15:04:05",
    20: "2006-01-02T15:04:05Z07:00",
}

# Reference-time layout tokens, longest candidates first.
_LAYOUT_TOKENS = (
    ("January", "%B"),
    ("Jan", "%b"),
    ("Monday", "%A"),
    ("Mon", "%a"),
    ("MST", "%Z"),
    ("2006", "%Y"),
    ("Z07:00", "%z"),
    ("Z0700", "%z"),
    ("-07:00", "%z"),
    ("-0700", "%z"),
    ("01", "%m"),
    ("02", "%d"),
    ("03", "%I"),
    ("04", "%M"),
    ("05", "%S"),
    ("06", "%y"),
    ("15", "%H"),
    ("PM", "%p"),
)


class InvalidParamError(ValueError):
    """Raised when an input parameter cannot be used."""

    def __init__(self, message: str = "invalid input parameter") -> None:
        super().__init__(message)


def join(sep: str, *args: str) -> str:
    """Join the given strings with ``sep``."""
    return sep.join(args)


def implode(sep: str, *args: str) -> str:
    """Join the given strings with ``sep``."""
    return sep.join(args)


def _fraction(value: int, unit: int, digits: int) -> str:
    whole, frac = divmod(value, unit)
    if frac:
        return f"{whole}." + f"{frac:0{digits}d}".rstrip("0")
    return str(whole)


def _duration_string(delta: timedelta) -> str:
    ns = (delta // timedelta(microseconds=1)) * 1000
    if ns == 0:
        return "0s"
    sign = "-" if ns < 0 else ""
    u = abs(ns)
    if u < 1_000_000_000:
        if u < 1000:
            return f"{sign}{u}ns"
        if u < 1_000_000:
            return sign + _fraction(u, 1000, 3) + "\u00b5s"
        return sign + _fraction(u, 1_000_000, 6) + "ms"
    hours, rem = divmod(u, 3600 * 10**9)
    minutes, rem = divmod(rem, 60 * 10**9)
    secs = _fraction(rem, 10**9, 9)
    if hours:
        return f"{sign}{hours}h{minutes}m{secs}s"
    if minutes:
        return f"{sign}{minutes}m{secs}s"
    return f"{sign}{secs}s"


def any_to_string(value, default_as_err: bool) -> str:
    """Convert a basic value to string.

    Complex values raise ConvertError when ``default_as_err`` is true,
    otherwise they are formatted generically.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, timedelta):
        return _duration_string(value)
    if isinstance(value, (int, float, Decimal)):
        return mathutil.string(value)
    if default_as_err:
        raise ConvertError()
    return mathutil.string(value)


def to_string(value) -> str:
    """Convert a basic value to string, raising ConvertError otherwise."""
    return any_to_string(value, True)


def must_string(value) -> str:
    """Convert any value to string."""
    return any_to_string(value, False)


def byte2str(b) -> str:
    """Decode UTF-8 bytes to a string."""
    return bytes(b).decode("utf-8", errors="replace")


def to_bytes(s: str) -> bytes:
    """Encode a string as UTF-8 bytes."""
    return s.encode("utf-8")


def to_bool(s: str) -> bool:
    """Parse words such as 1/on/yes/true and 0/off/no/false."""
    lower = s.lower()
    if lower in _TRUE_WORDS:
        return True
    if lower in _FALSE_WORDS:
        return False
    raise ValueError(f"'{s}' cannot convert to bool")


def must_bool(s: str) -> bool:
    """Parse a trimmed boolean word, returning False on failure."""
    try:
        return to_bool(s.strip())
    except ValueError:
        return False


def to_int(s: str) -> int:
    """Parse a trimmed decimal integer."""
    text = s.strip()
    if not _ATOI_RE.fullmatch(text):
        raise ValueError(f'strconv.Atoi: parsing "{text}": invalid syntax')
    number = int(text)
    if not _INT64_MIN <= number <= _INT64_MAX:
        raise ValueError(f'strconv.Atoi: parsing "{text}": value out of range')
    return number


def must_int(s: str) -> int:
    """Parse a trimmed decimal integer, returning 0 on failure."""
    try:
        return to_int(s)
    except ValueError:
        return 0


def to_slice(s: str, *args: str) -> list[str]:
    """Split by the given separator (default ","), dropping empty parts."""
    return split(s, args[0] if args else ",")


def to_array(s: str, *args: str) -> list[str]:
    return to_slice(s, *args)


def to_strings(s: str, *args: str) -> list[str]:
    return to_slice(s, *args)


def strings(s: str, *args: str) -> list[str]:
    return to_slice(s, *args)


def to_int_slice(s: str, *args: str) -> list[int]:
    """Split the string and convert every part to int."""
    return [mathutil.to_int(item) for item in to_slice(s, *args)]


def to_ints(s: str, *args: str) -> list[int]:
    return to_int_slice(s, *args)


def ints(s: str, *args: str) -> list[int]:
    """Like to_int_slice, but returns an empty list on failure."""
    try:
        return to_int_slice(s, *args)
    except ConvertError:
        return []


def layout_to_format(layout: str) -> str:
    """Turn a reference-time layout ("2006-01-02 15:04:05") into a strptime format."""
    parts: list[str] = []
    i = 0
    while i < len(layout):
        for token, directive in _LAYOUT_TOKENS:
            if layout.startswith(token, i):
                parts.append(directive)
                i += len(token)
                break
        else:
            char = layout[i]
            parts.append("%%" if char == "%" else char)
            i += 1
    return "".join(parts)


def to_time(s: str, *args: str) -> datetime:
    """Parse a date string, picking a layout by its length unless one is given.

    Times without an offset are taken as UTC.
    """
    if args:
        layout = args[0]
    else:
        layout = _AUTO_LAYOUTS.get(len(s.encode("utf-8")), "")
    if not layout:
        raise InvalidParamError()

    if "T" in s:
        layout = layout.replace(" ", "T")
    if "/" in s:
        layout = layout.replace("-", "/")

    try:
        parsed = datetime.strptime(s, layout_to_format(layout))
    except re.error as exc:
        raise ValueError(f"invalid layout {layout!r}") from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def must_to_time(s: str, *args: str) -> datetime:
    """Parse a date string; raises on failure."""
    return to_time(s, *args)