"""String trimming, filtering and case conversion."""

from __future__ import annotations

import re

__all__ = [
    "trim",
    "ltrim",
    "trim_left",
    "rtrim",
    "trim_right",
    "filter_email",
    "lower",
    "upper",
    "upper_word",
    "lower_first",
    "upper_first",
    "snake_case",
    "snake",
    "camel_case",
    "camel",
]

_TO_SNAKE_RE = re.compile(r"[A-Z][a-z]")


def _cut_set(args: tuple[str, ...]) -> str | None:
    if args and args[0] != "":
        return "".join(args)
    return None


def trim(s: str, *args: str) -> str:
    """Strip the given characters from both ends; whitespace by default."""
    chars = _cut_set(args)
    return s.strip() if chars is None else s.strip(chars)


def trim_left(s: str, *args: str) -> str:
    """Strip the given characters from the start; spaces by default."""
    chars = _cut_set(args)
    return s.lstrip(" " if chars is None else chars)


def ltrim(s: str, *args: str) -> str:
    return trim_left(s, *args)


def trim_right(s: str, *args: str) -> str:
    """Strip the given characters from the end; spaces by default."""
    chars = _cut_set(args)
    return s.rstrip(" " if chars is None else chars)


def rtrim(s: str, *args: str) -> str:
    return trim_right(s, *args)


def filter_email(s: str) -> str:
    """Trim an e-mail address and lower-case its domain part."""
    s = s.strip()
    index = s.rfind("@")
    if index < 0:
        return s
    return s[:index] + "@" + s[index + 1 :].lower()


def lower(s: str) -> str:
    return s.lower()


def upper(s: str) -> str:
    return s.upper()


def _is_lower(c: str) -> bool:
    return "a" <= c <= "z"


def _is_upper(c: str) -> bool:
    return "A" <= c <= "Z"


def _is_word(c: str) -> bool:
    return _is_lower(c) or _is_upper(c)


def upper_word(s: str) -> str:
    """Upper-case the first ASCII letter of each word."""
    if len(s) <= 1:
        return s.upper()

    first = s[0]
    parts = [first.upper() if _is_lower(first) else first]
    in_word = True
    for prev, cur in zip(s, s[1:]):
        if not _is_word(prev) and _is_word(cur):
            in_word = False
        if _is_lower(cur) and not in_word:
            parts.append(cur.upper())
            in_word = True
        else:
            parts.append(cur)
        if _is_word(cur):
            in_word = True
    return "".join(parts)


def lower_first(s: str) -> str:
    """Lower-case the first character if it is an ASCII capital."""
    if s and _is_upper(s[0]):
        return s[0].lower() + s[1:]
    return s


def upper_first(s: str) -> str:
    """Upper-case the first character if it is an ASCII lower-case letter."""
    if s and _is_lower(s[0]):
        return s[0].upper() + s[1:]
    return s


def snake_case(s: str, *args: str) -> str:
    """Convert to snake case, e.g. "RangePrice" -> "range_price"."""
    sep = args[0] if args else "_"
    converted = _TO_SNAKE_RE.sub(lambda m: sep + lower_first(m.group(0)), s)
    return converted.lstrip(sep) if sep else converted


def snake(s: str, *args: str) -> str:
    return snake_case(s, *args)


def camel_case(s: str, *args: str) -> str:
    """Convert to camel case, e.g. "range_price" -> "rangePrice"."""
    sep = args[0] if args else "_"
    if sep not in s:
        return s
    pattern = re.compile(re.escape(sep) + "+[a-zA-Z]")
    return pattern.sub(lambda m: upper_first(m.group(0).lstrip(sep)), s)


def camel(s: str, *args: str) -> str:
    return camel_case(s, *args)