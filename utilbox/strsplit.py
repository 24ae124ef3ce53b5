"""String cutting, splitting and substring helpers."""

from __future__ import annotations

__all__ = [
    "cut",
    "must_cut",
    "split",
    "split_valid",
    "split_n",
    "split_n_valid",
    "split_trimmed",
    "split_n_trimmed",
    "substr",
]


def _raw_split(s: str, sep: str, n: int = -1) -> list[str]:
    """Split like a byte-level splitter: n < 0 means all, n == 0 means none."""
    if n == 0:
        return []
    if sep == "":
        parts = list(s)
        if 0 < n < len(parts):
            parts = parts[: n - 1] + ["".join(parts[n - 1 :])]
        return parts
    return s.split(sep) if n < 0 else s.split(sep, n - 1)


def cut(s: str, sep: str) -> tuple[str, str, bool]:
    """Cut ``s`` around the first ``sep``: (before, after, found)."""
    index = s.find(sep)
    if index < 0:
        return s, "", False
    return s[:index], s[index + len(sep) :], True


def must_cut(s: str, sep: str) -> tuple[str, str]:
    """Cut ``s`` around the first ``sep``, always returning two parts."""
    before, after, _ = cut(s, sep)
    return before, after


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` by ``sep``, trimming each part and dropping empty ones."""
    s = s.strip()
    if not s:
        return []
    return [part for part in (p.strip() for p in _raw_split(s, sep)) if part]


def split_valid(s: str, sep: str) -> list[str]:
    return split(s, sep)


def split_n(s: str, sep: str, n: int) -> list[str]:
    """Like split, but the n-th non-empty part holds the rest of the string."""
    s = s.strip()
    if not s:
        return []
    raw = _raw_split(s, sep)
    result: list[str] = []
    for index, part in enumerate(raw):
        part = part.strip()
        if not part:
            continue
        if len(result) == n - 1:
            result.append(sep.join(raw[index:]).strip())
            break
        result.append(part)
    return result


def split_n_valid(s: str, sep: str, n: int) -> list[str]:
    return split_n(s, sep, n)


def split_trimmed(s: str, sep: str) -> list[str]:
    """Split ``s`` by ``sep`` and trim each part, keeping empty ones."""
    s = s.strip()
    if not s:
        return []
    return [part.strip() for part in _raw_split(s, sep)]


def split_n_trimmed(s: str, sep: str, n: int) -> list[str]:
    """Split into at most ``n`` parts and trim each, keeping empty ones."""
    s = s.strip()
    if not s:
        return []
    return [part.strip() for part in _raw_split(s, sep, n)]


def substr(s: str, pos: int, length: int) -> str:
    """Characters of ``s`` from ``pos``.

    A length of 0 (or one past the end) runs to the end; a negative
    length stops that many characters before the end.
    """
    size = len(s)
    if pos >= size:
        return ""
    stop = pos + length
    if length == 0 or stop > size:
        stop = size
    elif length < 0:
        stop = size + length
    if pos < 0 or stop < pos:
        raise IndexError(f"substring bounds out of range: [{pos}:{stop}]")
    return s[pos:stop]