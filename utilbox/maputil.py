"""Alias maps, typed map access and helpers for nested mappings."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from utilbox import mathutil, strconvert

__all__ = [
    "Aliases",
    "Data",
    "SMap",
    "key_to_lower",
    "to_string_map",
    "http_query_string",
    "to_string",
    "merge_string_map",
    "get_by_path",
    "keys",
    "values",
]

_INDEX_RE = re.compile(r"[+-]?[0-9]+")


class Aliases(dict):
    """A simple alias -> real name mapping."""

    def add_alias(self, real: str, alias: str) -> None:
        """Register ``alias`` for ``real``; an alias may be used only once."""
        if alias in self:
            raise ValueError(f"The alias '{alias}' is already used by '{self[alias]}'")
        self[alias] = real

    def add_aliases(self, real: str, aliases) -> None:
        for alias in aliases:
            self.add_alias(real, alias)

    def add_alias_map(self, alias2real: Mapping[str, str]) -> None:
        for alias, real in alias2real.items():
            self.add_alias(real, alias)

    def has_alias(self, alias: str) -> bool:
        return alias in self

    def resolve_alias(self, alias: str) -> str:
        """The real name for ``alias``, or ``alias`` itself if unknown."""
        return self.get(alias, alias)


class Data(dict):
    """A string-keyed map with typed getters."""

    def has(self, key: str) -> bool:
        return key in self

    def set(self, key: str, value: Any) -> None:
        self[key] = value

    def get_int(self, key: str) -> int:
        return mathutil.must_int(self[key]) if key in self else 0

    def get_int64(self, key: str) -> int:
        return mathutil.must_int64(self[key]) if key in self else 0

    def get_str(self, key: str) -> str:
        return strconvert.must_string(self[key]) if key in self else ""

    def get_bool(self, key: str) -> bool:
        if key not in self:
            return False
        val = self[key]
        if isinstance(val, bool):
            return val
        return strconvert.must_bool(strconvert.must_string(val))

    def default(self, key: str, default: Any) -> Any:
        return self[key] if key in self else default

    def string_map(self) -> dict[str, str]:
        return to_string_map(self)


class SMap(dict):
    """A string to string map with typed getters."""

    def has(self, key: str) -> bool:
        return key in self

    def has_value(self, value: str) -> bool:
        return value in self.values()

    def get_int(self, key: str) -> int:
        return mathutil.must_int(self[key]) if key in self else 0

    def get_int64(self, key: str) -> int:
        return mathutil.must_int64(self[key]) if key in self else 0

    def get_str(self, key: str) -> str:
        return self.get(key, "")

    def get_bool(self, key: str) -> bool:
        return strconvert.must_bool(self[key]) if key in self else False

    def get_ints(self, key: str) -> list[int]:
        """Comma separated integers stored under ``key``."""
        return strconvert.ints(self[key], ",") if key in self else []

    def get_strings(self, key: str) -> list[str]:
        """Comma separated strings stored under ``key``."""
        return strconvert.to_slice(self[key], ",") if key in self else []


def key_to_lower(src: Mapping[str, str]) -> dict[str, str]:
    """A copy of ``src`` with lower-cased keys."""
    return {k.lower(): v for k, v in src.items()}


def to_string_map(src: Mapping[str, Any]) -> dict[str, str]:
    """Convert every value to a string."""
    return {k: strconvert.must_string(v) for k, v in src.items()}


def http_query_string(data: Mapping[str, Any]) -> str:
    """Join ``key=value`` pairs with "&" (values are not escaped)."""
    return "&".join(f"{k}={strconvert.must_string(v)}" for k, v in data.items())


def to_string(mp: Mapping[str, Any] | None) -> str:
    """A compact text form such as ``{a:v0, b:23}``."""
    if mp is None:
        return ""
    body = ", ".join(f"{k}:{strconvert.any_to_string(v, False)}" for k, v in mp.items())
    return "{" + body + "}"


def merge_string_map(src: Mapping[str, str], dst: dict[str, str], ignore_case: bool) -> dict[str, str]:
    """Copy ``src`` into ``dst`` (lower-casing keys if asked) and return ``dst``."""
    for k, v in src.items():
        dst[k.lower() if ignore_case else k] = v
    return dst


def _get_by_index(k: str, seq) -> tuple[Any, bool]:
    if not _INDEX_RE.fullmatch(k):
        return None, False
    index = int(k)
    if index < 0 or index >= len(seq):
        return None, False
    return seq[index], True


def get_by_path(key: str, mp: Mapping[str, Any]) -> tuple[Any, bool]:
    """Look up ``key`` or a dotted path such as "top.sub" or "list.0".

    Returns ``(value, found)``.
    """
    if key in mp:
        return mp[key], True
    if "." not in key:
        return None, False

    top, *rest = key.split(".")
    if top not in mp:
        return None, False

    item = mp[top]
    for k in rest:
        if isinstance(item, Mapping):
            if k not in item:
                return None, False
            item = item[k]
        elif isinstance(item, (list, tuple)):
            item, ok = _get_by_index(k, item)
            if not ok:
                return None, False
        else:
            return None, False
    return item, True


def keys(mp) -> list[str]:
    """Keys of a mapping as strings; empty for anything else."""
    if not isinstance(mp, Mapping):
        return []
    return [str(k) for k in mp]


def values(mp) -> list[Any]:
    """Values of a mapping; empty for anything else."""
    if not isinstance(mp, Mapping):
        return []
    return list(mp.values())