"""Alias registry, a lockable map store and tag value parsing."""

from __future__ import annotations

import threading
from collections.abc import Mapping
from typing import Any, Callable

from utilbox.maputil import SMap
from utilbox.strsplit import split

__all__ = ["Aliases", "MapDataStore", "TagParseError", "parse_tag_value_ini"]


class TagParseError(ValueError):
    """Raised when a tag value string is malformed."""


class Aliases:
    """A string alias registry with an optional alias checker.

    The checker is called with each new alias and may raise to reject it.
    """

    def __init__(self, checker: Callable[[str], None] | None = None) -> None:
        self.checker = checker
        self._mapping: dict[str, str] = {}

    def add_alias(self, real: str, alias: str) -> None:
        if self.checker is not None:
            self.checker(alias)
        if alias in self._mapping:
            raise ValueError(f"The alias '{alias}' is already used by '{self._mapping[alias]}'")
        self._mapping[alias] = real

    def add_aliases(self, real: str, aliases) -> None:
        for alias in aliases:
            self.add_alias(real, alias)

    def add_alias_map(self, alias2real: Mapping[str, str]) -> None:
        for alias, real in alias2real.items():
            self.add_alias(real, alias)

    def has_alias(self, alias: str) -> bool:
        return alias in self._mapping

    def resolve_alias(self, alias: str) -> str:
        return self._mapping.get(alias, alias)

    def mapping(self) -> dict[str, str]:
        """All alias -> real name pairs."""
        return self._mapping


class MapDataStore:
    """A string-keyed value store whose access can be made thread safe."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._locked = False
        self._data: dict[str, Any] | None = {}

    def enable_lock(self) -> None:
        self._locked = True

    def data(self) -> dict[str, Any] | None:
        return self._data

    def set_data(self, data: dict[str, Any] | None) -> None:
        self._data = data

    def _read(self, key: str) -> Any:
        return None if self._data is None else self._data.get(key)

    def value(self, key: str) -> Any:
        if self._locked:
            with self._lock:
                return self._read(key)
        return self._read(key)

    def _write(self, key: str, val: Any) -> None:
        if self._data is None:
            self._data = {}
        self._data[key] = val

    def set_value(self, key: str, val: Any) -> None:
        if self._locked:
            with self._lock:
                self._write(key, val)
        else:
            self._write(key, val)

    def clear_data(self) -> None:
        self._data = None


def parse_tag_value_ini(field: str, s: str) -> SMap:
    """Parse "key=val;key2=val2" into a map; raises TagParseError on bad items."""
    items = split(s.strip("; "), ";")
    result = SMap()
    for item in items:
        if "=" not in item:
            raise TagParseError(f"parse tag error on field '{field}': item must match `KEY=VAL`")
        key, val = item.split("=", 1)
        result[key] = val
    return result