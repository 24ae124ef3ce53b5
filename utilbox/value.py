"""A holder for a loosely typed value with conversion helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from utilbox import mathutil, strconvert

__all__ = ["Value"]


@dataclass
class Value:
    """Stores any value and converts it on demand."""

    v: Any = None

    def reset(self) -> None:
        self.v = None

    def val(self) -> Any:
        return self.v

    def to_int(self) -> int:
        return 0 if self.v is None else mathutil.must_int(self.v)

    def to_int64(self) -> int:
        return 0 if self.v is None else mathutil.must_int64(self.v)

    def to_bool(self) -> bool:
        """True/False for booleans and boolean words; False otherwise."""
        if isinstance(self.v, bool):
            return self.v
        if isinstance(self.v, str):
            return strconvert.must_bool(self.v)
        return False

    def to_float(self) -> float:
        return 0.0 if self.v is None else mathutil.must_float(self.v)

    def to_string(self) -> str:
        if self.v is None:
            return ""
        if isinstance(self.v, str):
            return self.v
        return strconvert.must_string(self.v)

    def to_strings(self) -> list[str]:
        """The value if it is a list of strings, otherwise an empty list."""
        if isinstance(self.v, list) and all(isinstance(item, str) for item in self.v):
            return self.v
        return []

    def is_empty(self) -> bool:
        return self.v is None