"""A minimal optional value container."""

from __future__ import annotations

from typing import Any, Callable

__all__ = ["Optional", "of", "of_nillable"]


class Optional:
    """Holds a value that may be None."""

    __slots__ = ("_value",)

    def __init__(self, value: Any = None) -> None:
        self._value = value

    def map(self, fn: Callable[[Any], Any]) -> "Optional":
        """Apply ``fn`` to a present value; an empty optional stays empty."""
        if self._value is None:
            return _EMPTY
        return of_nillable(fn(self._value))

    def get(self) -> Any:
        """The value; raises ValueError when it is None."""
        if self._value is None:
            raise ValueError("nil value")
        return self._value

    def or_else(self, value: Any) -> Any:
        """The value, or ``value`` when it is None."""
        return value if self._value is None else self._value

    def or_else_get(self, value: Any) -> Any:
        """The value, or ``value`` when it is None."""
        return value if self._value is None else self._value

    def __repr__(self) -> str:
        return f"Optional({self._value!r})"


_EMPTY = Optional(None)


def of(data: Any) -> Optional:
    """Wrap ``data`` in a new optional."""
    return Optional(data)


def of_nillable(data: Any) -> Optional:
    """Wrap ``data``; None gives the shared empty optional."""
    if data is None:
        return _EMPTY
    return Optional(data)