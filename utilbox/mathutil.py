"""Numeric conversions, percentages, elapsed time and random integers."""

from __future__ import annotations

import math
import random
import re
from datetime import datetime, timedelta
from decimal import Decimal

__all__ = [
    "ConvertError",
    "to_int",
    "must_int",
    "to_uint",
    "must_uint",
    "to_int64",
    "must_int64",
    "to_float",
    "must_float",
    "try_to_string",
    "to_string",
    "must_string",
    "string",
    "is_numeric",
    "percent",
    "elapsed_time",
    "random_int",
    "random_int_with_seed",
]

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_UINT64_MOD = 2**64

_SIGNED_RE = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_RE = re.compile(r"[0-9]+")


class ConvertError(ValueError):
    """Raised when a value cannot be converted to the requested type."""

    def __init__(self, message: str = "convert data type is failure") -> None:
        super().__init__(message)


def _nanoseconds(delta: timedelta) -> int:
    return (delta // timedelta(microseconds=1)) * 1000


def _parse_signed(text: str) -> int:
    text = text.strip()
    if not _SIGNED_RE.fullmatch(text):
        raise ConvertError(f"cannot parse {text!r} as an integer")
    number = int(text)
    if not _INT64_MIN <= number <= _INT64_MAX:
        raise ConvertError(f"value {text!r} out of range")
    return number


def _parse_unsigned(text: str) -> int:
    text = text.strip()
    if not _UNSIGNED_RE.fullmatch(text):
        raise ConvertError(f"cannot parse {text!r} as an unsigned integer")
    number = int(text)
    if number >= _UINT64_MOD:
        raise ConvertError(f"value {text!r} out of range")
    return number


def to_int(value) -> int:
    """Convert a number, numeric string, Decimal or timedelta to int."""
    if value is None:
        return 0
    if isinstance(value, bool):
        raise ConvertError()
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            raise ConvertError()
        return int(value)
    if isinstance(value, timedelta):
        return _nanoseconds(value)
    if isinstance(value, Decimal):
        return _parse_signed(str(value))
    if isinstance(value, str):
        return _parse_signed(value)
    raise ConvertError()


def must_int(value) -> int:
    """Convert to int, returning 0 on failure."""
    try:
        return to_int(value)
    except ConvertError:
        return 0


def to_int64(value) -> int:
    """Convert a value to a 64-bit signed integer."""
    return to_int(value)


def must_int64(value) -> int:
    """Convert to a 64-bit integer, returning 0 on failure."""
    try:
        return to_int64(value)
    except ConvertError:
        return 0


def to_uint(value) -> int:
    """Convert a value to a 64-bit unsigned integer.

    Negative numbers wrap around; negative strings are rejected.
    """
    if isinstance(value, str):
        return _parse_unsigned(value)
    return to_int(value) % _UINT64_MOD


def must_uint(value) -> int:
    """Convert to an unsigned integer, returning 0 on failure."""
    try:
        return to_uint(value)
    except ConvertError:
        return 0


def to_float(value) -> float:
    """Convert a number, numeric string, Decimal or timedelta to float."""
    if value is None:
        return 0.0
    if isinstance(value, bool):
        raise ConvertError()
    if isinstance(value, (int, float, Decimal)):
        return float(value)
    if isinstance(value, timedelta):
        return float(_nanoseconds(value))
    if isinstance(value, str):
        text = value.strip()
        if "_" in text:
            raise ConvertError(f"cannot parse {text!r} as a float")
        try:
            return float(text)
        except ValueError as exc:
            raise ConvertError(f"cannot parse {text!r} as a float") from exc
    raise ConvertError()


def must_float(value) -> float:
    """Convert to float, returning 0.0 on failure."""
    try:
        return to_float(value)
    except ConvertError:
        return 0.0


def _format_float(number: float) -> str:
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "+Inf" if number > 0 else "-Inf"
    text = format(Decimal(repr(number)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _sprint(value) -> str:
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return _format_float(value)
        text = repr(value)
        return text[:-2] if text.endswith(".0") else text
    if isinstance(value, (bytes, bytearray)):
        return "[" + " ".join(str(b) for b in value) + "]"
    if isinstance(value, (list, tuple, set, frozenset)):
        return "[" + " ".join(_sprint(item) for item in value) + "]"
    if isinstance(value, dict):
        items = sorted(value.items(), key=lambda kv: _sprint(kv[0]))
        return "map[" + " ".join(f"{_sprint(k)}:{_sprint(v)}" for k, v in items) + "]"
    return str(value)


def try_to_string(value, default_as_err: bool) -> str:
    """Convert a numeric value to string.

    Other types raise ConvertError when ``default_as_err`` is true,
    otherwise they are formatted generically.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        pass
    elif isinstance(value, int):
        return str(value)
    elif isinstance(value, float):
        return _format_float(value)
    elif isinstance(value, timedelta):
        return str(_nanoseconds(value))
    elif isinstance(value, Decimal):
        return str(value)
    if default_as_err:
        raise ConvertError()
    return _sprint(value)


def to_string(value) -> str:
    """Convert a numeric value to string, raising ConvertError otherwise."""
    return try_to_string(value, True)


def must_string(value) -> str:
    """Convert a numeric value to string, raising ConvertError otherwise."""
    return try_to_string(value, True)


def string(value) -> str:
    """Convert any value to string; non-numeric values are formatted generically."""
    return try_to_string(value, False)


def is_numeric(c) -> bool:
    """Report whether the character (or byte value) is an ASCII digit."""
    code = ord(c) if isinstance(c, str) else int(c)
    return ord("0") <= code <= ord("9")


def percent(val: int, total: int) -> float:
    """Return ``val`` as a percentage of ``total``; 0 when total is 0."""
    if total == 0:
        return 0.0
    return (val / total) * 100


def elapsed_time(start_time: datetime) -> str:
    """Milliseconds elapsed since ``start_time``, formatted with 3 decimals."""
    elapsed = datetime.now(start_time.tzinfo) - start_time
    return f"{elapsed.total_seconds() * 1000:.3f}"


def random_int(min_val: int, max_val: int) -> int:
    """Return a random int in ``[min_val, max_val)``."""
    return random.randrange(min_val, max_val)


def random_int_with_seed(min_val: int, max_val: int, seed: int) -> int:
    """Return a random int in ``[min_val, max_val)`` from a seeded generator."""
    return random.Random(seed).randrange(min_val, max_val)