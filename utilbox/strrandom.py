"""MD5 digests, random strings and time based ids."""

from __future__ import annotations

import base64
import hashlib
import random
import secrets
import time

from utilbox import mathutil

__all__ = [
    "ALPHA_BET",
    "ALPHA_NUM",
    "ALPHA_NUM2",
    "DEF_MIN_INT",
    "DEF_MAX_INT",
    "md5",
    "gen_md5",
    "random_chars",
    "random_chars_v2",
    "random_chars_v3",
    "random_bytes",
    "random_string",
    "micro_time_id",
    "micro_time_hex_id",
]

ALPHA_BET = "abcdefghijklmnopqrstuvwxyz"
ALPHA_NUM = "abcdefghijklmnopqrstuvwxyz0123456789"
ALPHA_NUM2 = "abcdefghijklmnopqrstuvwxyz0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"

DEF_MIN_INT = 1000
DEF_MAX_INT = 9999


def gen_md5(src) -> str:
    """Hex MD5 digest of a string, or of the generic text form of any value."""
    text = src if isinstance(src, str) else mathutil.string(src)
    return hashlib.md5(text.encode("utf-8")).hexdigest()


def md5(src) -> str:
    return gen_md5(src)


def _random_from(alphabet: str, ln: int) -> str:
    return "".join(random.choice(alphabet) for _ in range(ln))


def random_chars(ln: int) -> str:
    """Random characters drawn from the first 25 letters of a-z."""
    return _random_from(ALPHA_BET[:25], ln)


def random_chars_v2(ln: int) -> str:
    """Random characters drawn from the first 35 characters of a-z0-9."""
    return _random_from(ALPHA_NUM[:35], ln)


def random_chars_v3(ln: int) -> str:
    """Random characters drawn from the first 61 characters of a-z0-9A-Z."""
    return _random_from(ALPHA_NUM2[:61], ln)


def random_bytes(length: int) -> bytes:
    """Cryptographically secure random bytes."""
    return secrets.token_bytes(length)


def random_string(length: int) -> str:
    """URL-safe base64 (padded) of ``length`` secure random bytes."""
    return base64.urlsafe_b64encode(random_bytes(length)).decode("ascii")


def _micro_now() -> int:
    return time.time_ns() // 1000


def micro_time_id() -> str:
    """Microsecond timestamp followed by a random 4-digit number."""
    ri = mathutil.random_int(DEF_MIN_INT, DEF_MAX_INT)
    return f"{_micro_now()}{ri}"


def micro_time_hex_id() -> str:
    """Hex microsecond timestamp followed by a hex random number."""
    ri = mathutil.random_int(DEF_MIN_INT, DEF_MAX_INT)
    return f"{_micro_now():x}{ri:x}"