"""Character and string predicates."""

from __future__ import annotations

import unicodedata

__all__ = [
    "is_numeric",
    "is_alphabet",
    "is_alpha_num",
    "equal",
    "has_prefix",
    "has_suffix",
    "str_pos",
    "byte_pos",
    "rune_pos",
    "has_one_sub",
    "has_all_subs",
    "is_starts_of",
    "has_one_prefix",
    "is_start_of",
    "is_end_of",
    "length",
    "utf8_len",
    "valid_utf8_string",
    "is_space",
    "is_space_rune",
    "is_empty",
    "is_blank",
    "is_not_blank",
    "is_blank_bytes",
    "is_symbol",
]

_SPACE_BYTES = frozenset({9, 10, 11, 12, 13, 32})
_CONTROL_SEPARATORS = frozenset(range(0x1C, 0x20))
_SYMBOL_CATEGORIES = frozenset({"Sm", "Sc", "Sk", "So"})


def _code(c) -> int:
    return ord(c) if isinstance(c, str) else int(c)


def _byte_index(s: str, index: int) -> int:
    return -1 if index < 0 else len(s[:index].encode("utf-8"))


def is_numeric(c) -> bool:
    """Report whether the character is an ASCII digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alphabet(char) -> bool:
    """Report whether the character is an ASCII letter."""
    code = _code(char)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_alpha_num(c) -> bool:
    """Report whether the character is an ASCII letter, digit or underscore."""
    code = _code(c)
    return code == ord("_") or is_numeric(code) or is_alphabet(code)


def equal(a: str, b: str) -> bool:
    """Case-insensitive string equality."""
    return a.casefold() == b.casefold()


def has_prefix(s: str, prefix: str) -> bool:
    return s.startswith(prefix)


def has_suffix(s: str, suffix: str) -> bool:
    return s.endswith(suffix)


def str_pos(s: str, sub: str) -> int:
    """UTF-8 byte offset of the first ``sub`` in ``s``, or -1."""
    return _byte_index(s, s.find(sub))


def byte_pos(s: str, bt) -> int:
    """UTF-8 byte offset of the first byte ``bt`` in ``s``, or -1."""
    code = _code(bt)
    if not 0 <= code <= 255:
        raise ValueError(f"not a byte value: {bt!r}")
    return s.encode("utf-8").find(bytes([code]))


def rune_pos(s: str, ru) -> int:
    """UTF-8 byte offset of the first character ``ru`` in ``s``, or -1."""
    return _byte_index(s, s.find(chr(_code(ru))))


def has_one_sub(s: str, subs) -> bool:
    """Report whether ``s`` contains any of ``subs``."""
    return any(sub in s for sub in subs)


def has_all_subs(s: str, subs) -> bool:
    """Report whether ``s`` contains all of ``subs``."""
    return all(sub in s for sub in subs)


def has_one_prefix(s: str, subs) -> bool:
    """Report whether ``s`` starts with any of ``subs``."""
    return any(s.startswith(sub) for sub in subs)


def is_starts_of(s: str, subs) -> bool:
    return has_one_prefix(s, subs)


def is_start_of(s: str, sub: str) -> bool:
    return s.startswith(sub)


def is_end_of(s: str, sub: str) -> bool:
    return s.endswith(sub)


def length(s: str) -> int:
    """Length of ``s`` in UTF-8 bytes."""
    return len(s.encode("utf-8"))


def utf8_len(s: str) -> int:
    """Number of characters in ``s``."""
    return len(s)


def valid_utf8_string(s) -> bool:
    """Report whether ``s`` (str or bytes) is valid UTF-8."""
    try:
        if isinstance(s, (bytes, bytearray)):
            bytes(s).decode("utf-8")
        else:
            s.encode("utf-8")
    except UnicodeError:
        return False
    return True


def is_space(c) -> bool:
    """Report whether the byte is an ASCII whitespace character."""
    return _code(c) in _SPACE_BYTES


def is_space_rune(r) -> bool:
    """Report whether the character is a Unicode space."""
    code = _code(r)
    if code in _SPACE_BYTES:
        return True
    if code in _CONTROL_SEPARATORS:
        return False
    return chr(code).isspace()


def is_empty(s: str) -> bool:
    return len(s) == 0


def is_blank_bytes(bs) -> bool:
    """Report whether every byte is an ASCII whitespace character."""
    return all(b in _SPACE_BYTES for b in bs)


def is_blank(s: str) -> bool:
    """Report whether ``s`` consists only of ASCII whitespace."""
    return is_blank_bytes(s.encode("utf-8"))


def is_not_blank(s: str) -> bool:
    return not is_blank(s)


def is_symbol(r) -> bool:
    """Report whether the character is a Unicode symbol."""
    return unicodedata.category(chr(_code(r))) in _SYMBOL_CATEGORIES