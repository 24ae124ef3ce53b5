"""String padding, repeating, replacing, JSON pretty printing and templating."""

from __future__ import annotations

import dataclasses
import json
import re
from collections.abc import Mapping
from enum import IntEnum
from pathlib import Path

import jinja2

from utilbox.strformat import lower_first, upper_first

__all__ = [
    "Position",
    "Str",
    "padding",
    "pad_left",
    "pad_right",
    "repeat",
    "repeat_rune",
    "repeat_bytes",
    "replaces",
    "pretty_json",
    "render_text",
    "render_template",
]


class Position(IntEnum):
    """Side on which a string is padded."""

    LEFT = 0
    RIGHT = 1


class Str(str):
    """A string with a few convenience methods."""

    def is_start_by(self, sub: str) -> bool:
        return self.startswith(sub)

    def is_end_by(self, sub: str) -> bool:
        return self.endswith(sub)

    def to_bytes(self) -> bytes:
        return self.encode("utf-8")

    def get(self) -> str:
        return str(self)

    def trim_space(self) -> "Str":
        return Str(self.strip())


def padding(s: str, pad: str, length: int, pos: Position = Position.LEFT) -> str:
    """Pad ``s`` up to ``length`` with ``pad`` on the given side.

    An empty or single-space pad pads with spaces to the given width.
    """
    diff = len(s.encode("utf-8")) - length
    if diff >= 0:
        return s

    if pad in ("", " "):
        return s.ljust(length) if pos == Position.RIGHT else s.rjust(length)

    fill = repeat(pad, -diff)
    return s + fill if pos == Position.RIGHT else fill + s


def pad_left(s: str, pad: str, length: int) -> str:
    return padding(s, pad, length, Position.LEFT)


def pad_right(s: str, pad: str, length: int) -> str:
    return padding(s, pad, length, Position.RIGHT)


def repeat(s: str, times: int) -> str:
    """Repeat ``s``; fewer than two times returns ``s`` unchanged."""
    if times < 2:
        return s
    return s * times


def repeat_rune(char: str, times: int) -> list[str]:
    """A list holding ``char`` ``times`` times."""
    return [char] * max(times, 0)


def repeat_bytes(char, times: int) -> bytes:
    """Bytes holding the byte ``char`` ``times`` times."""
    code = ord(char) if isinstance(char, (str, bytes)) else int(char)
    return bytes([code]) * max(times, 0)


def replaces(s: str, pairs: Mapping[str, str]) -> str:
    """Replace several substrings in one pass: ``{old: new, ...}``."""
    keys = sorted((key for key in pairs if key), key=len, reverse=True)
    if not keys:
        return s
    pattern = re.compile("|".join(re.escape(key) for key in keys))
    return pattern.sub(lambda m: pairs[m.group(0)], s)


def _json_default(obj):
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if isinstance(obj, (set, frozenset)):
        return list(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def pretty_json(value) -> str:
    """Encode ``value`` as JSON indented by four spaces."""
    return json.dumps(value, indent=4, ensure_ascii=False, default=_json_default)


def _builtin_funcs() -> dict:
    return {
        "raw": lambda s: s,
        "trim": lambda s: s.strip(),
        "join": lambda ss, sep: sep.join(ss),
        "lcFirst": lower_first,
        "upFirst": upper_first,
    }


def render_text(source: str, data=None, funcs: Mapping | None = None, is_file: bool = False) -> str:
    """Render a text template.

    ``source`` is the template text, or a file path when ``is_file`` is true.
    A mapping ``data`` becomes the template context; any other value is
    available as ``data``. The helpers raw, trim, join, lcFirst and upFirst
    are available both as functions and as filters, along with ``funcs``.
    """
    env = jinja2.Environment(autoescape=False, keep_trailing_newline=True)
    helpers = _builtin_funcs()
    if funcs:
        helpers.update(funcs)
    env.globals.update(helpers)
    env.filters.update(helpers)

    text = Path(source).read_text(encoding="utf-8") if is_file else source
    template = env.from_string(text)

    if data is None:
        return template.render()
    if isinstance(data, Mapping):
        return template.render(dict(data))
    return template.render(data=data)


def render_template(source: str, data=None, funcs: Mapping | None = None, is_file: bool = False) -> str:
    return render_text(source, data, funcs, is_file)