"""Capturing standard output streams and temporarily replacing environment variables."""

from __future__ import annotations

import io
import os
import sys
from typing import Callable, Mapping

__all__ = [
    "discard_stdout",
    "rewrite_stdout",
    "restore_stdout",
    "rewrite_stderr",
    "restore_stderr",
    "mock_env_value",
    "mock_env_values",
    "mock_os_env_by_text",
    "mock_os_env",
]

# stream name -> (original stream, replacement)
_saved: dict[str, tuple] = {}


def _get_stream(name: str):
    return sys.stdout if name == "stdout" else sys.stderr


def _set_stream(name: str, stream) -> None:
    if name == "stdout":
        sys.stdout = stream
    else:
        sys.stderr = stream


def _replace(name: str, replacement) -> None:
    _saved[name] = (_get_stream(name), replacement)
    _set_stream(name, replacement)


def _restore(name: str) -> str:
    if name not in _saved:
        return ""
    original, replacement = _saved.pop(name)
    output = replacement.getvalue() if isinstance(replacement, io.StringIO) else ""
    replacement.close()
    _set_stream(name, original)
    return output


def discard_stdout() -> None:
    """Send everything written to stdout to the null device until restored."""
    _replace("stdout", open(os.devnull, "w", encoding="utf-8"))


def rewrite_stdout() -> None:
    """Capture everything written to stdout until restore_stdout."""
    _replace("stdout", io.StringIO())


def restore_stdout() -> str:
    """Restore stdout and return what was captured ("" if discarded or not replaced)."""
    return _restore("stdout")


def rewrite_stderr() -> None:
    """Capture everything written to stderr until restore_stderr."""
    _replace("stderr", io.StringIO())


def restore_stderr() -> str:
    """Restore stderr and return what was captured."""
    return _restore("stderr")


def _restore_value(key: str, old: str) -> None:
    if old == "":
        os.environ.pop(key, None)
    else:
        os.environ[key] = old


def mock_env_value(key: str, val: str, fn: Callable[[str], None]) -> None:
    """Set ``key`` to ``val`` while ``fn`` runs, then restore it.

    ``fn`` receives the new value. An old empty value is restored as unset.
    """
    old = os.environ.get(key, "")
    os.environ[key] = val
    try:
        fn(os.environ.get(key, ""))
    finally:
        _restore_value(key, old)


def mock_env_values(kv_map: Mapping[str, str], fn: Callable[[], None]) -> None:
    """Set several variables while ``fn`` runs, then restore them."""
    backups = {key: os.environ.get(key, "") for key in kv_map}
    os.environ.update(kv_map)
    try:
        fn()
    finally:
        for key, old in backups.items():
            _restore_value(key, old)


def mock_os_env_by_text(env_text: str, fn: Callable[[], None]) -> None:
    """Replace the whole environment by ``KEY=VAL`` lines while ``fn`` runs."""
    mp: dict[str, str] = {}
    for line in env_text.split("\n"):
        line = line.strip()
        if not line:
            continue
        key, _, val = line.partition("=")
        mp[key] = val
    mock_os_env(mp, fn)


def mock_os_env(mp: Mapping[str, str], fn: Callable[[], None]) -> None:
    """Replace the whole environment by ``mp`` while ``fn`` runs, then restore it."""
    backup = dict(os.environ)
    os.environ.clear()
    os.environ.update(mp)
    try:
        fn()
    finally:
        os.environ.clear()
        os.environ.update(backup)