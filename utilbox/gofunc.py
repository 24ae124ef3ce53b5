"""Function names, call stacks and caller information.

Full function names have the form "package/path/module.QualName",
e.g. "utilbox/gofunc.pkg_name".
"""

from __future__ import annotations

import inspect
import os
import sys
import threading
import traceback
from dataclasses import dataclass, field

from utilbox.strsplit import must_cut

__all__ = [
    "FullFcName",
    "func_name",
    "cut_func_name",
    "pkg_name",
    "get_call_stacks",
    "get_caller_info",
    "simple_callers_info",
    "get_callers_info",
]


def _module_path(module: str) -> str:
    return module.replace(".", "/")


def _frame_module(frame) -> str:
    """Dotted name of the module a frame runs in."""
    module = inspect.getmodule(frame)
    if module is not None:
        return module.__name__
    return inspect.getmodulename(frame.f_code.co_filename) or ""


@dataclass
class FullFcName:
    """A full function name split into package path, package and function."""

    full_name: str = ""
    _pkg_path: str = field(default="", init=False, repr=False)
    _pkg_name: str = field(default="", init=False, repr=False)
    _func_name: str = field(default="", init=False, repr=False)

    def parse(self) -> None:
        if self._func_name:
            return
        i = self.full_name.rfind("/")
        path = self.full_name[: i + 1]
        self._pkg_name, self._func_name = must_cut(self.full_name[i + 1 :], ".")
        self._pkg_path = path + self._pkg_name

    def pkg_path(self) -> str:
        self.parse()
        return self._pkg_path

    def pkg_name(self) -> str:
        self.parse()
        return self._pkg_name

    def func_name(self) -> str:
        self.parse()
        return self._func_name

    def __str__(self) -> str:
        return self.full_name


def func_name(fn) -> str:
    """Full name of a function or method, including its module path."""
    module = getattr(fn, "__module__", None) or ""
    qualname = getattr(fn, "__qualname__", None) or getattr(fn, "__name__", repr(fn))
    return f"{_module_path(module)}.{qualname}"


def cut_func_name(full_name: str) -> tuple[str, str]:
    """Split a full function name into (package path, short function name)."""
    ffn = FullFcName(full_name)
    return ffn.pkg_path(), ffn.func_name()


def pkg_name(full_name: str) -> str:
    """Strip the function part from a full function name."""
    while True:
        last_period = full_name.rfind(".")
        last_slash = full_name.rfind("/")
        if last_period > last_slash:
            full_name = full_name[:last_period]
        else:
            return full_name


def get_call_stacks(all_threads: bool = False) -> str:
    """Formatted stack of the calling thread, or of every thread."""
    caller = inspect.currentframe().f_back
    if not all_threads:
        return "".join(traceback.format_stack(caller))

    names = {t.ident: t.name for t in threading.enumerate()}
    current = threading.get_ident()
    parts = []
    for ident, frame in sys._current_frames().items():
        if ident == current:
            frame = caller
        parts.append(f"Thread {names.get(ident, ident)} ({ident}):\n")
        parts.extend(traceback.format_stack(frame))
        parts.append("\n")
    return "".join(parts)


def get_callers_info(skip: int, max_depth: int) -> list[str]:
    """Frames ``skip`` up to ``max_depth`` as "module.func(),file.py:line".

    Frame 0 is this function itself.
    """
    callers: list[str] = []
    frame = inspect.currentframe()
    depth = 0
    try:
        while frame is not None and depth < max_depth:
            if depth >= skip:
                code = frame.f_code
                filename = code.co_filename
                if not filename.startswith("<"):
                    qualname = getattr(code, "co_qualname", code.co_name)
                    module = _module_path(_frame_module(frame))
                    callers.append(
                        f"{module}.{qualname}(),{os.path.basename(filename)}:{frame.f_lineno}"
                    )
            frame = frame.f_back
            depth += 1
    finally:
        del frame
    return callers


def get_caller_info(skip: int) -> str:
    """Caller description ``skip`` frames above this function, or ""."""
    skip += 1
    cs = get_callers_info(skip, skip + 1)
    return cs[0] if cs else ""


def simple_callers_info(skip: int, num: int) -> list[str]:
    """Up to ``num`` caller descriptions starting ``skip`` frames above."""
    skip += 1
    return get_callers_info(skip, skip + num)