"""Raising helpers, running a function in a thread, signal waiting and conversions."""

from __future__ import annotations

import signal
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable

from utilbox import strconvert

__all__ = [
    "panic_if_err",
    "panic_if",
    "panicf",
    "go",
    "wait_close_signals",
    "to_string",
    "must_string",
    "try_string",
]


def panic_if_err(err) -> None:
    """Raise ``err`` if it is set.

    Exceptions are raised as they are; any other value becomes a RuntimeError.
    """
    if err is None:
        return
    if isinstance(err, BaseException):
        raise err
    raise RuntimeError(str(err))


def panic_if(err) -> None:
    """Raise ``err`` if it is set; see panic_if_err."""
    panic_if_err(err)


def panicf(fmt: str, *args: Any) -> None:
    """Raise a RuntimeError with a %-formatted message."""
    raise RuntimeError(fmt % args if args else fmt)


def go(fn: Callable[[], Any]) -> Any:
    """Run ``fn`` in a separate thread, wait for it and return its result.

    An exception raised by ``fn`` is raised again in the caller.
    """
    with ThreadPoolExecutor(max_workers=1) as executor:
        return executor.submit(fn).result()


def _close_signals() -> list[signal.Signals]:
    names = ("SIGINT", "SIGTERM", "SIGQUIT")
    return [getattr(signal, name) for name in names if hasattr(signal, name)]


def wait_close_signals(closer) -> Any:
    """Block until an interrupt, terminate or quit signal arrives, then close ``closer``.

    Must be called from the main thread. Returns what ``closer.close()`` returns.
    """
    received = threading.Event()

    def handler(signum, frame):
        received.set()

    previous = {sig: signal.signal(sig, handler) for sig in _close_signals()}
    try:
        while not received.wait(0.1):
            pass
    finally:
        for sig, old in previous.items():
            signal.signal(sig, signal.SIG_DFL if old is None else old)
    return closer.close()


def to_string(value) -> str:
    """Convert any value to string."""
    return strconvert.any_to_string(value, False)


def must_string(value) -> str:
    """Convert a basic value to string; complex values raise ConvertError."""
    return strconvert.any_to_string(value, True)


def try_string(value) -> str:
    """Convert a basic value to string; complex values raise ConvertError."""
    return strconvert.any_to_string(value, True)