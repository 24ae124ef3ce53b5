"""A bounded pool of reusable byte buffers."""

from __future__ import annotations

import queue

__all__ = ["ByteChanPool"]


class ByteChanPool:
    """Hands out ``bytearray`` buffers of a fixed width, reusing returned ones.

    At most ``max_size`` buffers are kept; extra returned buffers are dropped.
    """

    def __init__(self, max_size: int, width: int, cap_width: int = 0) -> None:
        self._pool: queue.Queue | None = queue.Queue(maxsize=max_size) if max_size > 0 else None
        self._width = width
        self._cap_width = cap_width

    def get(self) -> bytearray:
        """Take a buffer from the pool, or create a new one if none is free."""
        if self._pool is not None:
            try:
                return self._pool.get_nowait()
            except queue.Empty:
                pass
        return bytearray(self._width)

    def put(self, b: bytearray) -> None:
        """Return a buffer to the pool; it is discarded when the pool is full."""
        if self._pool is None:
            return
        try:
            self._pool.put_nowait(b)
        except queue.Full:
            pass

    def width(self) -> int:
        """Width of the buffers made by this pool."""
        return self._width

    def width_cap(self) -> int:
        """Capacity width configured for this pool."""
        return self._cap_width