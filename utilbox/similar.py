"""Edit-distance based string similarity."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["SimilarComparator", "similarity"]


def _edit_distance(s: bytes, t: bytes) -> int:
    previous = list(range(len(t) + 1))
    for i, sc in enumerate(s, start=1):
        current = [i]
        for j, tc in enumerate(t, start=1):
            if sc == tc:
                current.append(previous[j - 1])
            else:
                current.append(min(previous[j], current[j - 1], previous[j - 1]) + 1)
        previous = current
    return previous[-1]


@dataclass(frozen=True)
class SimilarComparator:
    """Compares two strings by their byte-level edit distance."""

    src: str
    dst: str

    def similar(self, min_differ_rate: float) -> tuple[float, bool]:
        """Return the differ rate and whether it reaches ``min_differ_rate``."""
        src = self.src.encode("utf-8")
        dst = self.dst.encode("utf-8")
        dist = _edit_distance(src, dst)
        differ_rate = dist / (max(len(src), len(dst)) + 4)
        return differ_rate, differ_rate >= min_differ_rate


def similarity(s: str, t: str, rate: float) -> tuple[float, bool]:
    """Compare two strings; see SimilarComparator.similar."""
    return SimilarComparator(s, t).similar(rate)