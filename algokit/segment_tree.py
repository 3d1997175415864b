"""Segment tree answering range-minimum queries with point updates."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


class MinSegmentTree:
    """Range minimum over a fixed-length sequence, indexed from zero."""

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        if not items:
            raise ValueError("a segment tree needs at least one value")
        self._n = len(items)
        self._tree = [0] * self._n + items
        for node in range(self._n - 1, 0, -1):
            self._tree[node] = min(self._tree[2 * node], self._tree[2 * node + 1])

    def __len__(self) -> int:
        return self._n

    def _check(self, index: int) -> None:
        if not 0 <= index < self._n:
            raise IndexError(f"index {index} is out of range")

    def update(self, index: int, value: int) -> None:
        """Set the value at ``index``."""
        self._check(index)
        pos = index + self._n
        self._tree[pos] = value
        pos //= 2
        while pos:
            self._tree[pos] = min(self._tree[2 * pos], self._tree[2 * pos + 1])
            pos //= 2

    def add(self, index: int, delta: int) -> None:
        """Add ``delta`` to the value at ``index``."""
        self._check(index)
        self.update(index, self._tree[index + self._n] + delta)

    def query(self, left: int, right: int) -> int:
        """Return the minimum of the values from ``left`` to ``right`` inclusive."""
        self._check(left)
        self._check(right)
        if left > right:
            raise ValueError("left must not exceed right")
        lo = left + self._n
        hi = right + self._n + 1
        best = self._tree[lo]
        while lo < hi:
            if lo & 1:
                best = min(best, self._tree[lo])
                lo += 1
            if hi & 1:
                hi -= 1
                best = min(best, self._tree[hi])
            lo //= 2
            hi //= 2
        return best


def range_minimum_queries(
    values: Iterable[int], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """Answer 1-based inclusive ``(a, b)`` minimum queries."""
    tree = MinSegmentTree(values)
    return [tree.query(a - 1, b - 1) for a, b in queries]


def dynamic_range_minimum(
    values: Iterable[int], operations: Iterable[Sequence[int]]
) -> list[int]:
    """Run ``(1, k, u)`` set and ``(2, a, b)`` minimum operations, 1-based."""
    tree = MinSegmentTree(values)
    results = []
    for kind, first, second in operations:
        if kind == 1:
            tree.update(first - 1, second)
        else:
            results.append(tree.query(first - 1, second - 1))
    return results


def range_update_queries(
    values: Iterable[int], operations: Iterable[Sequence[int]]
) -> list[int]:
    """Run ``(1, a, b, u)`` range increases and ``(2, k)`` value lookups, 1-based."""
    tree = MinSegmentTree(values)
    results = []
    for kind, *args in operations:
        if kind == 1:
            first, last, delta = args
            for index in range(first - 1, last):
                tree.add(index, delta)
        else:
            (position,) = args
            results.append(tree.query(position - 1, position - 1))
    return results