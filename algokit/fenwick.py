"""Fenwick (binary indexed) tree for prefix and range sums."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


class FenwickTree:
    """Point additions and range sums over values indexed from zero."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._tree = [0] * (size + 1)

    @classmethod
    def from_values(cls, values: Iterable[int]) -> FenwickTree:
        """Build a tree holding ``values``."""
        items = list(values)
        tree = cls(len(items))
        for index, value in enumerate(items):
            tree.add(index, value)
        return tree

    def __len__(self) -> int:
        return len(self._tree) - 1

    def add(self, index: int, delta: int) -> None:
        """Add ``delta`` to the value at ``index``."""
        if not 0 <= index < len(self):
            raise IndexError(f"index {index} is out of range")
        pos = index + 1
        while pos < len(self._tree):
            self._tree[pos] += delta
            pos += pos & -pos

    def prefix_sum(self, index: int) -> int:
        """Return the sum of the first ``index`` values."""
        if not 0 <= index <= len(self):
            raise IndexError(f"prefix length {index} is out of range")
        total = 0
        pos = index
        while pos > 0:
            total += self._tree[pos]
            pos -= pos & -pos
        return total

    def range_sum(self, left: int, right: int) -> int:
        """Return the sum of the values from ``left`` to ``right`` inclusive."""
        if left > right:
            raise ValueError("left must not exceed right")
        if left < 0 or right >= len(self):
            raise IndexError("range is out of bounds")
        return self.prefix_sum(right + 1) - self.prefix_sum(left)


def static_range_sums(
    values: Iterable[int], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """Answer 1-based inclusive ``(a, b)`` sum queries."""
    tree = FenwickTree.from_values(values)
    return [tree.range_sum(a - 1, b - 1) for a, b in queries]


def dynamic_range_sums(
    values: Iterable[int], operations: Iterable[Sequence[int]]
) -> list[int]:
    """Run ``(1, k, u)`` set and ``(2, a, b)`` sum operations, 1-based."""
    current = list(values)
    tree = FenwickTree.from_values(current)
    results = []
    for kind, first, second in operations:
        if kind == 2:
            results.append(tree.range_sum(first - 1, second - 1))
        else:
            index = first - 1
            tree.add(index, second - current[index])
            current[index] = second
    return results