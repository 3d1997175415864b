"""Disjoint-set forest with union by rank or by size and path compression."""

from __future__ import annotations

from collections.abc import Sequence


class DisjointSet:
    """Disjoint sets over the nodes ``0`` to ``n`` inclusive."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must not be negative")
        self._parent = list(range(n + 1))
        self._rank = [0] * (n + 1)
        self._size = [1] * (n + 1)

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._parent):
            raise IndexError(f"node {node} is out of range")

    def find(self, node: int) -> int:
        """Return the root of the set holding ``node``, compressing the path."""
        self._check(node)
        root = node
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[node] != root:
            following = self._parent[node]
            self._parent[node] = root
            node = following
        return root

    def union_by_rank(self, u: int, v: int) -> None:
        """Join the sets of ``u`` and ``v``, hanging the lower-ranked root."""
        root_u = self.find(u)
        root_v = self.find(v)
        if root_u == root_v:
            return
        if self._rank[root_u] < self._rank[root_v]:
            self._parent[root_u] = root_v
        elif self._rank[root_v] < self._rank[root_u]:
            self._parent[root_v] = root_u
        else:
            self._parent[root_v] = root_u
            self._rank[root_u] += 1

    def union_by_size(self, u: int, v: int) -> None:
        """Join the sets of ``u`` and ``v``, hanging the smaller set."""
        root_u = self.find(u)
        root_v = self.find(v)
        if root_u == root_v:
            return
        if self._size[root_u] < self._size[root_v]:
            self._parent[root_u] = root_v
            self._size[root_v] += self._size[root_u]
        else:
            self._parent[root_v] = root_u
            self._size[root_u] += self._size[root_v]

    def connected(self, u: int, v: int) -> bool:
        """Tell whether ``u`` and ``v`` are in the same set."""
        return self.find(u) == self.find(v)


def _report(ds: DisjointSet, u: int, v: int) -> None:
    print("Same" if ds.connected(u, v) else "Not same")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the small demonstration of joining sets."""
    ds = DisjointSet(7)
    for u, v in [(1, 2), (2, 3), (4, 5), (6, 7), (5, 6)]:
        ds.union_by_rank(u, v)
    _report(ds, 3, 7)
    ds.union_by_rank(3, 7)
    _report(ds, 3, 7)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())