"""Adjacency-list graph and bridge finding."""

from __future__ import annotations

from collections.abc import Hashable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T", bound=Hashable)


class Graph(Generic[T]):
    """A graph kept as adjacency lists in insertion order."""

    def __init__(self) -> None:
        self._adjacency: dict[T, list[T]] = {}

    def add_edge(self, u: T, v: T, directed: bool = False) -> None:
        """Add an edge from ``u`` to ``v``, and back unless ``directed``."""
        self._adjacency.setdefault(u, []).append(v)
        if not directed:
            self._adjacency.setdefault(v, []).append(u)

    def neighbours(self, node: T) -> list[T]:
        """Return the nodes ``node`` has edges to."""
        return list(self._adjacency.get(node, ()))

    def __contains__(self, node: object) -> bool:
        return node in self._adjacency

    def __iter__(self) -> Iterator[T]:
        return iter(self._adjacency)

    def format(self) -> str:
        """Render each node with its neighbours as ``node->a,b,`` lines."""
        return "".join(
            f"{node}->" + "".join(f"{other}," for other in others) + "\n"
            for node, others in self._adjacency.items()
        )


@dataclass
class _Frame:
    node: int
    parent: int
    neighbours: Iterator[int]
    parent_skipped: bool = field(default=False)


def find_bridges(n: int, adjacency: Sequence[Sequence[int]]) -> list[tuple[int, int]]:
    """Return the bridges of an undirected graph on nodes ``0..n-1``.

    Each bridge is given as ``(v, to)`` where ``v`` was reached first in the
    depth-first search. A repeated edge between two nodes is not a bridge.
    """
    if len(adjacency) < n:
        raise ValueError("adjacency must list neighbours for every node")
    visited = [False] * n
    tin = [-1] * n
    low = [-1] * n
    timer = 0
    bridges: list[tuple[int, int]] = []

    def enter(node: int, parent: int) -> _Frame:
        nonlocal timer
        visited[node] = True
        tin[node] = low[node] = timer
        timer += 1
        return _Frame(node, parent, iter(adjacency[node]))

    for start in range(n):
        if visited[start]:
            continue
        stack = [enter(start, -1)]
        while stack:
            frame = stack[-1]
            v = frame.node
            for to in frame.neighbours:
                if to == frame.parent and not frame.parent_skipped:
                    frame.parent_skipped = True
                    continue
                if visited[to]:
                    low[v] = min(low[v], tin[to])
                else:
                    stack.append(enter(to, v))
                    break
            else:
                stack.pop()
                if stack:
                    parent = stack[-1].node
                    low[parent] = min(low[parent], low[v])
                    if low[v] > tin[parent]:
                        bridges.append((parent, v))
    return bridges