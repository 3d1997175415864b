"""Small counting and sequence problems on integer lists and strings."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import groupby


def hello() -> str:
    """Return the greeting."""
    return "hello world"


def distinct_numbers(values: Iterable[int]) -> int:
    """Count the distinct values."""
    return len(set(values))


def increasing_array_moves(values: Iterable[int]) -> int:
    """Return the total increase needed to make ``values`` non-decreasing."""
    moves = 0
    highest: int | None = None
    for value in values:
        if highest is not None and value < highest:
            moves += highest - value
        else:
            highest = value
    return moves


def missing_number(n: int, values: Iterable[int]) -> int:
    """Return the number in ``1..n`` absent from the ``n - 1`` given values."""
    items = sorted(values)
    if len(items) != n - 1:
        raise ValueError(f"expected {n - 1} values, got {len(items)}")
    for expected, value in enumerate(items, start=1):
        if value != expected:
            return expected
    return n


def beautiful_permutation(n: int) -> list[int]:
    """Return a permutation of ``1..n`` with no adjacent values differing by one.

    Raises ``ValueError`` when no such permutation exists.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 4:
        return [2, 4, 1, 3]
    if n in (2, 3):
        raise ValueError("NO SOLUTION")
    half = (n + 1) // 2
    arr = [0] * n
    arr[0::2] = range(1, half + 1)
    arr[1::2] = range(half + 1, n + 1)
    for i in range(1, n - 1):
        if abs(arr[i] - arr[i - 1]) == 1:
            arr[i], arr[i + 1] = arr[i + 1], arr[i]
    return arr


def longest_repetition(text: str) -> int:
    """Return the length of the longest run of one repeated character."""
    return max((sum(1 for _ in run) for _, run in groupby(text)), default=1)


def subordinates(parents: Sequence[int]) -> list[int]:
    """Count each employee's subordinates.

    ``parents`` holds the 1-based boss of employees ``2..N``; employee 1
    is the head. The result lists the counts for employees ``1..N``.
    """
    count = len(parents) + 1
    children: list[list[int]] = [[] for _ in range(count)]
    for employee, boss in enumerate(parents, start=1):
        if not 1 <= boss <= count:
            raise ValueError(f"boss {boss} is out of range")
        children[boss - 1].append(employee)
    order = []
    stack = [0]
    while stack:
        node = stack.pop()
        order.append(node)
        stack.extend(children[node])
    sizes = [1] * count
    for node in reversed(order):
        sizes[node] += sum(sizes[child] for child in children[node])
    return [size - 1 for size in sizes]


def weird_algorithm(n: int) -> list[int]:
    """Return the sequence that halves even and triples-plus-one odd values until 1."""
    if n < 1:
        raise ValueError("n must be positive")
    sequence = [n]
    while n != 1:
        n = n // 2 if n % 2 == 0 else 3 * n + 1
        sequence.append(n)
    return sequence


def leftmost_min_subarrays(values: Sequence[int]) -> int:
    """Count subarrays whose first element is not larger than any other element."""
    count = len(values)
    next_smaller = [count] * count
    stack: list[int] = []
    for index, value in enumerate(values):
        while stack and values[stack[-1]] > value:
            next_smaller[stack.pop()] = index
        stack.append(index)
    return sum(end - start for start, end in enumerate(next_smaller))