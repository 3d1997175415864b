"""Find all unique combinations of ``n`` numbers that add up to a target."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence


def _search(
    nums: Sequence[int],
    n: int,
    target: int,
    lo: int,
    hi: int,
    path: tuple[int, ...],
) -> Iterator[tuple[int, ...]]:
    if hi - lo + 1 < n or target < nums[lo] * n or target > nums[hi] * n:
        return
    if n == 2:
        while lo < hi:
            total = nums[lo] + nums[hi]
            if total == target:
                yield path + (nums[lo], nums[hi])
                lo += 1
                hi -= 1
                while lo < hi and nums[lo] == nums[lo - 1]:
                    lo += 1
                while lo < hi and nums[hi] == nums[hi + 1]:
                    hi -= 1
            elif total < target:
                lo += 1
            else:
                hi -= 1
        return
    for i in range(lo, hi + 1):
        if i > lo and nums[i] == nums[i - 1]:
            continue
        yield from _search(nums, n - 1, target - nums[i], i + 1, hi, path + (nums[i],))


def n_sum(nums: Iterable[int], n: int, target: int) -> list[list[int]]:
    """Return every distinct sorted ``n``-tuple of ``nums`` summing to ``target``.

    The input is not modified.
    """
    if n < 2:
        raise ValueError("n must be at least 2")
    ordered = sorted(nums)
    return [list(combo) for combo in _search(ordered, n, target, 0, len(ordered) - 1, ())]


def four_sum(nums: Iterable[int], target: int) -> list[list[int]]:
    """Return every distinct sorted quadruplet of ``nums`` summing to ``target``."""
    return n_sum(nums, 4, target)