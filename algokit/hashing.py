"""Puzzles solved with hash sets, hash maps and heaps."""

from __future__ import annotations

import heapq
from collections.abc import Iterable


def contains_nearby_duplicate(nums: Iterable[int], k: int) -> bool:
    """True if two equal values sit at most ``k`` positions apart."""
    last_seen: dict[int, int] = {}
    for i, value in enumerate(nums):
        if value in last_seen and i - last_seen[value] <= k:
            return True
        last_seen[value] = i
    return False


def _digit_square_sum(n: int) -> int:
    return sum(int(d) ** 2 for d in str(n)) if n > 0 else 0


def is_happy(n: int) -> bool:
    """True if repeatedly summing the squares of the digits of ``n`` reaches 1."""
    seen: set[int] = set()
    while n not in seen:
        seen.add(n)
        n = _digit_square_sum(n)
        if n == 1:
            return True
    return False


def longest_consecutive(nums: Iterable[int]) -> int:
    """Length of the longest run of consecutive integers among ``nums``."""
    values = set(nums)
    best = 0
    for value in values:
        if value - 1 in values:
            continue
        end = value
        while end + 1 in values:
            end += 1
        best = max(best, end - value + 1)
    return best


def find_kth_largest(nums: Iterable[int], k: int) -> int:
    """The ``k``-th largest value of ``nums`` (1-based)."""
    values = list(nums)
    if not 1 <= k <= len(values):
        raise ValueError(f"k must be between 1 and {len(values)}")
    return heapq.nlargest(k, values)[-1]