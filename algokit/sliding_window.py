"""Sliding-window puzzles over strings and integer sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def character_replacement(s: str, k: int) -> int:
    """Longest run of one character reachable by replacing at most ``k`` characters."""
    if k < 0:
        raise ValueError("k must be non-negative")
    counts: Counter[str] = Counter()
    best = left = top = 0
    for right, ch in enumerate(s):
        counts[ch] += 1
        top = max(top, counts[ch])
        while (right - left + 1) - top > k:
            counts[s[left]] -= 1
            left += 1
        best = max(best, right - left + 1)
    return best


def min_subarray_len(target: int, nums: Sequence[int]) -> int:
    """Length of the shortest contiguous run whose sum reaches ``target``, or 0."""
    if target <= 0:
        raise ValueError("target must be positive")
    best: int | None = None
    window = 0
    left = 0
    for right, value in enumerate(nums):
        window += value
        while window >= target:
            length = right - left + 1
            best = length if best is None else min(best, length)
            window -= nums[left]
            left += 1
    return best or 0


def min_window(s: str, t: str) -> str:
    """Shortest substring of ``s`` holding every character of ``t`` with multiplicity."""
    if not t:
        return ""
    need = Counter(t)
    window: Counter[str] = Counter()
    have = 0
    best: tuple[int, int] | None = None
    left = 0
    for right, ch in enumerate(s):
        window[ch] += 1
        if ch in need and window[ch] == need[ch]:
            have += 1
        while have == len(need):
            if best is None or right - left + 1 < best[1] - best[0]:
                best = (left, right + 1)
            out = s[left]
            window[out] -= 1
            if out in need and window[out] < need[out]:
                have -= 1
            left += 1
    return "" if best is None else s[best[0]:best[1]]