"""Dynamic programming puzzles: stair climbing and house robbing."""

from __future__ import annotations

from collections.abc import Iterable


def climb_stairs(n: int) -> int:
    """Number of ways to climb ``n`` stairs taking one or two at a time."""
    if n <= 2:
        return n
    one_back, current = 1, 2
    for _ in range(n - 2):
        one_back, current = current, one_back + current
    return current


def rob(nums: Iterable[int]) -> int:
    """Largest total of houses robbed in a row with no two adjacent."""
    values = list(nums)
    if not values:
        return 0
    if len(values) == 1:
        return values[0]
    prev, best = values[0], max(values[0], values[1])
    for value in values[2:]:
        prev, best = best, max(best, value + prev)
    return best


def rob_circular(nums: Iterable[int]) -> int:
    """Like :func:`rob`, but the first and last houses are neighbours."""
    values = list(nums)
    if len(values) == 1:
        return values[0]
    return max(rob(values[1:]), rob(values[:-1]))