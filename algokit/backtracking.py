"""Backtracking puzzles: combinations, keypad words and combination sums."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import combinations, product

_KEYPAD = {
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}


def combine(n: int, k: int) -> list[list[int]]:
    """All ``k``-element combinations of 1..n, in lexicographic order."""
    if k < 0:
        return []
    return [list(combo) for combo in combinations(range(1, n + 1), k)]


def letter_combinations(digits: str) -> list[str]:
    """Every word a phone keypad can spell from ``digits`` (2-9)."""
    if not digits:
        return []
    try:
        groups = [_KEYPAD[d] for d in digits]
    except KeyError as exc:
        raise ValueError(f"digit {exc.args[0]!r} has no letters") from None
    return ["".join(letters) for letters in product(*groups)]


def combination_sum(nums: Iterable[int], target: int) -> list[list[int]]:
    """Non-decreasing combinations of ``nums`` (reuse allowed) that sum to ``target``."""
    candidates = sorted(nums)
    if any(c <= 0 for c in candidates):
        raise ValueError("candidates must be positive")
    result: list[list[int]] = []

    def search(start: int, chosen: list[int], total: int) -> None:
        if total == target:
            result.append(list(chosen))
            return
        for j, value in enumerate(candidates[start:], start):
            if total + value > target:
                return
            chosen.append(value)
            search(j, chosen, total + value)
            chosen.pop()

    search(0, [], 0)
    return result