"""Small counting puzzles over strings and integer sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable


def distinct_after_pair_removal(s: str) -> int:
    """Count the distinct strings left after deleting two adjacent characters of ``s``."""
    return len({s[:i] + s[i + 2:] for i in range(len(s) - 1)})


def max_fibonacciness(a1: int, a2: int, a4: int, a5: int) -> int:
    """Best count of positions i in 1..3 with a[i+2] == a[i] + a[i+1], choosing a3 freely."""
    candidates = (a5 - a4, a1 + a2, a4 - a2)

    def score(a3: int) -> int:
        return (a1 + a2 == a3) + (a2 + a3 == a4) + (a3 + a4 == a5)

    return max(score(a3) for a3 in candidates)


def min_assignments(values: Iterable[Hashable]) -> int:
    """Number of elements that differ from the most frequent value."""
    counts = Counter(values)
    return sum(counts.values()) - max(counts.values(), default=0)