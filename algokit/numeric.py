"""Integer and floating-point arithmetic puzzles."""

from __future__ import annotations

from collections.abc import Sequence


def is_palindrome_number(x: int) -> bool:
    """True if the decimal digits of ``x`` read the same both ways; negatives never do."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def plus_one(digits: Sequence[int]) -> list[int]:
    """Digits of the number one greater than the one whose digits are given."""
    head = list(digits)
    nines = 0
    while head and head[-1] == 9:
        head.pop()
        nines += 1
    if head:
        head[-1] += 1
        return head + [0] * nines
    return ([1] if nines else []) + [0] * nines


def my_pow(base: float, power: int) -> float:
    """``base`` raised to the integer ``power`` by repeated squaring."""
    if power == 0:
        return 1.0
    result = 1.0
    exponent = power
    if exponent < 0:
        base = 1 / base
        exponent = -exponent
    while exponent:
        if exponent % 2 == 0:
            base *= base
            exponent //= 2
        else:
            result *= base
            exponent -= 1
    return result


def int_sqrt(x: int) -> int:
    """Largest integer whose square does not exceed ``x``."""
    if x < 0:
        raise ValueError("x must be non-negative")
    if x < 2:
        return x
    lo, hi = 1, x
    answer = 0
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if mid * mid <= x:
            answer = mid
            lo = mid + 1
        else:
            hi = mid - 1
    return answer