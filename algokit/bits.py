"""Bit manipulation puzzles on 32-bit integers."""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce
from operator import xor

_WIDTH = 32
_MASK = (1 << _WIDTH) - 1
_SIGN = 1 << (_WIDTH - 1)


def _to_signed32(value: int) -> int:
    value &= _MASK
    return value - (1 << _WIDTH) if value & _SIGN else value


def range_bitwise_and(left: int, right: int) -> int:
    """Bitwise AND of every integer from ``left`` to ``right`` inclusive."""
    shift = 0
    while left != right:
        left >>= 1
        right >>= 1
        shift += 1
    return left << shift


def count_bits(n: int) -> list[int]:
    """Number of set bits of every integer from 0 to ``n``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    counts = [0] * (n + 1)
    for i in range(1, n + 1):
        counts[i] = counts[i >> 1] + (i & 1)
    return counts


def hamming_weight(n: int) -> int:
    """Number of set bits in the 32-bit two's complement form of ``n``."""
    return bin(n & _MASK).count("1")


def reverse_bits(n: int) -> int:
    """The 32 bits of ``n`` in reverse order, read as a signed 32-bit integer."""
    bits = format(n & _MASK, f"0{_WIDTH}b")
    return _to_signed32(int(bits[::-1], 2))


def single_number(nums: Iterable[int]) -> int:
    """The value that appears once when every other value appears twice."""
    return reduce(xor, nums, 0)


def single_number_ii(nums: Iterable[int]) -> int:
    """The value that appears once when every other value appears three times."""
    values = list(nums)
    result = 0
    for bit in range(_WIDTH):
        ones = sum(n >> bit & 1 for n in values)
        result |= (ones % 3) << bit
    return _to_signed32(result)