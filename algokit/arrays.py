"""Array puzzles: greedy sweeps, binary searches and two-pointer scans."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def min_candies(ratings: Sequence[int]) -> int:
    """Fewest candies so that each child gets one and beats lower-rated neighbours."""
    candies = [1] * len(ratings)
    for i in range(1, len(ratings)):
        if ratings[i] > ratings[i - 1]:
            candies[i] = candies[i - 1] + 1
    for i in range(len(ratings) - 2, -1, -1):
        if ratings[i] > ratings[i + 1]:
            candies[i] = max(candies[i], candies[i + 1] + 1)
    return sum(candies)


def can_complete_circuit(gas: Sequence[int], cost: Sequence[int]) -> int:
    """Index of the station from which the whole circuit can be driven, or -1."""
    if len(gas) != len(cost):
        raise ValueError("gas and cost must have the same length")
    if sum(gas) < sum(cost):
        return -1
    tank = 0
    start = 0
    for i, (fuel, spend) in enumerate(zip(gas, cost)):
        tank += fuel - spend
        if tank < 0:
            tank = 0
            start = i + 1
    return start


def h_index(citations: Sequence[int]) -> int:
    """Largest h such that h papers have at least h citations each."""
    if any(c < 0 for c in citations):
        raise ValueError("citation counts must be non-negative")
    n = len(citations)
    buckets = Counter(min(c, n) for c in citations)
    h = n
    papers = buckets[n]
    while papers < h:
        h -= 1
        papers += buckets[h]
    return h


def find_min_rotated(nums: Sequence[int]) -> int:
    """Smallest element of a rotated sorted sequence of distinct values."""
    if not nums:
        raise ValueError("sequence is empty")
    lo, hi = 0, len(nums) - 1
    while lo < hi:
        mid = lo + (hi - lo) // 2
        if nums[mid] < nums[hi]:
            hi = mid
        else:
            lo = mid + 1
    return nums[lo]


def find_peak(nums: Sequence[int]) -> int:
    """Value of an element strictly greater than its neighbours, found by binary search.

    Raises ValueError when the sequence is empty or the search meets no strict peak.
    """
    n = len(nums)
    if n == 0:
        raise ValueError("sequence is empty")
    if n == 1:
        return nums[0]
    lo, hi = 0, n - 1
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        above_left = mid == 0 or nums[mid] > nums[mid - 1]
        above_right = mid == n - 1 or nums[mid] > nums[mid + 1]
        if above_left and above_right:
            return nums[mid]
        if mid > 0 and nums[mid - 1] > nums[mid]:
            hi = mid - 1
        else:
            lo = mid + 1
    raise ValueError("no strict peak found")


def remove_element(nums: list[int], val: int) -> int:
    """Remove every ``val`` from ``nums`` in place, keeping order; return the new length."""
    nums[:] = [x for x in nums if x != val]
    return len(nums)


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a rotated sorted sequence of distinct values, or -1."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] == target:
            return mid
        if nums[lo] <= nums[mid]:
            if target > nums[mid] or target < nums[lo]:
                lo = mid + 1
            else:
                hi = mid - 1
        else:
            if target < nums[mid] or target > nums[hi]:
                hi = mid - 1
            else:
                lo = mid + 1
    return -1


def search_insert(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in sorted ``nums``, or where it would be inserted."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] > target:
            hi = mid - 1
        else:
            lo = mid + 1
    return lo


def max_area(heights: Sequence[int]) -> int:
    """Largest water area held between two of the given vertical lines."""
    left, right = 0, len(heights) - 1
    best = 0
    while left < right:
        best = max(best, (right - left) * min(heights[left], heights[right]))
        if heights[left] < heights[right]:
            left += 1
        else:
            right -= 1
    return best