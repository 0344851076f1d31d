import bisect

import pytest

from algokit.arrays import (
    can_complete_circuit,
    find_min_rotated,
    find_peak,
    h_index,
    max_area,
    min_candies,
    remove_element,
    search_insert,
    search_rotated,
)


def test_min_candies_small_case():
    assert min_candies([1, 0, 2]) == 5


def test_min_candies_equal_ratings_get_one_each():
    ratings = [5, 5, 5, 5]
    assert min_candies(ratings) == len(ratings)


def test_min_candies_empty():
    assert min_candies([]) == 0


@pytest.mark.parametrize("ratings", [[1, 2, 2], [3, 1, 4, 1, 5, 9, 2, 6], [1, 3, 2, 2, 1]])
def test_min_candies_symmetric_and_bounded(ratings):
    total = min_candies(ratings)
    assert total == min_candies(ratings[::-1])
    assert total >= len(ratings)


def _drive(gas, cost, start):
    tank = 0
    n = len(gas)
    for k in range(n):
        i = (start + k) % n
        tank += gas[i] - cost[i]
        if tank < 0:
            return False
    return True


@pytest.mark.parametrize(
    "gas, cost",
    [([1, 2, 3, 4, 5], [3, 4, 5, 1, 2]), ([5, 1, 2, 3, 4], [4, 4, 1, 5, 1]), ([2], [2])],
)
def test_can_complete_circuit_start_works(gas, cost):
    start = can_complete_circuit(gas, cost)
    assert 0 <= start < len(gas)
    assert _drive(gas, cost, start)


def test_can_complete_circuit_not_enough_gas():
    assert can_complete_circuit([2, 3, 4], [3, 4, 3]) == -1


def test_can_complete_circuit_length_mismatch():
    with pytest.raises(ValueError):
        can_complete_circuit([1, 2], [1])


@pytest.mark.parametrize("citations", [[3, 0, 6, 1, 5], [1, 3, 1], [100], [0, 0], [10, 10, 10]])
def test_h_index_definition(citations):
    h = h_index(citations)
    assert sum(c >= h for c in citations) >= h
    assert sum(c >= h + 1 for c in citations) < h + 1


def test_h_index_empty():
    assert h_index([]) == 0


def test_h_index_negative_rejected():
    with pytest.raises(ValueError):
        h_index([1, -1])


@pytest.mark.parametrize("shift", range(7))
def test_find_min_rotated_matches_min(shift):
    base = [0, 1, 2, 4, 5, 6, 7]
    nums = base[shift:] + base[:shift]
    assert find_min_rotated(nums) == min(nums)


def test_find_min_rotated_empty():
    with pytest.raises(ValueError):
        find_min_rotated([])


def test_find_peak_worked_example():
    assert find_peak([1, 3, 6, 2, 1, 0]) == 6


@pytest.mark.parametrize("nums", [[1, 2, 3], [3, 2, 1], [1, 5, 2, 8, 3], [4, 9, 1, 7, 2, 6]])
def test_find_peak_is_strict_peak(nums):
    value = find_peak(nums)
    i = nums.index(value)
    assert i == 0 or nums[i] > nums[i - 1]
    assert i == len(nums) - 1 or nums[i] > nums[i + 1]


def test_find_peak_single():
    assert find_peak([42]) == 42


def test_find_peak_errors():
    with pytest.raises(ValueError):
        find_peak([])
    with pytest.raises(ValueError):
        find_peak([2, 2])


def test_remove_element_in_place():
    nums = [0, 1, 2, 2, 3, 0, 4, 2]
    original = list(nums)
    k = remove_element(nums, 2)
    assert k == len(nums)
    assert 2 not in nums
    assert k == len(original) - original.count(2)
    remaining = iter(original)
    assert all(x in remaining for x in nums)


def test_remove_element_absent_value():
    nums = [1, 3, 5]
    assert remove_element(nums, 9) == 3
    assert nums == [1, 3, 5]


@pytest.mark.parametrize("target", [4, 5, 6, 7, 0, 1, 2])
def test_search_rotated_found(target):
    nums = [4, 5, 6, 7, 0, 1, 2]
    idx = search_rotated(nums, target)
    assert nums[idx] == target


@pytest.mark.parametrize("nums, target", [([4, 5, 6, 7, 0, 1, 2], 3), ([1], 0), ([], 5)])
def test_search_rotated_missing(nums, target):
    assert search_rotated(nums, target) == -1


@pytest.mark.parametrize("target", [-1, 0, 1, 2, 3, 5, 6, 7, 8])
def test_search_insert_matches_bisect(target):
    nums = [1, 3, 5, 6]
    assert search_insert(nums, target) == bisect.bisect_left(nums, target)


def test_max_area_known_case():
    assert max_area([1, 8, 6, 2, 5, 4, 8, 3, 7]) == 49


@pytest.mark.parametrize("heights", [[1, 1], [4, 3, 2, 1, 4], [1, 2, 1], [2, 3, 10, 5, 7, 8, 9]])
def test_max_area_is_maximum(heights):
    best = max_area(heights)
    areas = [
        (j - i) * min(heights[i], heights[j])
        for i in range(len(heights))
        for j in range(i + 1, len(heights))
    ]
    assert best in areas
    assert all(a <= best for a in areas)


def test_max_area_too_few_lines():
    assert max_area([]) == 0
    assert max_area([7]) == 0