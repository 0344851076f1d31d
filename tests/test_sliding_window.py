from collections import Counter

import pytest

from algokit.sliding_window import character_replacement, min_subarray_len, min_window


def test_replacement_whole_string():
    s = "ABAB"
    assert character_replacement(s, 2) == len(s)
    assert character_replacement(s, len(s)) == len(s)


def test_replacement_example():
    assert character_replacement("AABABBA", 1) == 4


def test_replacement_bounds():
    s = "ABCCDDDCCBA"
    for k in range(4):
        result = character_replacement(s, k)
        assert max(Counter(s).values()) >= 1
        assert min(len(s), k + 1) <= result <= len(s)
        assert result <= character_replacement(s, k + 1)


def test_replacement_empty():
    assert character_replacement("", 3) == 0


def test_replacement_negative_k():
    with pytest.raises(ValueError):
        character_replacement("AB", -1)


def test_subarray_example():
    assert min_subarray_len(7, [2, 3, 1, 2, 4, 3]) == 2


def test_subarray_unreachable():
    nums = [1, 1, 1]
    assert min_subarray_len(sum(nums) + 1, nums) == 0


def test_subarray_whole_sequence():
    nums = [1, 2, 3, 4]
    assert min_subarray_len(sum(nums), nums) == len(nums)


def test_subarray_single_element():
    nums = [1, 9, 1]
    assert min_subarray_len(max(nums), nums) == 1


def test_subarray_rejects_non_positive_target():
    with pytest.raises(ValueError):
        min_subarray_len(0, [1, 2])


def test_window_example():
    assert min_window("ADOBECODEBANC", "ABC") == "BANC"


def test_window_empty_target():
    assert min_window("abc", "") == ""


def test_window_equal_strings():
    assert min_window("a", "a") == "a"


def test_window_not_found():
    assert min_window("a", "aa") == ""


def test_window_contains_target():
    s, t = "xyzzyxaabzyx", "zxy"
    result = min_window(s, t)
    assert result in s
    assert not Counter(t) - Counter(result)
    assert len(result) >= len(t)