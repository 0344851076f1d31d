import pytest

from algokit.intervals import (
    Interval,
    can_attend_meetings,
    merge_intervals,
    min_meeting_rooms,
    summary_ranges,
)


def test_attend_disjoint_in_any_order():
    meetings = [Interval(7, 10), Interval(2, 4), Interval(4, 6)]
    assert can_attend_meetings(meetings)
    assert can_attend_meetings(list(reversed(meetings)))


def test_attend_overlap():
    assert not can_attend_meetings([Interval(0, 30), Interval(5, 10)])


def test_attend_empty():
    assert can_attend_meetings([])


def test_rooms_example():
    meetings = [Interval(0, 30), Interval(5, 10), Interval(15, 20)]
    assert min_meeting_rooms(meetings) == 2


def test_rooms_empty():
    assert min_meeting_rooms([]) == 0


def test_rooms_identical():
    meetings = [Interval(1, 5)] * 4
    assert min_meeting_rooms(meetings) == len(meetings)


def test_rooms_back_to_back_need_one():
    meetings = [Interval(1, 2), Interval(2, 3), Interval(3, 4)]
    assert min_meeting_rooms(meetings) == min_meeting_rooms(meetings[:1])


def test_rooms_agree_with_attend():
    meetings = [Interval(3, 9), Interval(1, 2), Interval(9, 11)]
    assert can_attend_meetings(meetings) == (min_meeting_rooms(meetings) <= 1)


def test_merge_example():
    assert merge_intervals([[1, 3], [2, 6], [8, 10], [15, 18]]) == [[1, 6], [8, 10], [15, 18]]


def test_merge_touching():
    assert merge_intervals([[4, 5], [1, 4]]) == [[1, 5]]


def test_merge_empty():
    assert len(merge_intervals([])) == 0


def test_merge_invariants():
    data = [[5, 9], [1, 2], [8, 12], [3, 4], [2, 3], [20, 21]]
    merged = merge_intervals(data)
    assert merged == sorted(merged)
    for (_, end), (start, _) in zip(merged, merged[1:]):
        assert end < start
    assert merge_intervals(merged) == merged
    assert data[0] == [5, 9]


def test_summary_example():
    assert summary_ranges([0, 1, 2, 4, 5, 7]) == ["0->2", "4->5", "7"]


def test_summary_empty_and_single():
    assert len(summary_ranges([])) == 0
    assert summary_ranges([5]) == ["5"]


@pytest.mark.parametrize("nums", [[-3, -2, -1, 4, 6, 7], [1, 3, 5], list(range(10))])
def test_summary_round_trip(nums):
    expanded = []
    for part in summary_ranges(nums):
        low, _, high = part.partition("->")
        expanded.extend(range(int(low), int(high or low) + 1))
    assert expanded == nums