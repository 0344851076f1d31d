"""Interval puzzles: meeting rooms, merging and range summaries."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from operator import attrgetter, itemgetter


@dataclass(frozen=True)
class Interval:
    """A half-open span of time from ``start`` to ``end``."""

    start: int
    end: int


def can_attend_meetings(intervals: Iterable[Interval]) -> bool:
    """True if no two meetings overlap."""
    ordered = sorted(intervals, key=attrgetter("start"))
    return all(cur.start >= prev.end for prev, cur in zip(ordered, ordered[1:]))


def min_meeting_rooms(intervals: Iterable[Interval]) -> int:
    """Fewest rooms needed to hold every meeting."""
    meetings = list(intervals)
    starts = sorted(m.start for m in meetings)
    ends = sorted(m.end for m in meetings)
    rooms = best = 0
    finished = 0
    for start in starts:
        while finished < len(ends) and ends[finished] <= start:
            finished += 1
            rooms -= 1
        rooms += 1
        best = max(best, rooms)
    return best


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping ``[start, end]`` pairs into a sorted list of pairs."""
    merged: list[list[int]] = []
    for start, end in sorted((tuple(p) for p in intervals), key=itemgetter(0)):
        if merged and start <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged


def summary_ranges(nums: Iterable[int]) -> list[str]:
    """Describe runs of consecutive integers as ``"a->b"`` or ``"a"``."""
    runs: list[list[int]] = []
    for value in nums:
        if runs and value == runs[-1][1] + 1:
            runs[-1][1] = value
        else:
            runs.append([value, value])
    return [f"{a}->{b}" if b != a else str(a) for a, b in runs]