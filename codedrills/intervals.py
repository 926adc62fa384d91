"""Interval drills."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def find_min_arrow_shots(points: Iterable[Sequence[int]]) -> int:
    """Fewest vertical arrows that burst every balloon [start, end]."""
    groups: list[list[int]] = []
    for start, end in sorted(tuple(point) for point in points):
        if groups and groups[-1][0] <= start <= groups[-1][1]:
            shared = groups[-1]
            shared[0] = max(start, shared[0])
            shared[1] = min(end, shared[1])
        else:
            groups.append([start, end])
    return len(groups)


def erase_overlap_intervals(intervals: Iterable[Sequence[int]]) -> int:
    """Fewest intervals to remove so the rest do not overlap.

    Intervals that only touch at an end do not overlap. Raises ValueError
    when there are no intervals.
    """
    ordered = sorted(tuple(interval) for interval in intervals)
    if not ordered:
        raise ValueError("no intervals given")
    removed = 0
    _, current_end = ordered[0]
    for start, end in ordered[1:]:
        if start < current_end:
            removed += 1
            current_end = min(current_end, end)
        else:
            current_end = end
    return removed