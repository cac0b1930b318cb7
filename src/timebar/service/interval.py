# SPDX-License-Identifier: MIT

import math
from typing import Optional

from timebar.model.bound import Bound
from timebar.model.interval import Interval
from timebar.template.interval import get_interval_template

# Smaller than 1/8 of a character cell
EPSILON = 0.1

# Absorbs float noise like 2.9999999999 when flooring scaled positions
ROUNDING_TOLERANCE = 1e-9


def normalize(bounds: Bound) -> Bound:
    start, end = bounds
    if end < start:
        return (end, start)
    return (start, end)


def is_close(a: float, b: float) -> bool:
    return abs(a - b) < EPSILON


def intervals_equal(left: Interval, right: Interval) -> bool:
    """Compare two intervals endpoint by endpoint, within EPSILON."""
    left_start, left_end = left["bounds"]
    right_start, right_end = right["bounds"]
    return is_close(left_start, right_start) and is_close(left_end, right_end)


def is_empty(interval: Interval) -> bool:
    start, end = interval["bounds"]
    return is_close(start, end)


def is_finite(interval: Interval) -> bool:
    start, end = interval["bounds"]
    return math.isfinite(start) and math.isfinite(end)


def intersect(left: Interval, right: Interval) -> bool:
    """
    Check whether right starts inside left.

    Both intervals are expected to be sorted by start. Equal starts count as an
    intersection, touching at left's end does not.
    """
    left_start, left_end = left["bounds"]
    right_start, _ = right["bounds"]
    return left_start <= right_start < left_end


def size(interval: Interval) -> int:
    start, end = interval["bounds"]
    return max(0, floor_cell(end) - floor_cell(start))


def floor_cell(position: float) -> int:
    return math.floor(position + ROUNDING_TOLERANCE)


def translate(interval: Interval, offset: float) -> Interval:
    start, end = interval["bounds"]
    return get_interval_template((start + offset, end + offset), interval["label"])


def scale(interval: Interval, ratio: float) -> Interval:
    start, end = interval["bounds"]
    return get_interval_template((start * ratio, end * ratio), interval["label"])


def boundaries(intervals: list[Interval]) -> Optional[Bound]:
    result: Optional[Bound] = None
    for interval in intervals:
        if result is None:
            result = interval["bounds"]
        else:
            result = union(result, interval["bounds"])
    return result


def union(bound: Bound, other: Bound) -> Bound:
    return (min(bound[0], other[0]), max(bound[1], other[1]))


def space_between(left: Interval, right: Interval) -> Interval:
    return get_interval_template((left["bounds"][1], right["bounds"][0]))


def usable_intervals(intervals: list[Interval]) -> list[Interval]:
    """Keep finite, non-empty intervals, in input order."""
    return [
        interval
        for interval in intervals
        if is_finite(interval) and not is_empty(interval)
    ]


def sort_intervals(intervals: list[Interval]) -> list[Interval]:
    # sorted() is stable: equal starts keep their input order
    return sorted(intervals, key=lambda interval: interval["bounds"][0])
