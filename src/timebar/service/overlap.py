# SPDX-License-Identifier: MIT

import logging

from timebar.model.interval import Interval
from timebar.service.interval import intersect

logger = logging.getLogger(__name__)


def split_overlapping(sorted_intervals: list[Interval]) -> list[list[Interval]]:
    """
    Split intervals sorted by start into groups of non-overlapping intervals.

    Intervals are placed from the last to the first. Each one is prepended to the
    first group whose current earliest member it does not intersect; when no group
    accepts it, a new group is appended. Since placement walks backwards through a
    sorted list, every group stays sorted by start.

    This is a first-fit packing, not an optimal colouring: it guarantees that no
    group holds two overlapping intervals and that the grouping is reproducible
    for a given input.

    Args:
        sorted_intervals: Intervals sorted by start bound

    Returns:
        List of groups, each a list of intervals sorted by start
    """
    groups: list[list[Interval]] = []

    for interval in reversed(sorted_intervals):
        for group in groups:
            if not intersect(interval, group[0]):
                group.insert(0, interval)
                break
        else:
            groups.append([interval])

    logger.debug(
        "split %d intervals into %d groups", len(sorted_intervals), len(groups)
    )
    return groups
