from __future__ import annotations

from timebar.model.bound import Bound
from timebar.model.interval import Interval
from timebar.service.interval import intersect, sort_intervals
from timebar.service.overlap import split_overlapping
from timebar.template.interval import get_interval_template


def _intervals(bounds: list[Bound]) -> list[Interval]:
    return sort_intervals([get_interval_template(b, b) for b in bounds])


def _labels(groups: list[list[Interval]]) -> list[list[object]]:
    return [[interval["label"] for interval in group] for group in groups]


def test_empty_input_has_no_groups() -> None:
    assert split_overlapping([]) == []


def test_single_interval_is_one_group() -> None:
    assert len(split_overlapping(_intervals([(0.0, 1.0)]))) == 1


def test_overlapping_pair_is_split() -> None:
    groups = split_overlapping(_intervals([(0.0, 1.0), (0.5, 1.5)]))
    assert len(groups) == 2


def test_disjoint_pair_stays_together() -> None:
    groups = split_overlapping(_intervals([(0.0, 1.0), (1.5, 2.5)]))
    assert _labels(groups) == [[(0.0, 1.0), (1.5, 2.5)]]


def test_touching_intervals_stay_together() -> None:
    groups = split_overlapping(_intervals([(0.0, 1.0), (1.0, 2.0)]))
    assert len(groups) == 1


def test_groups_are_placed_from_the_last_interval() -> None:
    groups = split_overlapping(_intervals([(0.0, 2.0), (1.0, 4.0)]))
    assert _labels(groups) == [[(1.0, 4.0)], [(0.0, 2.0)]]

    groups = split_overlapping(_intervals([(0.0, 3.0), (1.0, 2.0), (4.0, 5.0)]))
    assert _labels(groups) == [[(1.0, 2.0), (4.0, 5.0)], [(0.0, 3.0)]]


def test_equal_starts_never_share_a_group() -> None:
    groups = split_overlapping(_intervals([(0.0, 1.0), (0.0, 2.0), (0.0, 3.0)]))
    assert len(groups) == 3


def test_groups_are_sorted_and_non_overlapping() -> None:
    bounds: list[Bound] = [
        (0.0, 5.0),
        (1.0, 2.0),
        (1.5, 3.0),
        (2.0, 2.5),
        (3.0, 4.0),
        (4.5, 9.0),
        (6.0, 7.0),
        (6.5, 8.0),
        (8.0, 8.5),
    ]
    intervals = _intervals(bounds)
    groups = split_overlapping(intervals)

    assert sum(len(group) for group in groups) == len(bounds)
    for group in groups:
        assert group == sort_intervals(group)
        for left, right in zip(group, group[1:]):
            assert not intersect(left, right)


def test_split_is_reproducible() -> None:
    bounds: list[Bound] = [(0.0, 4.0), (1.0, 2.0), (1.0, 3.0), (2.5, 6.0), (5.0, 7.0)]
    first = split_overlapping(_intervals(bounds))
    second = split_overlapping(_intervals(bounds))
    assert _labels(first) == _labels(second)
