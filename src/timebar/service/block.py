# SPDX-License-Identifier: MIT

import logging
from typing import Optional

from timebar.error import EmptyError, IntersectionError, NoBoundariesError
from timebar.model.block import Block, BlockTypes, GeometricBlock
from timebar.model.bound import Bound
from timebar.model.interval import Interval
from timebar.service.interval import (
    boundaries as intervals_boundaries,
    floor_cell,
    intersect,
    scale,
    sort_intervals,
    space_between,
    translate,
    usable_intervals,
)
from timebar.template.block import (
    get_geometric_segment_template,
    get_geometric_space_template,
    get_segment_template,
    get_space_template,
)
from timebar.template.interval import get_interval_template

logger = logging.getLogger(__name__)


def build_blocks(
    intervals: list[Interval],
    length: int,
    boundaries: Optional[Bound] = None,
) -> list[Block]:
    """
    Build the space and segment blocks of one non-overlapping group.

    The returned widths always sum to exactly `length`.

    Args:
        intervals: Intervals of a single group (need not be sorted or filtered)
        length: Total width, in characters, of the rendered line
        boundaries: Optional domain the line must cover; when wider than the
            intervals, the line is padded with leading/trailing space

    Returns:
        List of blocks in display order

    Raises:
        EmptyError: No finite, non-empty interval is left after filtering
        IntersectionError: Two consecutive intervals overlap
        NoBoundariesError: The padded blocks have no span to scale
    """
    geometric_blocks = build_geometric_blocks(intervals, length, boundaries)
    widths = block_widths(geometric_blocks, length)

    blocks: list[Block] = []
    for geometric_block, width in zip(geometric_blocks, widths):
        if geometric_block["block_type"] == BlockTypes.SEGMENT:
            blocks.append(
                get_segment_template(width, geometric_block["interval"]["label"])
            )
        else:
            blocks.append(get_space_template(width))

    logger.debug("built blocks with widths %s", widths)
    return blocks


def build_geometric_blocks(
    intervals: list[Interval],
    length: int,
    boundaries: Optional[Bound] = None,
) -> list[GeometricBlock]:
    """Build padded blocks, translated to 0 and scaled to `length`."""
    valid_intervals = sort_intervals(usable_intervals(intervals))
    if len(valid_intervals) == 0:
        raise EmptyError()

    for left, right in zip(valid_intervals, valid_intervals[1:]):
        if intersect(left, right):
            raise IntersectionError(
                left["label"], right["label"], left["bounds"], right["bounds"]
            )

    blocks: list[GeometricBlock] = []
    for i, interval in enumerate(valid_intervals):
        if i > 0:
            blocks.append(
                get_geometric_space_template(
                    space_between(valid_intervals[i - 1], interval)
                )
            )
        blocks.append(get_geometric_segment_template(interval))

    left_padding, right_padding = _padding(
        intervals_boundaries(valid_intervals), boundaries
    )
    if left_padding is not None:
        blocks.insert(0, get_geometric_space_template(left_padding))
    if right_padding is not None:
        blocks.append(get_geometric_space_template(right_padding))

    padded_boundaries = intervals_boundaries([b["interval"] for b in blocks])
    if padded_boundaries is None:
        raise NoBoundariesError()

    min_start, max_end = padded_boundaries
    ratio = length / (max_end - min_start)

    return [
        {
            "block_type": block["block_type"],
            "interval": scale(translate(block["interval"], -min_start), ratio),
        }
        for block in blocks
    ]


def block_widths(blocks: list[GeometricBlock], length: int) -> list[int]:
    """
    Convert scaled, contiguous blocks into integer widths summing to `length`.

    Each block's left edge is floored onto the character grid and the last edge
    is pinned to `length`, so any rounding remainder goes to the last block.
    """
    edges: list[int] = [
        min(max(floor_cell(block["interval"]["bounds"][0]), 0), length)
        for block in blocks
    ]
    edges.append(length)

    # Blocks are contiguous and sorted, so edges never decrease
    return [edges[i + 1] - edges[i] for i in range(len(blocks))]


def _padding(
    own_boundaries: Optional[Bound],
    boundaries: Optional[Bound],
) -> tuple[Optional[Interval], Optional[Interval]]:
    if own_boundaries is None or boundaries is None:
        return None, None

    own_start, own_end = own_boundaries
    start, end = boundaries

    left = get_interval_template((start, own_start)) if start < own_start else None
    right = get_interval_template((own_end, end)) if own_end < end else None
    return left, right
