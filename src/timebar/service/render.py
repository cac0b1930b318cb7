# SPDX-License-Identifier: MIT

import logging
import math
from typing import Any, Callable, Iterable, Optional, TypeVar

from timebar.error import ConfigurationError, EmptyError
from timebar.model.bound import Bound
from timebar.model.interval import Interval
from timebar.model.render_block import BlockRenderer
from timebar.service.block import build_blocks
from timebar.service.compose import compose_lines
from timebar.service.interval import (
    boundaries as intervals_boundaries,
    normalize,
    sort_intervals,
    union,
    usable_intervals,
)
from timebar.service.overlap import split_overlapping
from timebar.template.interval import get_interval_template
from timebar.view.renderers import render_default

logger = logging.getLogger(__name__)

T = TypeVar("T")

# ~ terminal width
DEFAULT_LENGTH = 90


def render(
    items: Iterable[T],
    bounds_of: Callable[[T], Bound],
    label_of: Optional[Callable[[T], Optional[Any]]] = None,
    length: int = DEFAULT_LENGTH,
    boundaries: Optional[Bound] = None,
    renderer: BlockRenderer = render_default,
) -> list[list[str]]:
    """
    Render arbitrary items as one or more timeline bars.

    Items whose bounds are not finite, or whose span is shorter than the
    comparison tolerance, are dropped. Overlapping items are split into separate
    bars, all drawn against the same domain so their columns line up.

    Args:
        items: Data to render
        bounds_of: Returns the (start, end) of an item
        label_of: Returns the optional label of an item (defaults to no label)
        length: Width, in characters, of every line
        boundaries: Optional domain to draw; widened to cover every item
        renderer: Turns one block into text

    Returns:
        One list of lines per bar, in bar order

    Raises:
        EmptyError: No item is left to render
        IntersectionError: A bar holds two overlapping items
        NoBoundariesError: A bar has no span to scale
        ConfigurationError: `length` or `boundaries` is invalid
    """
    intervals = [
        get_interval_template(
            bounds_of(item), label_of(item) if label_of is not None else None
        )
        for item in items
    ]
    return render_interval_list(intervals, length, boundaries, renderer)


def render_intervals(
    bounds: Iterable[Bound],
    length: int = DEFAULT_LENGTH,
    boundaries: Optional[Bound] = None,
    renderer: BlockRenderer = render_default,
) -> list[list[str]]:
    """Render plain (start, end) pairs, without labels."""
    return render(bounds, lambda bound: bound, None, length, boundaries, renderer)


def render_text(
    items: Iterable[T],
    bounds_of: Callable[[T], Bound],
    label_of: Optional[Callable[[T], Optional[Any]]] = None,
    length: int = DEFAULT_LENGTH,
    boundaries: Optional[Bound] = None,
    renderer: BlockRenderer = render_default,
) -> str:
    """Render items and join every line of every bar with newlines."""
    groups = render(items, bounds_of, label_of, length, boundaries, renderer)
    return "\n".join(line for lines in groups for line in lines)


def render_interval_list(
    intervals: list[Interval],
    length: int = DEFAULT_LENGTH,
    boundaries: Optional[Bound] = None,
    renderer: BlockRenderer = render_default,
) -> list[list[str]]:
    _validate_length(length)
    if boundaries is not None:
        boundaries = _validate_boundaries(boundaries)

    valid_intervals = usable_intervals(intervals)
    dropped = len(intervals) - len(valid_intervals)
    if dropped > 0:
        logger.debug("dropped %d non-finite or empty intervals", dropped)
    if len(valid_intervals) == 0:
        raise EmptyError()

    sorted_intervals = sort_intervals(valid_intervals)

    domain = intervals_boundaries(sorted_intervals)
    if domain is not None and boundaries is not None:
        domain = union(domain, boundaries)

    rendered: list[list[str]] = []
    for group in split_overlapping(sorted_intervals):
        blocks = build_blocks(group, length, domain)
        rendered.append(compose_lines(blocks, renderer))
    return rendered


def _validate_length(length: int) -> None:
    if isinstance(length, bool) or not isinstance(length, int):
        raise ConfigurationError(f"length must be an integer, got {length!r}")
    if length < 0:
        raise ConfigurationError(f"length must not be negative, got {length}")


def _validate_boundaries(boundaries: Bound) -> Bound:
    try:
        start, end = float(boundaries[0]), float(boundaries[1])
    except (TypeError, ValueError, IndexError) as e:
        raise ConfigurationError(f"invalid boundaries {boundaries!r}: {e}") from e
    if not (math.isfinite(start) and math.isfinite(end)):
        raise ConfigurationError(f"boundaries must be finite, got {boundaries!r}")
    return normalize((start, end))
