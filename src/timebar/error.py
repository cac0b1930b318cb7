# SPDX-License-Identifier: MIT

from typing import Any, Optional

from timebar.model.bound import Bound


class TimebarError(Exception):
    """Base class for every error raised while rendering a timeline."""


class NoBoundariesError(TimebarError):
    def __init__(self) -> None:
        super().__init__("no boundaries")


class EmptyError(TimebarError):
    def __init__(self) -> None:
        super().__init__("no finite, non-empty interval to render")


class IntersectionError(TimebarError):
    """Two intervals of a supposedly non-overlapping set overlap."""

    def __init__(
        self,
        left_label: Optional[Any],
        right_label: Optional[Any],
        left_bounds: Optional[Bound] = None,
        right_bounds: Optional[Bound] = None,
    ) -> None:
        self.left_label = left_label
        self.right_label = right_label
        self.left_bounds = left_bounds
        self.right_bounds = right_bounds
        super().__init__(
            f"{left_label!r} {left_bounds} intersects {right_label!r} {right_bounds}"
        )


class ConfigurationError(TimebarError, ValueError):
    pass
