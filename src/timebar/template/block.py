# SPDX-License-Identifier: MIT

from typing import Any, Optional

from timebar.model.block import GeometricBlock, SegmentBlock, SpaceBlock
from timebar.model.interval import Interval


def get_space_template(width: int) -> SpaceBlock:
    return {
        "block_type": "space",
        "width": width,
    }


def get_segment_template(width: int, label: Optional[Any] = None) -> SegmentBlock:
    return {
        "block_type": "segment",
        "width": width,
        "label": label,
    }


def get_geometric_space_template(interval: Interval) -> GeometricBlock:
    return {
        "block_type": "space",
        "interval": interval,
    }


def get_geometric_segment_template(interval: Interval) -> GeometricBlock:
    return {
        "block_type": "segment",
        "interval": interval,
    }
