# SPDX-License-Identifier: MIT

from typing import Any, Literal, Optional, TypedDict, Union

from timebar.model.interval import Interval

BlockType = Literal["space", "segment"]


class BlockTypes:
    SPACE = "space"
    SEGMENT = "segment"


class SpaceBlock(TypedDict):
    block_type: Literal["space"]
    width: int


class SegmentBlock(TypedDict):
    block_type: Literal["segment"]
    width: int
    label: Optional[Any]


Block = Union[SpaceBlock, SegmentBlock]


class GeometricBlock(TypedDict):
    """A block that still carries its float geometry, before sizing."""

    block_type: BlockType
    interval: Interval
