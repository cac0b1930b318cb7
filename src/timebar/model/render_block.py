# SPDX-License-Identifier: MIT

from typing import Callable, Literal, TypedDict

from timebar.model.block import Block

RenderBlockType = Literal["block", "space", "multi_line_block", "multi_line_space"]

SINGLE_LINE_RENDER_TYPES: tuple[RenderBlockType, ...] = ("block", "space")


class RenderBlock(TypedDict):
    render_type: RenderBlockType
    lines: list[str]


BlockRenderer = Callable[[Block], RenderBlock]
