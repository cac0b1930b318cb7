# SPDX-License-Identifier: MIT

from timebar.model.block import Block
from timebar.model.render_block import (
    SINGLE_LINE_RENDER_TYPES,
    BlockRenderer,
    RenderBlock,
)
from timebar.template.block import get_space_template


def compose_lines(blocks: list[Block], renderer: BlockRenderer) -> list[str]:
    """
    Render every block and assemble the results into full-width lines.

    Blocks may render to a different number of lines. Shorter columns are padded
    at the bottom with the renderer's own rendering of a space of the same width,
    then the columns are transposed into rows.

    Args:
        blocks: Blocks in display order
        renderer: Callable turning one block into a RenderBlock

    Returns:
        Lines of text, top to bottom; empty when there are no blocks
    """
    rendered: list[RenderBlock] = [renderer(block) for block in blocks]
    max_lines = max((len(render_block["lines"]) for render_block in rendered), default=0)

    columns: list[list[str]] = []
    for block, render_block in zip(blocks, rendered):
        column = list(render_block["lines"])
        if len(column) < max_lines:
            filler = _filler_line(block["width"], renderer)
            column.extend([filler] * (max_lines - len(column)))
        columns.append(column)

    return ["".join(column[row] for column in columns) for row in range(max_lines)]


def _filler_line(width: int, renderer: BlockRenderer) -> str:
    render_block = renderer(get_space_template(width))
    if render_block["render_type"] in SINGLE_LINE_RENDER_TYPES and len(
        render_block["lines"]
    ) == 1:
        return render_block["lines"][0]
    return " " * width
