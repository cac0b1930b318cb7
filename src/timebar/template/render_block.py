# SPDX-License-Identifier: MIT

from timebar.model.render_block import RenderBlock


def get_block_render_template(text: str) -> RenderBlock:
    return {"render_type": "block", "lines": [text]}


def get_space_render_template(text: str) -> RenderBlock:
    return {"render_type": "space", "lines": [text]}


def get_multi_line_block_render_template(lines: list[str]) -> RenderBlock:
    return {"render_type": "multi_line_block", "lines": list(lines)}


def get_multi_line_space_render_template(lines: list[str]) -> RenderBlock:
    return {"render_type": "multi_line_space", "lines": list(lines)}
