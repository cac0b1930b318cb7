# SPDX-License-Identifier: MIT

from timebar.error import (
    ConfigurationError,
    EmptyError,
    IntersectionError,
    NoBoundariesError,
    TimebarError,
)
from timebar.model.block import Block, SegmentBlock, SpaceBlock
from timebar.model.bound import Bound
from timebar.model.interval import Interval
from timebar.model.render_block import BlockRenderer, RenderBlock
from timebar.service.block import build_blocks
from timebar.service.compose import compose_lines
from timebar.service.overlap import split_overlapping
from timebar.service.render import (
    DEFAULT_LENGTH,
    render,
    render_interval_list,
    render_intervals,
    render_text,
)
from timebar.template.interval import get_interval_template
from timebar.view.renderers import (
    make_char_renderer,
    make_labeled_renderer,
    make_multiline_renderer,
    make_styled_renderer,
    render_default,
    render_labeled,
)

__all__ = [
    "Block",
    "BlockRenderer",
    "Bound",
    "ConfigurationError",
    "DEFAULT_LENGTH",
    "EmptyError",
    "Interval",
    "IntersectionError",
    "NoBoundariesError",
    "RenderBlock",
    "SegmentBlock",
    "SpaceBlock",
    "TimebarError",
    "build_blocks",
    "compose_lines",
    "get_interval_template",
    "main",
    "make_char_renderer",
    "make_labeled_renderer",
    "make_multiline_renderer",
    "make_styled_renderer",
    "render",
    "render_default",
    "render_interval_list",
    "render_intervals",
    "render_labeled",
    "render_text",
    "split_overlapping",
]


def main() -> None:
    from timebar.terminal.app import run

    run()


if __name__ == "__main__":
    main()
