# SPDX-License-Identifier: MIT

from typing import TYPE_CHECKING, Any, Optional

from rich.color import ColorSystem
from rich.console import Console
from rich.text import Text

from timebar.color import SPACE_COLOR, color_for_label
from timebar.error import ConfigurationError
from timebar.model.block import Block, BlockTypes
from timebar.model.render_block import BlockRenderer, RenderBlock
from timebar.template.render_block import (
    get_block_render_template,
    get_multi_line_block_render_template,
    get_space_render_template,
)

if TYPE_CHECKING:
    from timebar.configuration import Configuration

TEXT_FULL = "="
TEXT_EMPTY = " "

_ansi_console = Console(color_system="truecolor", highlight=False)


def render_default(block: Block) -> RenderBlock:
    """Draw segments with '=' and spaces with ' '."""
    if block["block_type"] == BlockTypes.SEGMENT:
        return get_block_render_template(TEXT_FULL * block["width"])
    return get_space_render_template(TEXT_EMPTY * block["width"])


def make_char_renderer(full: str = TEXT_FULL, empty: str = TEXT_EMPTY) -> BlockRenderer:
    if len(full) != 1 or len(empty) != 1:
        raise ConfigurationError("full and empty must be single characters")

    def render_chars(block: Block) -> RenderBlock:
        if block["block_type"] == BlockTypes.SEGMENT:
            return get_block_render_template(full * block["width"])
        return get_space_render_template(empty * block["width"])

    return render_chars


def make_labeled_renderer(fill: str = "★", empty: str = "☆") -> BlockRenderer:
    """
    Build a renderer writing each segment's label, truncated to the segment
    width and followed by `fill`; gaps are drawn with `empty`.
    """

    def render_labeled(block: Block) -> RenderBlock:
        width = block["width"]
        if block["block_type"] == BlockTypes.SEGMENT:
            text = label_text(block["label"])[:width]
            return get_block_render_template(text + fill * (width - len(text)))
        return get_space_render_template(empty * width)

    return render_labeled


render_labeled = make_labeled_renderer()


def make_styled_renderer(
    segment_style: Optional[str] = None,
    space_style: Optional[str] = None,
) -> BlockRenderer:
    """
    Build a renderer drawing coloured bars with rich styles.

    Segments show their label on a coloured background. A label given as a
    (text, style) pair uses its own style; otherwise `segment_style` is used, or a
    colour picked from the label text when no style is configured. The output
    holds ANSI escape sequences; its visible width is the block width.

    Args:
        segment_style: Rich style for segments
        space_style: Rich style for gaps (defaults to a dark background)
    """
    resolved_space_style = space_style or f"on {SPACE_COLOR}"

    def render_styled(block: Block) -> RenderBlock:
        width = block["width"]
        if block["block_type"] == BlockTypes.SEGMENT:
            label = block["label"]
            text = label_text(label)[:width].ljust(width)
            style = label_style(label) or segment_style
            if style is None:
                style = f"black on {color_for_label(label_text(label))}"
            return get_block_render_template(to_ansi(Text(text, style=style)))
        return get_space_render_template(
            to_ansi(Text(" " * width, style=resolved_space_style))
        )

    return render_styled


def make_multiline_renderer(
    segment_style: Optional[str] = None,
    space_style: Optional[str] = None,
) -> BlockRenderer:
    """
    Build a renderer that wraps each segment's label over as many lines as it
    needs, at the segment width. Gaps stay on a single line; the compositor pads
    them to the height of the tallest segment.
    """

    def render_multiline(block: Block) -> RenderBlock:
        width = block["width"]
        if block["block_type"] == BlockTypes.SEGMENT:
            chunks = chunk_label(label_text(block["label"]), width)
            if segment_style is not None:
                chunks = [to_ansi(Text(chunk, style=segment_style)) for chunk in chunks]
            return get_multi_line_block_render_template(chunks)
        text = " " * width
        if space_style is not None:
            text = to_ansi(Text(text, style=space_style))
        return get_space_render_template(text)

    return render_multiline


def chunk_label(text: str, width: int) -> list[str]:
    """Split text into lines of exactly `width` characters, padding the last."""
    if width <= 0:
        return [""]
    if len(text) == 0:
        return [" " * width]
    return [text[i : i + width].ljust(width) for i in range(0, len(text), width)]


def is_styled_label(label: Optional[Any]) -> bool:
    """A styled label is a (text, style) pair of strings."""
    return (
        isinstance(label, tuple)
        and len(label) == 2
        and isinstance(label[0], str)
        and isinstance(label[1], str)
    )


def label_text(label: Optional[Any]) -> str:
    if label is None:
        return ""
    if is_styled_label(label):
        return label[0]
    return str(label)


def label_style(label: Optional[Any]) -> Optional[str]:
    if is_styled_label(label):
        return label[1]
    return None


def to_ansi(text: Text) -> str:
    """Render rich Text to a string with ANSI escape sequences."""
    return "".join(
        segment.style.render(segment.text, color_system=ColorSystem.TRUECOLOR)
        if segment.style
        else segment.text
        for segment in text.render(_ansi_console)
    )


def visible_width(text: str) -> int:
    """Width of text in terminal cells, ignoring ANSI escape sequences."""
    return Text.from_ansi(text).cell_len


def get_renderer(
    name: str, configuration: Optional["Configuration"] = None
) -> BlockRenderer:
    """
    Look up a renderer by name: default, labeled, styled or multiline.

    Raises:
        ConfigurationError: The name is unknown
    """
    if name == "default":
        if configuration is None:
            return render_default
        return make_char_renderer(
            configuration["full_char"], configuration["empty_char"]
        )
    if name == "labeled":
        return render_labeled
    if name == "styled":
        if configuration is None:
            return make_styled_renderer()
        return make_styled_renderer(
            configuration["segment_style"], configuration["space_style"]
        )
    if name == "multiline":
        if configuration is None:
            return make_multiline_renderer()
        return make_multiline_renderer(
            configuration["segment_style"], configuration["space_style"]
        )
    raise ConfigurationError(
        f"unknown renderer '{name}', expected one of: {', '.join(RENDERER_NAMES)}"
    )


RENDERER_NAMES = ["default", "labeled", "styled", "multiline"]
