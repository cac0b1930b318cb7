from __future__ import annotations

import pytest
from rich.text import Text

from timebar.color import PALETTE, color_for_label
from timebar.configuration import get_default_configuration
from timebar.error import ConfigurationError
from timebar.template.block import get_segment_template, get_space_template
from timebar.view.renderers import (
    RENDERER_NAMES,
    chunk_label,
    get_renderer,
    label_style,
    label_text,
    make_char_renderer,
    make_labeled_renderer,
    make_multiline_renderer,
    make_styled_renderer,
    render_default,
    render_labeled,
    visible_width,
)


def test_default_renderer() -> None:
    assert render_default(get_segment_template(3)) == {
        "render_type": "block",
        "lines": ["==="],
    }
    assert render_default(get_space_template(2)) == {
        "render_type": "space",
        "lines": ["  "],
    }


def test_char_renderer() -> None:
    render = make_char_renderer("#", ".")
    assert render(get_segment_template(2))["lines"] == ["##"]
    assert render(get_space_template(3))["lines"] == ["..."]


def test_char_renderer_rejects_multi_character_glyphs() -> None:
    with pytest.raises(ConfigurationError):
        make_char_renderer("##", " ")


def test_labeled_renderer_truncates_and_fills() -> None:
    assert render_labeled(get_segment_template(3, "hello"))["lines"] == ["hel"]
    assert render_labeled(get_segment_template(7, "hello"))["lines"] == ["hello★★"]
    assert render_labeled(get_segment_template(2))["lines"] == ["★★"]
    assert render_labeled(get_space_template(2))["lines"] == ["☆☆"]

    render = make_labeled_renderer(fill="-", empty=" ")
    assert render(get_segment_template(4, 12))["lines"] == ["12--"]


def test_styled_renderer_keeps_visible_width() -> None:
    render = make_styled_renderer()
    (line,) = render(get_segment_template(6, "abc"))["lines"]
    assert "\x1b[" in line
    assert visible_width(line) == 6
    assert Text.from_ansi(line).plain == "abc   "

    (line,) = render(get_segment_template(2, "abcdef"))["lines"]
    assert Text.from_ansi(line).plain == "ab"

    (line,) = render(get_space_template(4))["lines"]
    assert visible_width(line) == 4


def test_styled_renderer_zero_width() -> None:
    render = make_styled_renderer()
    (line,) = render(get_segment_template(0, "abc"))["lines"]
    assert visible_width(line) == 0


def test_styled_renderer_uses_label_style() -> None:
    render = make_styled_renderer(segment_style="bold")
    (with_own_style,) = render(get_segment_template(4, ("ab", "red")))["lines"]
    (with_default_style,) = render(get_segment_template(4, "ab"))["lines"]

    assert Text.from_ansi(with_own_style).plain == "ab  "
    assert with_own_style != with_default_style
    assert "\x1b[31m" in with_own_style
    assert "\x1b[1m" in with_default_style


def test_styled_renderer_is_deterministic() -> None:
    render = make_styled_renderer()
    block = get_segment_template(5, "deploy")
    assert render(block) == render(block)


def test_multiline_renderer_wraps_labels() -> None:
    render = make_multiline_renderer()
    rendered = render(get_segment_template(7, "hello world"))
    assert rendered == {
        "render_type": "multi_line_block",
        "lines": ["hello w", "orld   "],
    }
    assert render(get_space_template(3)) == {"render_type": "space", "lines": ["   "]}


def test_multiline_renderer_with_style_keeps_visible_width() -> None:
    render = make_multiline_renderer(segment_style="on blue", space_style="on black")
    lines = render(get_segment_template(4, "abcdef"))["lines"]
    assert [visible_width(line) for line in lines] == [4, 4]
    (space,) = render(get_space_template(3))["lines"]
    assert visible_width(space) == 3


def test_chunk_label() -> None:
    assert chunk_label("hello world", 7) == ["hello w", "orld   "]
    assert chunk_label("abcdef", 3) == ["abc", "def"]
    assert chunk_label("", 3) == ["   "]
    assert chunk_label("abc", 0) == [""]


def test_get_renderer_by_name() -> None:
    for name in RENDERER_NAMES:
        render = get_renderer(name)
        (line, *_) = render(get_segment_template(3, "x"))["lines"]
        assert visible_width(line) == 3

    assert get_renderer("default") is render_default


def test_get_renderer_uses_configuration() -> None:
    config = get_default_configuration()
    config["full_char"] = "#"
    config["empty_char"] = "."
    render = get_renderer("default", config)
    assert render(get_segment_template(2))["lines"] == ["##"]
    assert render(get_space_template(2))["lines"] == [".."]


def test_unknown_renderer_is_a_configuration_error() -> None:
    with pytest.raises(ConfigurationError, match="unknown renderer 'fancy'"):
        get_renderer("fancy")


def test_label_colors_are_stable() -> None:
    assert color_for_label("deploy") == color_for_label("deploy")
    assert color_for_label("deploy") in PALETTE
    assert color_for_label(None) in PALETTE


def test_only_string_pairs_are_styled_labels() -> None:
    assert label_text(("deploy", "red")) == "deploy"
    assert label_style(("deploy", "red")) == "red"

    assert label_text((1.0, 2.0)) == "(1.0, 2.0)"
    assert label_style((1.0, 2.0)) is None
    assert label_text(("deploy", None)) == "('deploy', None)"
    assert label_style(("deploy", None)) is None


def test_tuple_labels_are_drawn_whole() -> None:
    assert render_labeled(get_segment_template(12, (1.0, 2.0)))["lines"] == [
        "(1.0, 2.0)★★"
    ]

    render = make_styled_renderer(segment_style="bold")
    (line,) = render(get_segment_template(12, (1.0, 2.0)))["lines"]
    assert Text.from_ansi(line).plain == "(1.0, 2.0)  "
    assert "\x1b[1m" in line
