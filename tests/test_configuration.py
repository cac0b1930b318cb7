from __future__ import annotations

from pathlib import Path

import pytest

from timebar.configuration import get_default_configuration, load_configuration
from timebar.error import ConfigurationError


def test_missing_file_gives_defaults(tmp_path: Path) -> None:
    assert load_configuration(tmp_path / "missing.yaml") == get_default_configuration()


def test_default_path_is_used(isolated_config_path: Path) -> None:
    isolated_config_path.parent.mkdir(parents=True)
    isolated_config_path.write_text("length: 33\n")
    assert load_configuration()["length"] == 33


def test_file_values_override_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "length: 42\nrenderer: labeled\nsegment_style: bold red\nunknown: 1\n"
    )
    config = load_configuration(config_path)

    assert config["length"] == 42
    assert config["renderer"] == "labeled"
    assert config["segment_style"] == "bold red"
    assert config["show_header"] is True
    assert "unknown" not in config


def test_null_styles_are_accepted(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("segment_style: null\nspace_style: on black\nshow_header: false\n")
    config = load_configuration(config_path)

    assert config["segment_style"] is None
    assert config["space_style"] == "on black"
    assert config["show_header"] is False


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("")
    assert load_configuration(config_path) == get_default_configuration()


@pytest.mark.parametrize(
    "content",
    [
        "- length\n- 42\n",
        "length: [\n",
        "length: -3\n",
        "length: wide\n",
        "full_char: 1\n",
        "empty_char: [' ']\n",
        "renderer: 5\n",
        "show_header: no-thanks\n",
        "segment_style: 3\n",
        "space_style: {on: grey}\n",
    ],
)
def test_invalid_files_raise(tmp_path: Path, content: str) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text(content)
    with pytest.raises(ConfigurationError):
        load_configuration(config_path)
