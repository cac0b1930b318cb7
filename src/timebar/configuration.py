# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Any, Optional, TypedDict

from yaml import YAMLError, load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

from timebar.error import ConfigurationError
from timebar.service.render import DEFAULT_LENGTH

APP_NAME = "timebar"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"


class Configuration(TypedDict):
    length: int
    renderer: str
    show_header: bool
    full_char: str
    empty_char: str
    segment_style: Optional[str]
    space_style: Optional[str]


def get_default_configuration() -> Configuration:
    return {
        "length": DEFAULT_LENGTH,
        "renderer": "default",
        "show_header": True,
        "full_char": "=",
        "empty_char": " ",
        "segment_style": None,
        "space_style": None,
    }


def load_configuration(path: Optional[Path] = None) -> Configuration:
    """
    Load the configuration file, falling back to defaults.

    A missing file yields the default configuration. Keys absent from the file
    are filled in with their defaults; unknown keys are ignored.

    Args:
        path: Configuration file to read (defaults to APP_CONFIG_PATH)

    Raises:
        ConfigurationError: The file is not valid YAML or not a mapping
    """
    config_path = path if path is not None else APP_CONFIG_PATH
    config = get_default_configuration()

    if not config_path.is_file():
        return config

    try:
        loaded: Any = load(config_path.read_text(), Loader=Loader)
    except YAMLError as e:
        raise ConfigurationError(f"invalid configuration file {config_path}: {e}")

    if loaded is None:
        return config
    if not isinstance(loaded, dict):
        raise ConfigurationError(
            f"configuration file {config_path} must contain a mapping"
        )

    for key in config:
        if key in loaded:
            config[key] = loaded[key]  # type: ignore[literal-required]

    _validate_configuration(config)
    return config


def _validate_configuration(config: Configuration) -> None:
    if isinstance(config["length"], bool) or not isinstance(config["length"], int):
        raise ConfigurationError(f"length must be an integer, got {config['length']!r}")
    if config["length"] < 0:
        raise ConfigurationError(f"length must not be negative, got {config['length']}")

    if not isinstance(config["show_header"], bool):
        raise ConfigurationError(
            f"show_header must be true or false, got {config['show_header']!r}"
        )

    for key in ("renderer", "full_char", "empty_char"):
        if not isinstance(config[key], str):  # type: ignore[literal-required]
            raise ConfigurationError(
                f"{key} must be a string, got {config[key]!r}"  # type: ignore[literal-required]
            )

    for key in ("segment_style", "space_style"):
        value = config[key]  # type: ignore[literal-required]
        if value is not None and not isinstance(value, str):
            raise ConfigurationError(f"{key} must be a string, got {value!r}")
