from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest

from timebar import configuration
from timebar.view import state as view_state


@pytest.fixture(autouse=True)
def isolated_config_path(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[Path, None, None]:
    config_path = tmp_path / "config" / "config.yaml"
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path)
    yield config_path


@pytest.fixture(autouse=True)
def reset_view_state() -> Generator[None, None, None]:
    view_state.set_show_header(True)
    yield
    view_state.set_show_header(True)
