# SPDX-License-Identifier: MIT

import zlib
from typing import Any

# Background used behind gaps by the styled renderers
SPACE_COLOR = "grey23"

# Colour of the legend bar in timeline views
LEGEND_COLOR = "grey50"

# Chosen for good visibility in terminal displays
PALETTE = [
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "bright_red",
    "bright_green",
    "bright_yellow",
    "bright_blue",
    "bright_magenta",
    "bright_cyan",
    "dark_orange",
    "purple",
    "deep_pink1",
    "spring_green1",
    "dark_violet",
    "gold1",
    "orange1",
    "pink1",
]


def color_for_label(label: Any) -> str:
    """Return a palette colour for a label, always the same for the same text."""
    return PALETTE[zlib.crc32(str(label).encode("utf-8")) % len(PALETTE)]
