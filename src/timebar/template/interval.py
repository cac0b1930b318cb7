# SPDX-License-Identifier: MIT

from typing import Any, Optional

from timebar.model.bound import Bound
from timebar.model.interval import Interval


def get_interval_template(bounds: Bound, label: Optional[Any] = None) -> Interval:
    start, end = bounds
    if end < start:
        start, end = end, start
    return {
        "bounds": (float(start), float(end)),
        "label": label,
    }
