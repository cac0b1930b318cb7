# SPDX-License-Identifier: MIT

from typing import Any, Optional, TypedDict

from timebar.model.bound import Bound


class Interval(TypedDict):
    bounds: Bound
    label: Optional[Any]
