# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum


class Activity(TypedDict):
    start: pendulum.DateTime
    end: pendulum.DateTime
    label: Optional[str]
    color: Optional[str]
