# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from timebar.color import LEGEND_COLOR, color_for_label
from timebar.model.activity import Activity
from timebar.model.bound import Bound


def datetime_to_timestamp(datetime: pendulum.DateTime) -> float:
    return datetime.in_tz("UTC").timestamp()


def datetime_to_display_local_time_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("HH:mm")


def activity_bounds(activity: Activity) -> Bound:
    return (
        datetime_to_timestamp(activity["start"]),
        datetime_to_timestamp(activity["end"]),
    )


def activity_label(activity: Activity) -> Optional[tuple[str, str]]:
    """Label an activity with its description, on its colour."""
    if activity["label"] is None:
        return None
    color = activity["color"] or color_for_label(activity["label"])
    return (activity["label"], f"black on {color}")


def activity_legend(activity: Activity) -> tuple[str, str]:
    """Label an activity with its local start and end times, e.g. 08:00-09:20."""
    start = datetime_to_display_local_time_str(activity["start"])
    end = datetime_to_display_local_time_str(activity["end"])
    return (f"{start}-{end}", f"white on {LEGEND_COLOR}")


def parse_time_of_day(
    time_str: str, day: Optional[pendulum.DateTime] = None
) -> pendulum.DateTime:
    """
    Place an (H)H:mm time on a day, in local time.

    Args:
        time_str: Time like "8:00" or "17:30"
        day: Day to use (defaults to today)

    Raises:
        ValueError: The time is malformed or out of range
    """
    hour_str, _, minute_str = time_str.partition(":")
    if not hour_str.isdigit() or not minute_str.isdigit() or len(minute_str) != 2:
        raise ValueError(f"expected (H)H:mm, got '{time_str}'")

    hour = int(hour_str)
    minute = int(minute_str)
    if hour < 0 or hour > 23:
        raise ValueError(f"Hour must be between 0 and 23, got {hour}")
    if minute < 0 or minute > 59:
        raise ValueError(f"Minute must be between 0 and 59, got {minute}")

    base = day if day is not None else pendulum.today("local")
    return base.in_tz("local").set(hour=hour, minute=minute, second=0, microsecond=0)
