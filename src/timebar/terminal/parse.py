# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer
from rich.color import Color, ColorParseError

from timebar.model.activity import Activity
from timebar.model.bound import Bound
from timebar.model.interval import Interval
from timebar.template.interval import get_interval_template
from timebar.time import parse_time_of_day

_NUMBER = r"-?(?:\d+(?:\.\d*)?|\.\d+)"
_BOUND_P = re.compile(rf"^\s*({_NUMBER})\s*:\s*({_NUMBER})\s*$")
_INTERVAL_P = re.compile(rf"^\s*({_NUMBER})\s*:\s*({_NUMBER})\s*(?:=(.*))?$")
_ACTIVITY_P = re.compile(
    r"^\s*(\d{1,2}:\d{2})\s*-\s*(\d{1,2}:\d{2})\s*(?:=([^@]*))?(?:@(\w+))?\s*$"
)


def parse_bound(bound_param: Optional[str]) -> Optional[Bound]:
    """
    Parse a START:END pair such as "0:5" or "-1.5:2".

    Raises:
        typer.BadParameter: If the value is not two numbers separated by ':'
    """
    if bound_param is None:
        return None

    bound_match = _BOUND_P.match(bound_param)
    if not bound_match:
        raise typer.BadParameter(
            f"Boundaries must be in START:END format (e.g., 0:5), got '{bound_param}'"
        )
    return (float(bound_match.group(1)), float(bound_match.group(2)))


def parse_interval(interval_param: str) -> Interval:
    """
    Parse an interval in START:END[=LABEL] format, e.g. "0:2" or "3:4=lunch".

    Reversed bounds are accepted and normalized.

    Raises:
        typer.BadParameter: If the value does not match the format
    """
    interval_match = _INTERVAL_P.match(interval_param)
    if not interval_match:
        raise typer.BadParameter(
            f"Interval must be in START:END[=LABEL] format (e.g., 0:2=build), got '{interval_param}'"
        )

    start = float(interval_match.group(1))
    end = float(interval_match.group(2))
    label = interval_match.group(3)
    return get_interval_template((start, end), label)


def parse_activity(
    activity_param: str, day: Optional[pendulum.DateTime] = None
) -> Activity:
    """
    Parse an activity in (H)H:mm-(H)H:mm[=LABEL][@COLOR] format, e.g.
    "8:00-9:20=breakfast" or "8:00-9:20=breakfast@red".

    An end time before the start time is taken to be on the following day. COLOR is
    a rich colour name used as the background of the activity.

    Raises:
        typer.BadParameter: If the value does not match the format, or a time or colour is invalid
    """
    activity_match = _ACTIVITY_P.match(activity_param)
    if not activity_match:
        raise typer.BadParameter(
            f"Activity must be in HH:mm-HH:mm[=LABEL][@COLOR] format (e.g., 8:00-9:20=breakfast@red), got '{activity_param}'"
        )

    try:
        start = parse_time_of_day(activity_match.group(1), day)
        end = parse_time_of_day(activity_match.group(2), day)
    except ValueError as e:
        raise typer.BadParameter(str(e))

    if end < start:
        end = end.add(days=1)

    color = activity_match.group(4)
    if color is not None:
        try:
            Color.parse(color)
        except ColorParseError as e:
            raise typer.BadParameter(f"Invalid colour '{color}': {e}")

    return {
        "start": start,
        "end": end,
        "label": activity_match.group(3),
        "color": color,
    }


def parse_day(day_param: Optional[str]) -> Optional[pendulum.DateTime]:
    """Parse a YYYY-MM-DD day in local time."""
    if day_param is None:
        return None
    if not re.match(r"^\d{4}-\d{2}-\d{2}$", day_param):
        raise typer.BadParameter(f"Day must be in YYYY-MM-DD format, got '{day_param}'")
    try:
        return pendulum.parse(day_param, tz="local")  # type: ignore[return-value]
    except ValueError as e:
        raise typer.BadParameter(f"Invalid day '{day_param}': {e}")
