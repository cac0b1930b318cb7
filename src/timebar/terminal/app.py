# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.rule import Rule
from rich.text import Text

from timebar.configuration import Configuration, load_configuration
from timebar.error import TimebarError
from timebar.log import configure_logging
from timebar.service.render import render, render_interval_list
from timebar.terminal import configuration
from timebar.terminal.custom_typer import AliasedTyperGroup
from timebar.terminal.parse import (
    parse_activity,
    parse_bound,
    parse_day,
    parse_interval,
)
from timebar.time import activity_bounds, activity_label, activity_legend
from timebar.view import state as view_state
from timebar.view.header import header
from timebar.view.renderers import RENDERER_NAMES, get_renderer, make_styled_renderer

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="timebar - Render intervals as terminal timeline bars",
    no_args_is_help=True,
)
app.add_typer(configuration.app, name="config, c")

console = Console()

ConfigOption = Annotated[
    Optional[Path],
    typer.Option(
        "--config",
        help="Configuration file (defaults to the user configuration file)",
    ),
]
LengthOption = Annotated[
    Optional[int],
    typer.Option(
        "--length",
        "-l",
        min=0,
        help="Width of each bar in characters (defaults to the configured length)",
    ),
]


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output to stderr"),
    ] = False,
    no_header: Annotated[
        bool,
        typer.Option("--no-header", "-nh", help="Suppress header output"),
    ] = False,
) -> None:
    """
    timebar - Render intervals as terminal timeline bars

    Global options that apply to all commands.
    """
    configure_logging(verbose)
    if no_header:
        view_state.set_show_header(False)


@app.command("render, r", no_args_is_help=True)
def render_command(
    intervals: Annotated[
        list[str],
        typer.Argument(help="Intervals in START:END[=LABEL] format, e.g. 0:2=build"),
    ],
    length: LengthOption = None,
    boundaries: Annotated[
        Optional[str],
        typer.Option(
            "--boundaries",
            "-b",
            help="Domain to draw in START:END format; bars are padded to cover it",
        ),
    ] = None,
    renderer: Annotated[
        Optional[str],
        typer.Option(
            "--renderer",
            "-r",
            help=f"Block renderer: {', '.join(RENDERER_NAMES)}",
        ),
    ] = None,
    separator: Annotated[
        bool,
        typer.Option("--separator", "-s", help="Print a rule between bars"),
    ] = False,
    config_path: ConfigOption = None,
) -> None:
    """Render numeric intervals; overlapping intervals go on separate bars."""
    config = _load_configuration(config_path)
    parsed_intervals = [parse_interval(interval) for interval in intervals]
    parsed_boundaries = parse_bound(boundaries)

    try:
        block_renderer = get_renderer(renderer or config["renderer"], config)
        groups = render_interval_list(
            parsed_intervals,
            length if length is not None else config["length"],
            parsed_boundaries,
            block_renderer,
        )
    except TimebarError as e:
        _exit_with_error(e)

    _apply_header_configuration(config)
    header(console, "render", f"{len(parsed_intervals)} intervals, {len(groups)} bars")
    _print_groups(groups, separator)


@app.command("timeline, tl", no_args_is_help=True)
def timeline_command(
    activities: Annotated[
        list[str],
        typer.Argument(
            help="Activities in HH:mm-HH:mm[=LABEL][@COLOR] format, e.g. 8:00-9:20=breakfast@red"
        ),
    ],
    day: Annotated[
        Optional[str],
        typer.Option("--day", "-d", help="Day of the activities (YYYY-MM-DD, defaults to today)"),
    ] = None,
    length: LengthOption = None,
    no_legend: Annotated[
        bool,
        typer.Option("--no-legend", help="Do not print the start-end legend bar"),
    ] = False,
    config_path: ConfigOption = None,
) -> None:
    """Render the activities of a day, with a legend of their start and end times."""
    config = _load_configuration(config_path)
    parsed_day = parse_day(day)
    parsed_activities = [parse_activity(activity, parsed_day) for activity in activities]
    bar_length = length if length is not None else config["length"]
    block_renderer = make_styled_renderer(config["segment_style"], config["space_style"])

    try:
        legend: list[list[str]] = []
        if not no_legend:
            legend = render(
                parsed_activities,
                activity_bounds,
                activity_legend,
                bar_length,
                renderer=block_renderer,
            )
        groups = render(
            parsed_activities,
            activity_bounds,
            activity_label,
            bar_length,
            renderer=block_renderer,
        )
    except TimebarError as e:
        _exit_with_error(e)

    _apply_header_configuration(config)
    first = parsed_activities[0]["start"]
    header(console, "timeline", first.in_tz("local").format("YYYY-MM-DD ddd"))
    _print_groups(legend + groups, separator=False)


def _load_configuration(config_path: Optional[Path]) -> Configuration:
    try:
        return load_configuration(config_path)
    except TimebarError as e:
        _exit_with_error(e)


def _apply_header_configuration(config: Configuration) -> None:
    if not config["show_header"]:
        view_state.set_show_header(False)


def _print_groups(groups: list[list[str]], separator: bool) -> None:
    for i, lines in enumerate(groups):
        if separator and i > 0:
            console.print(Rule(style="dim"))
        for line in lines:
            console.print(Text.from_ansi(line), soft_wrap=True)


def _exit_with_error(error: TimebarError) -> NoReturn:
    console.print(f"[red]Error: {escape(str(error))}[/red]", highlight=False)
    raise typer.Exit(1)


def run() -> None:
    app()
