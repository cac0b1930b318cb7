# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from timebar import configuration
from timebar.error import TimebarError
from timebar.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view(
    config_path: Annotated[
        Optional[Path],
        typer.Option(
            "--config",
            help="Configuration file (defaults to the user configuration file)",
        ),
    ] = None,
) -> None:
    """Display the effective configuration settings."""
    console = Console()
    try:
        config = configuration.load_configuration(config_path)
    except TimebarError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]", highlight=False)
        raise typer.Exit(1)

    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "config_path",
        str(config_path if config_path is not None else configuration.APP_CONFIG_PATH),
    )
    table.add_row("length", str(config["length"]))
    table.add_row("renderer", config["renderer"])
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("full_char", repr(config["full_char"]))
    table.add_row("empty_char", repr(config["empty_char"]))
    table.add_row("segment_style", config["segment_style"] or "None")
    table.add_row("space_style", config["space_style"] or "None")

    console.print(table)
