# SPDX-License-Identifier: MIT

from typing import Annotated

import typer
from rich.table import Table

from symera import configuration
from symera.repository.configuration import CONFIGURATION_REPO
from symera.terminal.custom_typer import AliasedTyperGroup
from symera.terminal.parse import parse_timezone
from symera.view.view.util import report_console

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

WEEKDAY_NAMES = [
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
]


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = report_console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("timezone", config["timezone"])
    table.add_row("upcoming_window_days", str(config["upcoming_window_days"]))
    table.add_row("week_starts_on", WEEKDAY_NAMES[config["week_starts_on"] % 7])
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("log_level", config["log_level"])

    console.print(table)


@app.command("set-timezone, tz", no_args_is_help=True)
def set_timezone(
    timezone: Annotated[
        str, typer.Argument(help="IANA zone name, e.g. America/Sao_Paulo")
    ],
) -> None:
    """Set the zone used to turn timestamps into calendar days."""
    CONFIGURATION_REPO.update_config(timezone=parse_timezone(timezone))
    CONFIGURATION_REPO.flush()
    view()


@app.command("set-upcoming-window, uw", no_args_is_help=True)
def set_upcoming_window(
    days: Annotated[int, typer.Argument(min=0, help="days ahead counted as upcoming")],
) -> None:
    """Set how far ahead the dashboard looks for upcoming events."""
    CONFIGURATION_REPO.update_config(upcoming_window_days=days)
    CONFIGURATION_REPO.flush()
    view()


@app.command("set-week-start, ws", no_args_is_help=True)
def set_week_start(
    weekday: Annotated[
        int, typer.Argument(min=0, max=6, help="Monday = 0 ... Sunday = 6")
    ],
) -> None:
    """Set the first column of the month grid."""
    CONFIGURATION_REPO.update_config(week_starts_on=weekday)
    CONFIGURATION_REPO.flush()
    view()


@app.command("set-log-level, ll", no_args_is_help=True)
def set_log_level(
    level: Annotated[str, typer.Argument(help="DEBUG, INFO, WARNING or ERROR")],
) -> None:
    if level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR"):
        raise typer.BadParameter(f"Unknown log level: {level}")
    CONFIGURATION_REPO.update_config(log_level=level.upper())
    CONFIGURATION_REPO.flush()
    view()
