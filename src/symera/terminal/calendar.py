# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from symera.repository.configuration import CONFIGURATION_REPO
from symera.terminal.custom_typer import AliasedTyperGroup
from symera.terminal.data import load_snapshot
from symera.terminal.parse import parse_date, today
from symera.view.view.views import calendar as calendar_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("day, d")
def day(
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option(
            "--date",
            "-d",
            parser=parse_date,
            help="valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1",
        ),
    ] = None,
) -> None:
    """Show the events and tasks falling on one day."""
    config = CONFIGURATION_REPO.get_config()
    events, tasks = load_snapshot()

    current_day = today()
    calendar_report.calendar_day_view(
        date if date is not None else current_day,
        events,
        tasks,
        current_day,
        config["timezone"],
    )


@app.command("month, m")
def month(
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option(
            "--date",
            "-d",
            parser=parse_date,
            help="any day in the month to show; valid inputs: YYYY-MM-DD, today, or day offset like 30, -30",
        ),
    ] = None,
    cell_width: Annotated[
        int,
        typer.Option(
            "--cell-width",
            "-w",
            help="Width of each day cell in characters",
        ),
    ] = 16,
) -> None:
    """Show a month grid with events, tasks and pending/done indicators."""
    config = CONFIGURATION_REPO.get_config()
    events, tasks = load_snapshot()

    current_day = today()
    calendar_report.calendar_month_view(
        date if date is not None else current_day,
        events,
        tasks,
        current_day,
        config["timezone"],
        config["week_starts_on"],
        cell_width,
    )
