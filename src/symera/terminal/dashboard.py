# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from symera.repository.configuration import CONFIGURATION_REPO
from symera.service.dashboard import build_dashboard
from symera.terminal.data import load_snapshot
from symera.terminal.parse import parse_date
from symera.time import now_in
from symera.view.view.views.dashboard import dashboard_view


def dashboard(
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option(
            "--date",
            "-d",
            parser=parse_date,
            help="compute the dashboard as of this day instead of now",
        ),
    ] = None,
    window_days: Annotated[
        Optional[int],
        typer.Option(
            "--window",
            "-w",
            help="days ahead counted as upcoming (defaults to upcoming_window_days)",
        ),
    ] = None,
) -> None:
    """Show event and task metrics."""
    config = CONFIGURATION_REPO.get_config()
    events, tasks = load_snapshot()

    tz = config["timezone"]
    if date is not None:
        now = pendulum.datetime(date.year, date.month, date.day, tz=tz)
    else:
        now = now_in(tz)

    summary = build_dashboard(
        events,
        tasks,
        now=now,
        window_days=(
            window_days if window_days is not None else config["upcoming_window_days"]
        ),
        tz=tz,
    )
    dashboard_view(summary)
