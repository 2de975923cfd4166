# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from symera.model.status import EventStatus
from symera.query.sort import SORT_OPTIONS, sort_events
from symera.repository.configuration import CONFIGURATION_REPO
from symera.service.dashboard import filter_active_events
from symera.terminal.data import load_snapshot
from symera.view.view.views import event as event_report


def events(
    sort_by: Annotated[
        str,
        typer.Option("--sort", "-s", help=f"one of: {', '.join(SORT_OPTIONS)}"),
    ] = "date",
    active: Annotated[
        bool, typer.Option("--active", "-a", help="Only events with an active status")
    ] = False,
    status: Annotated[
        Optional[str], typer.Option("--status", help="Only events with this status")
    ] = None,
) -> None:
    """List events."""
    if sort_by not in SORT_OPTIONS:
        raise typer.BadParameter(
            f"sort must be one of: {', '.join(SORT_OPTIONS)}", param_hint="--sort"
        )

    config = CONFIGURATION_REPO.get_config()
    all_events, _ = load_snapshot()

    if active:
        all_events = filter_active_events(all_events)
    if status is not None:
        wanted = EventStatus.parse(status)
        all_events = [
            event for event in all_events if EventStatus.parse(event["status"]) == wanted
        ]

    event_report.events_view(
        "events",
        sort_events(all_events, sort_by, config["timezone"]),
        tz=config["timezone"],
    )
