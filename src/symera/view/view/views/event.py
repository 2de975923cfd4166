# SPDX-License-Identifier: MIT

from rich import box
from rich.markup import escape
from rich.table import Table

from symera.color import event_status_color
from symera.model.event import Event
from symera.service.calendar import effective_end, effective_start
from symera.service.dashboard import calculate_task_progress
from symera.time import date_to_display_str_optional
from symera.view.view.util import event_title, report_console
from symera.view.view.views.header import header


def events_view(report_name: str, events: list[Event], tz: str = "UTC") -> None:
    header(report_name)

    events_table = Table(box=box.SIMPLE)
    for column in ["id", "name", "type", "status", "start", "end", "progress"]:
        events_table.add_column(column)

    for event in events:
        color = event_status_color(event["status"])
        events_table.add_row(
            str(event["id"]) if event["id"] is not None else "",
            escape(event_title(event)),
            escape(event["event_type"]),
            f"[{color}]{escape(event['status'])}[/{color}]",
            date_to_display_str_optional(effective_start(event, tz)) or "",
            date_to_display_str_optional(effective_end(event, tz)) or "",
            f"{calculate_task_progress(event.get('tasks') or [])}%",
        )

    console = report_console()
    console.print(events_table)
