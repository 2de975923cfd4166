# SPDX-License-Identifier: MIT

from rich import box
from rich.markup import escape
from rich.padding import Padding
from rich.panel import Panel
from rich.table import Table

from symera.color import event_status_color
from symera.model.status import EventStatus
from symera.model.summary import DashboardSummary
from symera.time import date_to_display_str_optional
from symera.view.view.util import event_title, progress_bar, report_console
from symera.view.view.views.header import header

STATUS_LABELS: dict[EventStatus, str] = {
    EventStatus.PLANNING: "planning",
    EventStatus.CONFIRMED: "confirmed",
    EventStatus.IN_PROGRESS: "in progress",
    EventStatus.ACTIVE: "active",
}


def dashboard_view(summary: DashboardSummary) -> None:
    """Display the dashboard metrics and the active events ordered by start day."""
    header("dashboard")

    console = report_console()

    metrics = Table(box=None, show_header=False, padding=(0, 2))
    metrics.add_column("metric", style="cyan")
    metrics.add_column("value", style="bold")
    metrics.add_row("total events", str(summary["total_events"]))
    metrics.add_row("active events", str(summary["active_events"]))
    for status, count in summary["active_by_status"].items():
        metrics.add_row(
            f"  {STATUS_LABELS.get(status, status.value)}",
            f"[{event_status_color(status)}]{count}[/{event_status_color(status)}]",
        )
    metrics.add_row("pending tasks", str(summary["pending_tasks"]))
    metrics.add_row("upcoming events", str(len(summary["upcoming_events"])))
    metrics.add_row("days until next event", str(summary["next_event_days"]))

    console.print(
        Padding(
            Panel(
                metrics,
                title=date_to_display_str_optional(summary["generated_for"]),
                box=box.ROUNDED,
                expand=False,
            ),
            (1, 0, 0, 1),
        )
    )

    if len(summary["active_events_by_start"]) == 0:
        console.print(Padding("[dim]no active events[/dim]", (1, 1)))
        return

    events_table = Table(box=box.SIMPLE)
    events_table.add_column("id")
    events_table.add_column("name")
    events_table.add_column("status")
    events_table.add_column("start")
    events_table.add_column("progress")

    for row in summary["active_events_by_start"]:
        event = row["event"]
        color = event_status_color(event["status"])
        events_table.add_row(
            str(event["id"]) if event["id"] is not None else "",
            escape(event_title(event)),
            f"[{color}]{escape(event['status'])}[/{color}]",
            date_to_display_str_optional(row["start"]) or "[dim]no date[/dim]",
            f"{progress_bar(row['progress'])} {row['progress']}%",
        )

    console.print(events_table)
