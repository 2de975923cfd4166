# SPDX-License-Identifier: MIT

import pendulum
from rich import box
from rich.table import Table
from rich.text import Text

from symera.color import (
    DONE_INDICATOR_COLOR,
    PENDING_INDICATOR_COLOR,
    event_status_color,
    task_priority_color,
    task_status_color,
)
from symera.model.event import Event
from symera.model.summary import DaySummary
from symera.model.task import Task
from symera.service.calendar import day_summary, month_summaries
from symera.service.dashboard import task_due_label
from symera.time import date_to_display_str
from symera.view.view.util import (
    event_title,
    report_console,
    task_state,
    task_title,
    truncate,
)
from symera.view.view.views.header import header

WEEKDAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def calendar_day_view(
    day: pendulum.Date,
    events: list[Event],
    tasks: list[Task],
    today: pendulum.Date,
    tz: str = "UTC",
) -> None:
    """
    Display the events and tasks that fall on a single day.

    Args:
        day: The day to display
        events: All events to match against the day
        tasks: All tasks to match against the day
        today: Reference day for relative due labels
        tz: Zone used to reduce timestamps to calendar days
    """
    header("calendar day")

    console = report_console()
    summary = day_summary(day, events, tasks, tz)

    console.print(f"\n[bold]{date_to_display_str(summary['day'])}[/bold]\n")

    if summary["total_items"] == 0:
        console.print("[dim]nothing scheduled[/dim]\n")
        return

    for event in summary["events"]:
        line = Text()
        color = event_status_color(event["status"])
        line.append("■ ", style=color)
        line.append(event_title(event), style=color)
        line.append(f" ({event['status']})", style="dim")
        console.print(line)

    if summary["events"] and summary["tasks"]:
        console.print()

    for task in summary["tasks"]:
        line = Text()
        color = task_status_color(task["status"])
        line.append(f"[{task_state(task)}] ", style=color)
        line.append(task_title(task), style=color)
        line.append(f" {task['priority']}", style=task_priority_color(task["priority"]))
        label = task_due_label(task["due_date"], today, tz)
        if label:
            line.append(f" ({label})", style="dim")
        console.print(line)

    console.print()
    console.print(_indicator_line(summary))
    console.print()


def calendar_month_view(
    month: pendulum.Date,
    events: list[Event],
    tasks: list[Task],
    today: pendulum.Date,
    tz: str = "UTC",
    week_starts_on: int = pendulum.SUNDAY,
    cell_width: int = 16,
) -> None:
    """
    Display a month grid with event and task markers per day.

    Args:
        month: Any day inside the month to display
        events: All events to place on the grid
        tasks: All tasks to place on the grid
        today: Day to highlight
        tz: Zone used to reduce timestamps to calendar days
        week_starts_on: Weekday of the first column (Monday = 0 ... Sunday = 6)
        cell_width: Width of each day cell in characters
    """
    header("calendar month")

    console = report_console()
    month_start = month.start_of("month")
    console.print(f"\n[bold]{month_start.format('MMMM YYYY')}[/bold]\n")

    table = Table(box=box.SIMPLE, show_header=True, padding=(0, 1))
    for offset in range(7):
        table.add_column(
            WEEKDAY_NAMES[(week_starts_on + offset) % 7], style="bold", width=cell_width
        )

    for week in month_summaries(month_start, events, tasks, tz, week_starts_on):
        table.add_row(
            *[_render_cell(summary, month_start, today, cell_width) for summary in week]
        )

    console.print(table)
    console.print()


def _render_cell(
    summary: DaySummary,
    month_start: pendulum.Date,
    today: pendulum.Date,
    cell_width: int,
) -> Text:
    day = summary["day"]
    cell = Text()

    if day.month != month_start.month:
        cell.append(f"{day.day:2d}\n", style="dim")
        return cell

    if day == today:
        cell.append(f"{day.day:2d}", style="bold black on bright_cyan")
        cell.append("   ", style="bold black on bright_cyan")
    else:
        cell.append(f"{day.day:2d}", style="bold")

    if summary["total_items"] > 0:
        cell.append(f" ({summary['total_items']})", style="dim")
    if summary["has_pending_task"]:
        cell.append(" !", style=PENDING_INDICATOR_COLOR)
    if summary["has_completed_task"]:
        cell.append(" ✓", style=DONE_INDICATOR_COLOR)
    cell.append("\n")

    # Only the first two of each kind fit in a cell
    for event in summary["events"][:2]:
        color = event_status_color(event["status"])
        cell.append("■ ", style=color)
        cell.append(f"{truncate(event_title(event), cell_width - 2)}\n", style=color)

    for task in summary["tasks"][:2]:
        color = task_status_color(task["status"])
        cell.append(f"{task_state(task)} ", style=color)
        cell.append(f"{truncate(task_title(task), cell_width - 2)}\n", style=color)

    hidden = max(len(summary["events"]) - 2, 0) + max(len(summary["tasks"]) - 2, 0)
    if hidden > 0:
        cell.append(f"  +{hidden} more\n", style="dim")

    return cell


def _indicator_line(summary: DaySummary) -> Text:
    line = Text()
    line.append(f"{summary['total_items']} item(s)", style="bold")
    if summary["has_pending_task"]:
        line.append("  ! pending tasks", style=PENDING_INDICATOR_COLOR)
    if summary["has_completed_task"]:
        line.append("  ✓ completed tasks", style=DONE_INDICATOR_COLOR)
    return line

