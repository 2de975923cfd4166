# SPDX-License-Identifier: MIT

"""
Matching of events and tasks to calendar days.

Events occupy every day from their effective start to their effective end,
inclusive. Tasks occupy only the single day they are due. Every date is
reduced to its calendar day before comparison, and a date that cannot be
read makes the item match no day at all.
"""

import datetime
from typing import Optional

import pendulum

from symera.model.event import Event
from symera.model.status import TaskStatus
from symera.model.summary import DaySummary
from symera.model.task import Task
from symera.time import day_in_range, month_grid_days, to_day


def effective_start(event: Event, tz: str = "UTC") -> Optional[pendulum.Date]:
    """Calendar day an event starts on: ``start_date``, else ``date``.

    A present but unparsable ``start_date`` does not fall back to ``date``.
    """
    start_value = event.get("start_date")
    if start_value is None:
        start_value = event.get("date")
    return to_day(start_value, tz)


def effective_end(event: Event, tz: str = "UTC") -> Optional[pendulum.Date]:
    """Calendar day an event ends on: ``end_date``, else its effective start."""
    end = to_day(event.get("end_date"), tz)
    if end is None:
        return effective_start(event, tz)
    return end


def event_occurs_on(event: Event, day: datetime.date, tz: str = "UTC") -> bool:
    start = effective_start(event, tz)
    if start is None:
        return False
    check_day = to_day(day, tz)
    if check_day is None:
        return False
    return day_in_range(check_day, start, effective_end(event, tz))


def task_due_on(task: Task, day: datetime.date, tz: str = "UTC") -> bool:
    due = to_day(task.get("due_date"), tz)
    if due is None:
        return False
    check_day = to_day(day, tz)
    return check_day is not None and (due.year, due.month, due.day) == (
        check_day.year,
        check_day.month,
        check_day.day,
    )


def events_on_day(day: datetime.date, events: list[Event], tz: str = "UTC") -> list[Event]:
    """
    Return the events taking place on ``day``, in input order.

    Args:
        day: The calendar day to check; any time of day is dropped
        events: Events to match
        tz: Zone used to reduce timestamps to calendar days

    Returns:
        Events whose effective start/end range contains ``day``
    """
    return [event for event in events if event_occurs_on(event, day, tz)]


def tasks_on_day(day: datetime.date, tasks: list[Task], tz: str = "UTC") -> list[Task]:
    """Return the tasks due exactly on ``day``, in input order."""
    return [task for task in tasks if task_due_on(task, day, tz)]


def is_task_completed(task: Task) -> bool:
    return task.get("status") == TaskStatus.COMPLETED


def is_task_pending(task: Task) -> bool:
    return not is_task_completed(task)


def day_summary(
    day: datetime.date, events: list[Event], tasks: list[Task], tz: str = "UTC"
) -> DaySummary:
    day_events = events_on_day(day, events, tz)
    day_tasks = tasks_on_day(day, tasks, tz)
    return {
        "day": to_day(day, tz) or pendulum.Date(day.year, day.month, day.day),
        "events": day_events,
        "tasks": day_tasks,
        "total_items": len(day_events) + len(day_tasks),
        "has_pending_task": any(is_task_pending(task) for task in day_tasks),
        "has_completed_task": any(is_task_completed(task) for task in day_tasks),
    }


def month_summaries(
    month: datetime.date,
    events: list[Event],
    tasks: list[Task],
    tz: str = "UTC",
    week_starts_on: int = pendulum.SUNDAY,
) -> list[list[DaySummary]]:
    """
    Build one day summary per cell of the month grid.

    Args:
        month: Any day inside the month to lay out
        events: Events to place on the grid
        tasks: Tasks to place on the grid
        tz: Zone used to reduce timestamps to calendar days
        week_starts_on: Weekday of the first column (Monday = 0 ... Sunday = 6)

    Returns:
        Rows of seven summaries covering full weeks
    """
    return [
        [day_summary(day, events, tasks, tz) for day in week]
        for week in month_grid_days(month, week_starts_on)
    ]
