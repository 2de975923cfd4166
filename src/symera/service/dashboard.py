# SPDX-License-Identifier: MIT

"""
Summary numbers for the dashboard.

Every function here is pure: the reference "now" is always a parameter
(defaulting to the current UTC time only when omitted) and inputs are never
mutated. Missing or unparsable dates are replaced by FAR_FUTURE so that
filters and sorts remain total.
"""

import datetime
import logging
from typing import Optional

import pendulum

from symera.model.date_like import DateLike
from symera.model.event import Event
from symera.model.status import ACTIVE_EVENT_STATUSES, EventStatus
from symera.model.summary import DashboardSummary, EventProgress
from symera.model.task import Task
from symera.service.calendar import effective_start, is_task_completed
from symera.time import FAR_FUTURE, days_between, now_utc, to_day, to_day_or_sentinel

_logger = logging.getLogger(__name__)


def calculate_task_progress(tasks: list[Task]) -> int:
    """
    Percentage of completed tasks, rounded half up.

    Args:
        tasks: Tasks to measure

    Returns:
        Integer in [0, 100]; 0 for an empty list
    """
    total = len(tasks)
    if total == 0:
        return 0
    completed = len([task for task in tasks if is_task_completed(task)])
    # Integer form of floor(100 * completed / total + 0.5)
    return (200 * completed + total) // (2 * total)


def calculate_days_remaining(
    target: Optional[DateLike], now: Optional[datetime.datetime] = None
) -> int:
    """
    Whole calendar days from ``now`` until ``target``, both taken at midnight UTC.

    Negative results mean ``target`` is in the past; the value is not clamped.
    A missing or unparsable target counts as FAR_FUTURE.
    """
    if now is None:
        now = now_utc()
    today = to_day_or_sentinel(now, "UTC")
    target_day = to_day(target, "UTC")
    if target_day is None:
        _logger.debug("days remaining for unreadable date %r uses sentinel", target)
        target_day = FAR_FUTURE
    return days_between(today, target_day)


def _start_or_sentinel(event: Event, tz: str) -> pendulum.Date:
    start = effective_start(event, tz)
    if start is None:
        return FAR_FUTURE
    return start


def _reference_day(reference: Optional[datetime.date], tz: str) -> pendulum.Date:
    if reference is None:
        reference = now_utc()
    return to_day_or_sentinel(reference, tz)


def filter_upcoming_active(
    events: list[Event], reference: Optional[datetime.date] = None, tz: str = "UTC"
) -> list[Event]:
    """
    Events starting on or after ``reference``, earliest first.

    The sort is stable, so events sharing a start day keep their input order.
    Status is not inspected; apply filter_active_events() beforehand.
    """
    reference_day = _reference_day(reference, tz)
    upcoming = [
        event for event in events if _start_or_sentinel(event, tz) >= reference_day
    ]
    return sorted(upcoming, key=lambda event: _start_or_sentinel(event, tz))


def is_active_event(event: Event) -> bool:
    return event.get("status") in ACTIVE_EVENT_STATUSES


def filter_active_events(events: list[Event]) -> list[Event]:
    return [event for event in events if is_active_event(event)]


def count_events_by_status(events: list[Event]) -> dict[EventStatus, int]:
    counts = {status: 0 for status in EventStatus}
    for event in events:
        counts[EventStatus.parse(event.get("status"))] += 1
    return counts


def pending_tasks(tasks: list[Task]) -> list[Task]:
    return [task for task in tasks if not is_task_completed(task)]


def upcoming_within_window(
    events: list[Event],
    reference: Optional[datetime.date] = None,
    window_days: int = 30,
    tz: str = "UTC",
) -> list[Event]:
    """Events starting within ``window_days`` of ``reference`` (inclusive), input order."""
    reference_day = _reference_day(reference, tz)
    window_end = reference_day.add(days=window_days)
    return [
        event
        for event in events
        if reference_day <= _start_or_sentinel(event, tz) <= window_end
    ]


def sort_active_by_start(events: list[Event], tz: str = "UTC") -> list[Event]:
    return sorted(events, key=lambda event: _start_or_sentinel(event, tz))


def next_event_days(
    events: list[Event], now: Optional[datetime.datetime] = None, tz: str = "UTC"
) -> int:
    """Days until the earliest dated upcoming event, or 0 when there is none.

    Undated events sort last under FAR_FUTURE but never count as the next event.
    """
    if now is None:
        now = now_utc()
    upcoming = [
        event
        for event in filter_upcoming_active(events, now, tz)
        if effective_start(event, tz) is not None
    ]
    if len(upcoming) == 0:
        return 0
    return calculate_days_remaining(effective_start(upcoming[0], tz), now)


def suggest_event_status(
    event: Event,
    tasks: list[Task],
    today: Optional[datetime.date] = None,
    manually_set: bool = False,
    tz: str = "UTC",
) -> Optional[EventStatus]:
    """
    Status an event should move to automatically, or None to leave it alone.

    An event happening today becomes in progress. An event in the past whose
    tasks are all completed becomes completed. Cancelled events and statuses
    last set by hand are never changed.

    Args:
        event: The event to inspect
        tasks: The event's tasks
        today: Reference day (defaults to the current UTC day)
        manually_set: Whether the current status was last set by a person
        tz: Zone used to reduce timestamps to calendar days

    Returns:
        The new status, or None when no change applies
    """
    status = EventStatus.parse(event.get("status"))
    if manually_set or status == EventStatus.CANCELLED:
        return None

    start = effective_start(event, tz)
    if start is None:
        return None
    today_day = _reference_day(today, tz)

    if start == today_day and status not in (
        EventStatus.IN_PROGRESS,
        EventStatus.COMPLETED,
    ):
        return EventStatus.IN_PROGRESS

    all_completed = len(tasks) > 0 and all(is_task_completed(task) for task in tasks)
    if start < today_day and all_completed and status != EventStatus.COMPLETED:
        return EventStatus.COMPLETED

    return None


def task_due_label(
    due_date: Optional[DateLike],
    today: Optional[datetime.date] = None,
    tz: str = "UTC",
) -> str:
    """Relative due indicator for a task, e.g. "tomorrow" or "overdue by 2 days"."""
    due = to_day(due_date, tz)
    if due is None:
        return ""
    days = days_between(_reference_day(today, tz), due)

    if days < 0:
        return f"overdue by {abs(days)} day{'s' if days != -1 else ''}"
    elif days == 0:
        return "today"
    elif days == 1:
        return "tomorrow"
    elif days <= 7:
        return f"in {days} days"
    return due.isoformat()


def build_dashboard(
    events: list[Event],
    tasks: list[Task],
    now: Optional[datetime.datetime] = None,
    window_days: int = 30,
    tz: str = "UTC",
) -> DashboardSummary:
    """
    Collect every dashboard metric for one snapshot of events and tasks.

    Args:
        events: All events visible to the user; embedded ``tasks`` feed the progress column
        tasks: All tasks visible to the user
        now: Reference time (defaults to the current UTC time)
        window_days: Look-ahead for the upcoming events list
        tz: Zone used to reduce timestamps to calendar days

    Returns:
        The assembled dashboard summary
    """
    if now is None:
        now = now_utc()
    today = to_day_or_sentinel(now, tz)

    active = filter_active_events(events)
    status_counts = count_events_by_status(active)

    active_by_start: list[EventProgress] = [
        {
            "event": event,
            "start": effective_start(event, tz),
            "progress": calculate_task_progress(event.get("tasks") or []),
        }
        for event in sort_active_by_start(active, tz)
    ]

    summary: DashboardSummary = {
        "generated_for": today,
        "total_events": len(events),
        "active_events": len(active),
        "active_by_status": {
            status: count for status, count in status_counts.items() if count > 0
        },
        "pending_tasks": len(pending_tasks(tasks)),
        "upcoming_events": upcoming_within_window(events, today, window_days, tz),
        "next_event_days": next_event_days(active, now, tz),
        "active_events_by_start": active_by_start,
    }
    _logger.debug(
        "dashboard for %s: %d events, %d active",
        today,
        summary["total_events"],
        summary["active_events"],
    )
    return summary
