# SPDX-License-Identifier: MIT

from copy import deepcopy

from symera.model.event import Event
from symera.service.calendar import effective_start
from symera.service.dashboard import calculate_task_progress

SORT_OPTIONS = ("date", "name", "progress")


def sort_events(events: list[Event], sort_by: str = "date", tz: str = "UTC") -> list[Event]:
    """
    Sort events for list views. All sorts are stable.

    Args:
        events: Events to sort
        sort_by: "date" (earliest first, undated last), "name" (case-insensitive)
            or "progress" (highest task progress first)
        tz: Zone used to reduce timestamps to calendar days

    Returns:
        A sorted copy of the events
    """
    sorted_events = deepcopy(events)

    match sort_by:
        case "date":
            # Undated events go last, mirroring the far-future sentinel
            dated = [
                event
                for event in sorted_events
                if effective_start(event, tz) is not None
            ]
            undated = [
                event for event in sorted_events if effective_start(event, tz) is None
            ]
            dated.sort(key=lambda event: effective_start(event, tz))  # type: ignore[arg-type, return-value]
            return dated + undated
        case "name":
            sorted_events.sort(key=lambda event: (event.get("name") or "").casefold())
            return sorted_events
        case "progress":
            sorted_events.sort(
                key=lambda event: calculate_task_progress(event.get("tasks") or []),
                reverse=True,
            )
            return sorted_events
    raise ValueError(f"unknown sort option: {sort_by}")
