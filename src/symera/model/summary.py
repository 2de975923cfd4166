# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from symera.model.event import Event
from symera.model.status import EventStatus
from symera.model.task import Task


class DaySummary(TypedDict):
    day: pendulum.Date
    events: list[Event]
    tasks: list[Task]
    total_items: int
    has_pending_task: bool
    has_completed_task: bool


class EventProgress(TypedDict):
    event: Event
    start: Optional[pendulum.Date]
    progress: int


class DashboardSummary(TypedDict):
    generated_for: pendulum.Date
    total_events: int
    active_events: int
    active_by_status: dict[EventStatus, int]
    pending_tasks: int
    upcoming_events: list[Event]
    next_event_days: int
    active_events_by_start: list[EventProgress]
