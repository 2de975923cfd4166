# SPDX-License-Identifier: MIT

from symera.model.status import EventStatus, TaskPriority, TaskStatus

# Color constant for completed tasks
COMPLETED_TASK_COLOR = "bright_black"

PENDING_INDICATOR_COLOR = "dark_orange"
DONE_INDICATOR_COLOR = "green"

EVENT_STATUS_COLORS: dict[EventStatus, str] = {
    EventStatus.PLANNING: "plum1",
    EventStatus.CONFIRMED: "bright_blue",
    EventStatus.IN_PROGRESS: "gold1",
    EventStatus.COMPLETED: "green",
    EventStatus.CANCELLED: "red",
    EventStatus.ACTIVE: "plum1",
    EventStatus.UNKNOWN: "white",
}

TASK_STATUS_COLORS: dict[TaskStatus, str] = {
    TaskStatus.TODO: "white",
    TaskStatus.IN_PROGRESS: "bright_blue",
    TaskStatus.COMPLETED: COMPLETED_TASK_COLOR,
    TaskStatus.UNKNOWN: "white",
}

TASK_PRIORITY_COLORS: dict[TaskPriority, str] = {
    TaskPriority.HIGH: "red",
    TaskPriority.MEDIUM: "yellow",
    TaskPriority.LOW: "green",
    TaskPriority.UNKNOWN: "white",
}


def event_status_color(status: str) -> str:
    return EVENT_STATUS_COLORS[EventStatus.parse(status)]


def task_status_color(status: str) -> str:
    return TASK_STATUS_COLORS[TaskStatus.parse(status)]


def task_priority_color(priority: str) -> str:
    return TASK_PRIORITY_COLORS[TaskPriority.parse(priority)]
