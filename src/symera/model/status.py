# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import Any, Optional, Self


class _LabelEnum(StrEnum):
    @classmethod
    def parse(cls, value: Optional[Any]) -> Self:
        """Map a free-form label onto a member, falling back to UNKNOWN."""
        if value is None:
            return cls("unknown")
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls("unknown")


class EventStatus(_LabelEnum):
    PLANNING = "planning"
    CONFIRMED = "confirmed"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    # Legacy value still present on older rows
    ACTIVE = "active"
    UNKNOWN = "unknown"


class TaskStatus(_LabelEnum):
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    UNKNOWN = "unknown"


class TaskPriority(_LabelEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    UNKNOWN = "unknown"


class EventType(_LabelEnum):
    WEDDING = "wedding"
    BIRTHDAY = "birthday"
    CORPORATE = "corporate"
    CONFERENCE = "conference"
    SOCIAL = "social"
    OTHER = "other"
    UNKNOWN = "unknown"


ACTIVE_EVENT_STATUSES: frozenset[EventStatus] = frozenset(
    {
        EventStatus.PLANNING,
        EventStatus.CONFIRMED,
        EventStatus.IN_PROGRESS,
        EventStatus.ACTIVE,
    }
)
