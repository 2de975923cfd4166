# SPDX-License-Identifier: MIT

"""
Mapping of raw records, as delivered by the data API or a snapshot file,
onto the canonical Event and Task shapes.

The API has shipped both camelCase and snake_case spellings of several
fields; each alias is resolved here so the calendar and dashboard code only
ever see one field name. Date values are passed through untouched: parsing
happens in the core, where unparsable values degrade instead of failing.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Optional, cast

from symera.model.event import Event
from symera.model.task import Task
from symera.template.event import get_event_template
from symera.template.task import get_task_template

_logger = logging.getLogger(__name__)

EVENT_ALIASES = {
    "startDate": "start_date",
    "endDate": "end_date",
    "startTime": "start_time",
    "endTime": "end_time",
    "type": "event_type",
    "title": "name",
}

TASK_ALIASES = {
    "dueDate": "due_date",
    "eventId": "event_id",
    "name": "title",
}

_EVENT_DATE_FIELDS = ("date", "start_date", "end_date")


def _canonical_values(
    raw: Mapping[str, Any], aliases: dict[str, str]
) -> dict[str, Any]:
    # Canonical spellings win over aliases when a record carries both
    values = {aliases[key]: value for key, value in raw.items() if key in aliases}
    values.update({key: value for key, value in raw.items() if key not in aliases})
    return values


def _coerce_id(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None


def _normalize_label(value: Any, default: str) -> str:
    if value is None or str(value).strip() == "":
        return default
    return str(value).strip().lower()


def _empty_to_none(value: Any) -> Any:
    if isinstance(value, str) and value.strip() == "":
        return None
    return value


def normalize_task(raw: Mapping[str, Any]) -> Task:
    task = get_task_template()
    values = _canonical_values(raw, TASK_ALIASES)

    for key in task:
        if key in values:
            task[key] = values[key]  # type: ignore[literal-required]

    task["id"] = _coerce_id(task["id"])
    task["event_id"] = _coerce_id(task["event_id"])
    task["due_date"] = _empty_to_none(task["due_date"])
    task["status"] = _normalize_label(task["status"], get_task_template()["status"])
    task["priority"] = _normalize_label(
        task["priority"], get_task_template()["priority"]
    )
    return task


def normalize_event(raw: Mapping[str, Any]) -> Event:
    event = get_event_template()
    values = _canonical_values(raw, EVENT_ALIASES)

    for key in event:
        if key in values:
            event[key] = values[key]  # type: ignore[literal-required]

    event["id"] = _coerce_id(event["id"])
    for field in _EVENT_DATE_FIELDS:
        event[field] = _empty_to_none(event[field])  # type: ignore[literal-required]

    defaults = get_event_template()
    event["status"] = _normalize_label(event["status"], defaults["status"])
    event["event_type"] = _normalize_label(event["event_type"], defaults["event_type"])

    raw_tasks = values.get("tasks")
    if isinstance(raw_tasks, list):
        event["tasks"] = normalize_tasks(raw_tasks)
    else:
        event["tasks"] = None
    return event


def normalize_events(raws: Iterable[Any]) -> list[Event]:
    events = []
    for raw in raws:
        if not isinstance(raw, Mapping):
            _logger.debug("skipping event record that is not a mapping: %r", raw)
            continue
        events.append(normalize_event(cast(Mapping[str, Any], raw)))
    return events


def normalize_tasks(raws: Iterable[Any]) -> list[Task]:
    tasks = []
    for raw in raws:
        if not isinstance(raw, Mapping):
            _logger.debug("skipping task record that is not a mapping: %r", raw)
            continue
        tasks.append(normalize_task(cast(Mapping[str, Any], raw)))
    return tasks
