# SPDX-License-Identifier: MIT

from symera.model.event import Event
from symera.model.status import EventStatus, EventType


def get_event_template() -> Event:
    return {
        "id": None,
        "name": None,
        "event_type": EventType.OTHER.value,
        "status": EventStatus.PLANNING.value,
        "date": None,
        "start_date": None,
        "end_date": None,
        "start_time": None,
        "end_time": None,
        "location": None,
        "tasks": None,
    }
