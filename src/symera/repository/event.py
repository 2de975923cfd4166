# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Optional

from yaml import YAMLError, load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from symera import configuration
from symera.errors import SnapshotError
from symera.model.event import Event
from symera.model.task import Task
from symera.service.normalize import normalize_events

_logger = logging.getLogger(__name__)


class EventRepository:
    """Read-only view over the events snapshot in the data directory."""

    def __init__(self) -> None:
        self._events: Optional[list[Event]] = None

    @property
    def events(self) -> list[Event]:
        if self._events is None:
            self.__load_data()
        if self._events is None:
            raise ValueError()
        return self._events

    def __load_data(self) -> None:
        path = configuration.DATA_EVENTS_PATH
        if not path.is_file():
            _logger.debug("no events snapshot at %s", path)
            self._events = []
            return

        try:
            raw_events = load(path.read_text(), Loader=Loader)
        except YAMLError as e:
            raise SnapshotError(f"{path}: {e}") from e

        if raw_events is None:
            raw_events = []
        if not isinstance(raw_events, list):
            raise SnapshotError(f"{path}: expected a list of events")

        self._events = normalize_events(raw_events)
        _logger.debug("loaded %d events from %s", len(self._events), path)

    def reset(self) -> None:
        self._events = None

    def get_all_events(self) -> list[Event]:
        return deepcopy(self.events)

    def get_events_with_tasks(self, tasks: list[Task]) -> list[Event]:
        """Attach tasks to their events by event_id.

        Tasks embedded in the snapshot are kept when no task references the event.
        """
        tasks_by_event: dict[int, list[Task]] = {}
        for task in tasks:
            if task["event_id"] is not None:
                tasks_by_event.setdefault(task["event_id"], []).append(task)

        events = self.get_all_events()
        for event in events:
            if event["id"] is not None and event["id"] in tasks_by_event:
                event["tasks"] = deepcopy(tasks_by_event[event["id"]])
            elif event["tasks"] is None:
                event["tasks"] = []
        return events


EVENT_REPO = EventRepository()
