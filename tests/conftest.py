"""
Shared pytest fixtures and record builders.
"""

import datetime

import pendulum
import pytest

from symera import configuration
from symera.model.event import Event
from symera.model.task import Task
from symera.repository.configuration import CONFIGURATION_REPO
from symera.repository.event import EVENT_REPO
from symera.repository.task import TASK_REPO
from symera.template.event import get_event_template
from symera.template.task import get_task_template
from symera.view import state as view_state

NOW = pendulum.datetime(2024, 1, 10, tz="UTC")

# Well-formed timestamps that leave the supported year range once moved to UTC
OUT_OF_RANGE_TIMESTAMPS = [
    "9999-12-31T23:00:00-12:00",
    "0001-01-01T00:30:00+05:00",
    datetime.datetime(
        9999, 12, 31, 23, tzinfo=datetime.timezone(datetime.timedelta(hours=-12))
    ),
    datetime.datetime(
        1, 1, 1, 0, 30, tzinfo=datetime.timezone(datetime.timedelta(hours=5))
    ),
]


def make_event(id: int, **fields) -> Event:
    """Return a canonical event with the template defaults and ``fields`` applied."""
    event = get_event_template()
    event["id"] = id
    event["name"] = f"Event {id}"
    event.update(fields)  # type: ignore[typeddict-item]
    return event


def make_task(id: int, **fields) -> Task:
    """Return a canonical task with the template defaults and ``fields`` applied."""
    task = get_task_template()
    task["id"] = id
    task["title"] = f"Task {id}"
    task.update(fields)  # type: ignore[typeddict-item]
    return task


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Point configuration and data paths at a temporary directory."""
    config_path = tmp_path / "config"
    config_path.mkdir()
    data_path = tmp_path / "data"
    data_path.mkdir()

    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", data_path)
    monkeypatch.setattr(configuration, "DATA_EVENTS_PATH", data_path / "events.yaml")
    monkeypatch.setattr(configuration, "DATA_TASKS_PATH", data_path / "tasks.yaml")

    CONFIGURATION_REPO.reset()
    EVENT_REPO.reset()
    TASK_REPO.reset()
    yield data_path
    CONFIGURATION_REPO.reset()
    EVENT_REPO.reset()
    TASK_REPO.reset()
    view_state.set_show_header(True)
    view_state.set_no_color(False)


EVENTS_YAML = """\
- id: 1
  name: Wedding
  type: wedding
  status: planning
  startDate: "2024-01-12"
  endDate: "2024-01-14"
- id: 2
  name: Conference
  type: conference
  status: confirmed
  start_date: "2024-01-20"
- id: 3
  name: Old party
  type: social
  status: completed
  startDate: "2023-12-01"
- id: 4
  name: Launch
  type: corporate
  status: in_progress
  date: "2024-01-10"
"""

TASKS_YAML = """\
- id: 10
  eventId: 1
  title: Book venue
  dueDate: "2024-01-11"
  status: completed
  priority: high
- id: 11
  eventId: 1
  title: Send invitations
  dueDate: "2024-01-11"
  status: todo
  priority: medium
- id: 12
  event_id: 2
  title: Print badges
  due_date: "2024-01-19"
  status: in_progress
  priority: low
- id: 13
  eventId: 4
  title: Press release
  status: todo
  priority: high
"""


@pytest.fixture
def snapshot(data_dir):
    """Write a small events/tasks snapshot into the temporary data directory."""
    configuration.DATA_EVENTS_PATH.write_text(EVENTS_YAML)
    configuration.DATA_TASKS_PATH.write_text(TASKS_YAML)
    return data_dir
