"""
Tests for the YAML-backed repositories.
"""

import pytest

from symera import configuration
from symera.errors import SnapshotError
from symera.repository.configuration import CONFIGURATION_REPO
from symera.repository.event import EVENT_REPO
from symera.repository.task import TASK_REPO


def test_missing_snapshot_files_are_empty(data_dir):
    assert EVENT_REPO.get_all_events() == []
    assert TASK_REPO.get_all_tasks() == []


def test_empty_snapshot_file(data_dir):
    configuration.DATA_EVENTS_PATH.write_text("")
    assert EVENT_REPO.get_all_events() == []


def test_snapshot_records_are_normalized(snapshot):
    events = EVENT_REPO.get_all_events()
    assert [event["id"] for event in events] == [1, 2, 3, 4]
    assert events[0]["start_date"] == "2024-01-12"
    assert events[0]["event_type"] == "wedding"
    assert events[1]["start_date"] == "2024-01-20"

    tasks = TASK_REPO.get_all_tasks()
    assert [task["event_id"] for task in tasks] == [1, 1, 2, 4]
    assert tasks[2]["due_date"] == "2024-01-19"
    assert tasks[3]["due_date"] is None


def test_events_with_tasks(snapshot):
    tasks = TASK_REPO.get_all_tasks()
    events = {event["id"]: event for event in EVENT_REPO.get_events_with_tasks(tasks)}
    assert [task["id"] for task in events[1]["tasks"] or []] == [10, 11]
    assert [task["id"] for task in events[2]["tasks"] or []] == [12]
    assert events[3]["tasks"] == []


def test_embedded_tasks_survive_without_task_file(data_dir):
    configuration.DATA_EVENTS_PATH.write_text(
        "- id: 1\n  name: Gala\n  tasks:\n    - id: 5\n      status: completed\n"
    )
    events = EVENT_REPO.get_events_with_tasks([])
    assert [task["id"] for task in events[0]["tasks"] or []] == [5]


def test_returned_events_are_copies(snapshot):
    EVENT_REPO.get_all_events()[0]["name"] = "changed"
    assert EVENT_REPO.get_all_events()[0]["name"] == "Wedding"


def test_snapshot_that_is_not_a_list(data_dir):
    configuration.DATA_EVENTS_PATH.write_text("id: 1\nname: Gala\n")
    with pytest.raises(SnapshotError):
        EVENT_REPO.get_all_events()


def test_snapshot_with_invalid_yaml(data_dir):
    configuration.DATA_TASKS_PATH.write_text("- id: 1\n  title: [unclosed\n")
    with pytest.raises(SnapshotError):
        TASK_REPO.get_all_tasks()


def test_configuration_defaults_without_file(data_dir):
    config = CONFIGURATION_REPO.get_config()
    assert config["timezone"] == "UTC"
    assert config["upcoming_window_days"] == 30
    assert config["week_starts_on"] == 6


def test_configuration_fills_missing_keys(data_dir):
    configuration.APP_CONFIG_PATH.write_text("timezone: Europe/Lisbon\n")
    config = CONFIGURATION_REPO.get_config()
    assert config["timezone"] == "Europe/Lisbon"
    assert config["upcoming_window_days"] == 30
    assert config["show_header"] is True


def test_configuration_update_and_flush(data_dir):
    CONFIGURATION_REPO.update_config(timezone="Asia/Tokyo", upcoming_window_days=14)
    CONFIGURATION_REPO.flush()

    CONFIGURATION_REPO.reset()
    config = CONFIGURATION_REPO.get_config()
    assert config["timezone"] == "Asia/Tokyo"
    assert config["upcoming_window_days"] == 14


def test_flush_without_changes_writes_nothing(data_dir):
    CONFIGURATION_REPO.get_config()
    CONFIGURATION_REPO.flush()
    assert not configuration.APP_CONFIG_PATH.exists()
