"""
Unit tests for symera.service.dashboard.
"""

import pendulum
import pytest

from symera.model.status import EventStatus
from symera.service.dashboard import (
    build_dashboard,
    calculate_days_remaining,
    calculate_task_progress,
    count_events_by_status,
    filter_active_events,
    filter_upcoming_active,
    is_active_event,
    next_event_days,
    pending_tasks,
    suggest_event_status,
    task_due_label,
    upcoming_within_window,
)
from symera.time import FAR_FUTURE, days_between
from conftest import NOW, OUT_OF_RANGE_TIMESTAMPS, make_event, make_task

TODAY = pendulum.Date(2024, 1, 10)


def _tasks(completed: int, total: int):
    return [
        make_task(i, status="completed" if i < completed else "todo")
        for i in range(total)
    ]


# ---------------------------------------------------------------------------
# calculate_task_progress
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "completed, total, expected",
    [
        (0, 0, 0),
        (0, 4, 0),
        (1, 3, 33),
        (1, 2, 50),
        (2, 3, 67),
        (1, 8, 13),
        (3, 8, 38),
        (5, 5, 100),
    ],
)
def test_calculate_task_progress(completed, total, expected):
    assert calculate_task_progress(_tasks(completed, total)) == expected


def test_progress_counts_only_exact_completed_status():
    tasks = [make_task(1, status="done"), make_task(2, status="completed")]
    assert calculate_task_progress(tasks) == 50


# ---------------------------------------------------------------------------
# calculate_days_remaining
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "target, expected",
    [("2024-01-15", 5), ("2024-01-05", -5), ("2024-01-10", 0)],
)
def test_calculate_days_remaining(target, expected):
    assert calculate_days_remaining(target, NOW) == expected


def test_days_remaining_ignores_time_of_day():
    late = pendulum.datetime(2024, 1, 10, 23, 59, tz="UTC")
    assert calculate_days_remaining("2024-01-11", late) == 1


def test_days_remaining_counts_in_utc():
    # 23:00 at UTC-5 on the 15th is already the 16th in UTC
    assert calculate_days_remaining("2024-01-15T23:00:00-05:00", NOW) == 6


@pytest.mark.parametrize("target", [None, "", "not-a-date", *OUT_OF_RANGE_TIMESTAMPS])
def test_days_remaining_for_missing_target_uses_far_future(target):
    assert calculate_days_remaining(target, NOW) == days_between(TODAY, FAR_FUTURE)


# ---------------------------------------------------------------------------
# active / upcoming filters
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "status, active",
    [
        ("planning", True),
        ("confirmed", True),
        ("in_progress", True),
        ("active", True),
        ("completed", False),
        ("cancelled", False),
        ("Planning", False),
        (None, False),
    ],
)
def test_is_active_event(status, active):
    assert is_active_event(make_event(1, status=status)) is active


def test_filter_active_events_keeps_order():
    events = [
        make_event(1, status="confirmed"),
        make_event(2, status="completed"),
        make_event(3, status="planning"),
    ]
    assert [event["id"] for event in filter_active_events(events)] == [1, 3]


def test_filter_upcoming_active_sorts_by_start():
    events = [
        make_event(1, start_date="2024-01-20"),
        make_event(2, start_date="2024-01-09"),
        make_event(3, date="2024-01-10"),
        make_event(4, start_date="2024-01-12"),
    ]
    upcoming = filter_upcoming_active(events, TODAY)
    assert [event["id"] for event in upcoming] == [3, 4, 1]


def test_filter_upcoming_active_is_stable_and_idempotent():
    events = [
        make_event(1, start_date="2024-01-12"),
        make_event(2, start_date="2024-01-11"),
        make_event(3, start_date="2024-01-12"),
    ]
    once = filter_upcoming_active(events, TODAY)
    assert [event["id"] for event in once] == [2, 1, 3]
    assert filter_upcoming_active(once, TODAY) == once


def test_filter_upcoming_active_puts_undated_events_last():
    events = [make_event(1), make_event(2, start_date="2024-02-01")]
    assert [event["id"] for event in filter_upcoming_active(events, TODAY)] == [2, 1]


def test_filter_upcoming_active_does_not_mutate_input():
    events = [make_event(1, start_date="2024-01-20"), make_event(2, date="2024-01-11")]
    filter_upcoming_active(events, TODAY)
    assert [event["id"] for event in events] == [1, 2]


def test_upcoming_within_window_is_inclusive():
    events = [
        make_event(1, start_date="2024-01-09"),
        make_event(2, start_date="2024-01-10"),
        make_event(3, start_date="2024-02-09"),
        make_event(4, start_date="2024-02-10"),
        make_event(5),
    ]
    upcoming = upcoming_within_window(events, TODAY, window_days=30)
    assert [event["id"] for event in upcoming] == [2, 3]


def test_upcoming_within_window_keeps_input_order():
    events = [
        make_event(1, start_date="2024-01-25"),
        make_event(2, start_date="2024-01-11"),
    ]
    assert [event["id"] for event in upcoming_within_window(events, TODAY)] == [1, 2]


# ---------------------------------------------------------------------------
# counts
# ---------------------------------------------------------------------------


def test_count_events_by_status_has_every_status():
    events = [
        make_event(1, status="planning"),
        make_event(2, status="planning"),
        make_event(3, status="weird"),
        {"id": 4},
    ]
    counts = count_events_by_status(events)  # type: ignore[arg-type]
    assert set(counts) == set(EventStatus)
    assert counts[EventStatus.PLANNING] == 2
    assert counts[EventStatus.UNKNOWN] == 2
    assert counts[EventStatus.CANCELLED] == 0


def test_pending_tasks():
    tasks = [
        make_task(1, status="completed"),
        make_task(2, status="todo"),
        make_task(3, status="in_progress"),
    ]
    assert [task["id"] for task in pending_tasks(tasks)] == [2, 3]


# ---------------------------------------------------------------------------
# next_event_days
# ---------------------------------------------------------------------------


def test_next_event_days_uses_earliest_upcoming():
    events = [
        make_event(1, start_date="2024-01-20"),
        make_event(2, start_date="2024-01-12"),
        make_event(3, start_date="2024-01-01"),
    ]
    assert next_event_days(events, NOW) == 2


def test_next_event_days_without_upcoming_events():
    assert next_event_days([], NOW) == 0
    assert next_event_days([make_event(1, start_date="2023-12-01")], NOW) == 0


def test_next_event_days_skips_undated_events():
    events = [make_event(1), make_event(2, start_date="2024-01-15")]
    assert next_event_days(events, NOW) == 5
    assert next_event_days([make_event(1)], NOW) == 0


def test_dashboard_with_only_undated_active_event():
    summary = build_dashboard([make_event(1, status="planning")], [], NOW)
    assert summary["active_events"] == 1
    assert summary["upcoming_events"] == []
    assert summary["next_event_days"] == 0


@pytest.mark.parametrize("start", OUT_OF_RANGE_TIMESTAMPS)
def test_dashboard_with_out_of_range_start(start):
    summary = build_dashboard([make_event(1, start_date=start)], [], NOW)
    assert summary["next_event_days"] == 0
    assert summary["active_events_by_start"][0]["start"] is None


# ---------------------------------------------------------------------------
# suggest_event_status
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "status, start, tasks, expected",
    [
        ("planning", "2024-01-10", [], EventStatus.IN_PROGRESS),
        ("confirmed", "2024-01-10", _tasks(1, 1), EventStatus.IN_PROGRESS),
        ("in_progress", "2024-01-10", [], None),
        ("completed", "2024-01-10", [], None),
        ("cancelled", "2024-01-10", [], None),
        ("confirmed", "2024-01-05", _tasks(2, 2), EventStatus.COMPLETED),
        ("in_progress", "2024-01-05", _tasks(2, 2), EventStatus.COMPLETED),
        ("completed", "2024-01-05", _tasks(2, 2), None),
        ("cancelled", "2024-01-05", _tasks(2, 2), None),
        ("confirmed", "2024-01-05", _tasks(1, 2), None),
        ("confirmed", "2024-01-05", [], None),
        ("planning", "2024-01-15", _tasks(1, 1), None),
    ],
)
def test_suggest_event_status(status, start, tasks, expected):
    event = make_event(1, status=status, start_date=start)
    assert suggest_event_status(event, tasks, TODAY) == expected


def test_suggest_event_status_respects_manual_status():
    event = make_event(1, status="planning", start_date="2024-01-10")
    assert suggest_event_status(event, [], TODAY, manually_set=True) is None


def test_suggest_event_status_without_start():
    assert suggest_event_status(make_event(1, status="planning"), [], TODAY) is None


# ---------------------------------------------------------------------------
# task_due_label
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "due, label",
    [
        ("2024-01-08", "overdue by 2 days"),
        ("2024-01-09", "overdue by 1 day"),
        ("2024-01-10", "today"),
        ("2024-01-11", "tomorrow"),
        ("2024-01-13", "in 3 days"),
        ("2024-01-17", "in 7 days"),
        ("2024-01-18", "2024-01-18"),
        (None, ""),
        ("garbage", ""),
    ],
)
def test_task_due_label(due, label):
    assert task_due_label(due, TODAY) == label


# ---------------------------------------------------------------------------
# build_dashboard
# ---------------------------------------------------------------------------


@pytest.fixture
def dashboard_events():
    return [
        make_event(
            1,
            status="planning",
            start_date="2024-01-12",
            tasks=[make_task(10, status="completed"), make_task(11, status="todo")],
        ),
        make_event(2, status="confirmed", start_date="2024-01-20"),
        make_event(3, status="completed", start_date="2023-12-01"),
        make_event(4, status="in_progress", date="2024-01-09"),
        make_event(5, status="cancelled", start_date="2024-01-15"),
    ]


@pytest.fixture
def dashboard_tasks():
    return [
        make_task(10, status="completed"),
        make_task(11, status="todo"),
        make_task(12, status="in_progress"),
        make_task(13, status="done"),
    ]


def test_build_dashboard_counts(dashboard_events, dashboard_tasks):
    summary = build_dashboard(dashboard_events, dashboard_tasks, NOW)

    assert summary["generated_for"] == TODAY
    assert summary["total_events"] == 5
    assert summary["active_events"] == 3
    assert summary["active_by_status"] == {
        EventStatus.PLANNING: 1,
        EventStatus.CONFIRMED: 1,
        EventStatus.IN_PROGRESS: 1,
    }
    assert summary["pending_tasks"] == 3


def test_build_dashboard_upcoming_and_next(dashboard_events, dashboard_tasks):
    summary = build_dashboard(dashboard_events, dashboard_tasks, NOW)

    # Window covers every status, active or not, in input order
    assert [event["id"] for event in summary["upcoming_events"]] == [1, 2, 5]
    # Event 4 started yesterday; the cancelled event 5 is not active
    assert summary["next_event_days"] == 2


def test_build_dashboard_active_events_by_start(dashboard_events, dashboard_tasks):
    summary = build_dashboard(dashboard_events, dashboard_tasks, NOW)

    rows = summary["active_events_by_start"]
    assert [row["event"]["id"] for row in rows] == [4, 1, 2]
    assert [row["start"] for row in rows] == [
        pendulum.Date(2024, 1, 9),
        pendulum.Date(2024, 1, 12),
        pendulum.Date(2024, 1, 20),
    ]
    assert [row["progress"] for row in rows] == [0, 50, 0]


def test_build_dashboard_window(dashboard_events, dashboard_tasks):
    summary = build_dashboard(dashboard_events, dashboard_tasks, NOW, window_days=5)
    assert [event["id"] for event in summary["upcoming_events"]] == [1, 5]


def test_build_dashboard_empty():
    summary = build_dashboard([], [], NOW)
    assert summary["total_events"] == 0
    assert summary["active_events"] == 0
    assert summary["active_by_status"] == {}
    assert summary["pending_tasks"] == 0
    assert summary["upcoming_events"] == []
    assert summary["next_event_days"] == 0
    assert summary["active_events_by_start"] == []
