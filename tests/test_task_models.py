# tests/test_task_models.py

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from task_dispatcher.tasks.task_models import (
    Task,
    TaskStatus,
    fixed_offset,
    format_time,
    parse_time,
)


def test_status_from_raw() -> None:
    assert TaskStatus.from_raw(1) is TaskStatus.PROCESSING
    for bad in (3, "1", None, True):
        with pytest.raises(ValueError):
            TaskStatus.from_raw(bad)


def test_to_dict_writes_integer_status() -> None:
    data = Task(pattern="p", status=TaskStatus.FINISHED).to_dict()
    assert data == {
        "pattern": "p",
        "status": 2,
        "worker_name": "",
        "assigned_time": "",
        "finished_time": "",
        "execute_count": 0,
    }
    assert type(data["status"]) is int


def test_from_dict_requires_pattern() -> None:
    with pytest.raises(ValueError):
        Task.from_dict({"status": 0})
    with pytest.raises(ValueError):
        Task.from_dict(["p"])
    with pytest.raises(ValueError):
        Task.from_dict({"pattern": "p", "execute_count": -1})


def test_time_round_trip_in_offset() -> None:
    tz = fixed_offset(8)
    moment = datetime(2024, 1, 31, 20, 5, 9, tzinfo=timezone.utc)
    text = format_time(moment, tz)
    assert text == "2024-02-01 04:05:09"
    assert parse_time(text, tz) == moment


def test_format_rejects_naive() -> None:
    with pytest.raises(ValueError):
        format_time(datetime(2024, 1, 1), fixed_offset(0))


def test_parse_time_unusable() -> None:
    tz = timezone(timedelta(hours=8))
    assert parse_time("", tz) is None
    assert parse_time(None, tz) is None
    assert parse_time("2024-13-01 00:00:00", tz) is None


def test_stored_time_is_read_in_current_offset() -> None:
    # The string carries no offset: reading it under another offset moves the instant.
    text = "2024-05-01 10:00:00"
    at_plus8 = parse_time(text, fixed_offset(8))
    at_plus5 = parse_time(text, fixed_offset(5))
    assert at_plus5 - at_plus8 == timedelta(hours=3)
