# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from task_dispatcher.api.server import create_app
from task_dispatcher.core.state import AppState
from task_dispatcher.tasks.dispatcher import TaskDispatcher
from task_dispatcher.tasks.task_store import TaskStore

from .fakes import FixedClock, unfinished


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the API.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="task-dispatcher-test",
        data_dir=tmp_path / "data",
        tasks_path=tmp_path / "task.json",
        utc_offset_hours=8.0,
        # The API tests drive reclaim explicitly.
        reclaim_enabled=False,
        reclaim_interval_seconds=3600.0,
        reclaim_timeout_seconds=10800.0,
    )


@pytest.fixture()
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    """Real JSON-backed store seeded with three unfinished tasks."""
    s = TaskStore(settings.tasks_path)
    s.tasks = unfinished("p1", "p2", "p3")
    assert s.snapshot()
    return s


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore, clock: FixedClock) -> AppState:
    dispatcher = TaskDispatcher(store, utc_offset_hours=settings.utc_offset_hours, clock=clock)
    return AppState(settings=settings, task_store=store, dispatcher=dispatcher)


@pytest.fixture()
def client(state: AppState):
    with TestClient(create_app(state)) as c:
        yield c
