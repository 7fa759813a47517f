# tests/test_bootstrap.py

from __future__ import annotations

import json

from task_dispatcher.cli.bootstrap import create_initial_state
from task_dispatcher.tasks.task_models import TaskStatus


def test_bootstrap_loads_snapshot(settings) -> None:
    settings.tasks_path.write_text(
        json.dumps([{"pattern": "a", "status": 0, "worker_name": ""}]), "utf-8"
    )

    state = create_initial_state(settings=settings)

    assert settings.data_dir.is_dir()
    assert [t.pattern for t in state.dispatcher.list_tasks()] == ["a"]
    assert state.dispatcher.claim("w1").task.status == TaskStatus.PROCESSING


def test_bootstrap_survives_broken_snapshot(settings) -> None:
    settings.tasks_path.write_text("garbage", "utf-8")

    state = create_initial_state(settings=settings)

    assert state.dispatcher.list_tasks() == []
    assert not state.dispatcher.claim("w1").ok
