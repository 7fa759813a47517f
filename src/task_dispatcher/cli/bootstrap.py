# src/task_dispatcher/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- loads the task snapshot and wires the dispatcher into AppState.
"""

from __future__ import annotations

import logging
from datetime import timedelta

from ..config import get_settings
from ..core.state import AppState
from ..tasks.dispatcher import TaskDispatcher
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().

    A missing or broken snapshot is not fatal: the dispatcher starts with no tasks.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = TaskStore(settings.tasks_path)
    if not store.load():
        logger.warning("Dispatcher starting with an empty task list (snapshot=%s)", store.path)

    dispatcher = TaskDispatcher(
        store,
        utc_offset_hours=settings.utc_offset_hours,
        stale_timeout=timedelta(seconds=settings.reclaim_timeout_seconds),
    )
    return AppState(settings=settings, task_store=store, dispatcher=dispatcher)
