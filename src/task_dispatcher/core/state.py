# src/task_dispatcher/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.dispatcher import TaskDispatcher
from .ports import TaskRepo


@dataclass
class AppState:
    # Settings object (config.Settings or a test double with the same fields).
    settings: object

    task_store: TaskRepo
    dispatcher: TaskDispatcher
