# src/task_dispatcher/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The dispatcher depends on Protocols instead of concrete implementations.
This keeps the snapshot backend swappable and makes testing easier.
"""

from datetime import datetime
from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """
    Ordered task collection with whole-document persistence.

    `tasks` is mutated in place by the dispatcher; snapshot() must be called
    after every mutation.
    """

    tasks: list[Task]

    def load(self) -> bool: ...
    def snapshot(self) -> bool: ...
    def count_by_status(self) -> dict[str, int]: ...
    def close(self) -> None: ...


class Clock(Protocol):
    """Source of aware 'now' instants (injectable for tests)."""

    def __call__(self) -> datetime: ...
