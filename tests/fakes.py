# tests/fakes.py

from __future__ import annotations

from collections import Counter
from datetime import datetime, timedelta, timezone

from task_dispatcher.tasks.task_models import Task, TaskStatus

TZ = timezone(timedelta(hours=8))
T0 = datetime(2024, 5, 1, 10, 0, 0, tzinfo=TZ)


class FakeTaskRepo:
    """
    In-memory TaskRepo used for dispatcher unit tests.

    Counts snapshot() calls and can be told to fail them, so tests can check
    "persist after every mutation" and the durability-gap path without disk I/O.
    """

    def __init__(self, tasks: list[Task] | None = None, *, fail_snapshot: bool = False) -> None:
        self.tasks: list[Task] = list(tasks or [])
        self.fail_snapshot = fail_snapshot
        self.snapshots = 0
        self.closed = False

    def load(self) -> bool:
        return True

    def snapshot(self) -> bool:
        self.snapshots += 1
        return not self.fail_snapshot

    def count_by_status(self) -> dict[str, int]:
        counts = Counter(t.status for t in self.tasks)
        return {s.name.lower(): counts.get(s, 0) for s in TaskStatus}

    def close(self) -> None:
        self.closed = True


class FixedClock:
    """Callable clock returning a settable aware instant."""

    def __init__(self, now: datetime = T0) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now = self.now + timedelta(**kwargs)


def unfinished(*patterns: str) -> list[Task]:
    return [Task(pattern=p) for p in patterns]
