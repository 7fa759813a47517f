# src/task_dispatcher/tasks/dispatcher.py

from __future__ import annotations

"""
Task lifecycle engine.

    unfinished --claim--> processing --complete--> finished
    processing --withdraw--> unfinished
    processing --reclaim(timeout)--> unfinished

Every operation runs as one critical section under a private lock:
scan the store in order, mutate in place, write a snapshot, return a copy.
"""

import logging
import threading
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta, timezone

from ..core.ports import Clock, TaskRepo
from .task_models import Task, TaskStatus, fixed_offset, format_time, parse_time

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True, frozen=True)
class DispatchOutcome:
    """
    Result of claim / complete / withdraw.

    ok=False means "nothing matched" (no task available, or not found / not
    owned by the caller). persisted=False means the transition was applied in
    memory but the snapshot write failed.
    """

    ok: bool
    task: Task | None = None
    persisted: bool = True


@dataclass(slots=True, frozen=True)
class ReclaimReport:
    reverted: list[str] = field(default_factory=list)
    persisted: bool = True


def _require_worker(worker_name: str) -> str:
    name = (worker_name or "").strip()
    if not name:
        raise ValueError("worker_name is required")
    return name


class TaskDispatcher:
    """Owns the task store and serializes every read-modify-write on it."""

    def __init__(
        self,
        store: TaskRepo,
        *,
        utc_offset_hours: float = 8.0,
        stale_timeout: timedelta = timedelta(hours=3),
        clock: Clock = _utc_now,
    ) -> None:
        self._store = store
        self._lock = threading.Lock()
        self._tz = fixed_offset(utc_offset_hours)
        self._stale_timeout = stale_timeout
        self._clock = clock

    @property
    def tz(self) -> timezone:
        return self._tz

    def _now(self, now: datetime | None) -> datetime:
        moment = self._clock() if now is None else now
        if moment.tzinfo is None:
            raise ValueError("naive datetime; pass an aware instant")
        return moment.astimezone(self._tz)

    # ---- worker operations ----

    def claim(self, worker_name: str, *, now: datetime | None = None) -> DispatchOutcome:
        worker = _require_worker(worker_name)
        with self._lock:
            stamp = format_time(self._now(now), self._tz)
            for task in self._store.tasks:
                if task.status != TaskStatus.UNFINISHED:
                    continue
                task.status = TaskStatus.PROCESSING
                task.worker_name = worker
                task.assigned_time = stamp
                task.finished_time = ""
                task.execute_count += 1
                persisted = self._store.snapshot()
                logger.info(
                    "Task %r claimed by %s (execute_count=%d)",
                    task.pattern,
                    worker,
                    task.execute_count,
                )
                return DispatchOutcome(ok=True, task=replace(task), persisted=persisted)

        logger.debug("No unfinished task for %s", worker)
        return DispatchOutcome(ok=False)

    def complete(
        self, pattern: str, worker_name: str, *, now: datetime | None = None
    ) -> DispatchOutcome:
        worker = _require_worker(worker_name)
        with self._lock:
            stamp = format_time(self._now(now), self._tz)
            for task in self._store.tasks:
                if (
                    task.pattern == pattern
                    and task.worker_name == worker
                    and task.status == TaskStatus.PROCESSING
                ):
                    task.status = TaskStatus.FINISHED
                    task.finished_time = stamp
                    persisted = self._store.snapshot()
                    logger.info("Task %r finished by %s", task.pattern, worker)
                    return DispatchOutcome(ok=True, task=replace(task), persisted=persisted)

        # Unknown pattern, foreign owner and wrong status all land here.
        logger.info("Complete rejected: %r is not processing for %s", pattern, worker)
        return DispatchOutcome(ok=False)

    def withdraw(self, worker_name: str) -> DispatchOutcome:
        worker = _require_worker(worker_name)
        with self._lock:
            for task in self._store.tasks:
                if task.status == TaskStatus.PROCESSING and task.worker_name == worker:
                    task.status = TaskStatus.UNFINISHED
                    task.worker_name = ""
                    task.assigned_time = ""
                    task.finished_time = ""
                    persisted = self._store.snapshot()
                    logger.info("Task %r withdrawn by %s", task.pattern, worker)
                    return DispatchOutcome(ok=True, task=replace(task), persisted=persisted)

        logger.info("Withdraw rejected: %s holds no task", worker)
        return DispatchOutcome(ok=False)

    # ---- background ----

    def reclaim_stale(
        self, now: datetime | None = None, timeout: timedelta | None = None
    ) -> ReclaimReport:
        """
        Revert processing tasks assigned longer than `timeout` ago.

        Tasks whose assigned_time is missing or unparsable are left alone.
        One snapshot is written after the scan, and only if something changed.
        """
        limit = self._stale_timeout if timeout is None else timeout
        with self._lock:
            moment = self._now(now)
            reverted: list[str] = []
            for task in self._store.tasks:
                if task.status != TaskStatus.PROCESSING:
                    continue
                assigned = parse_time(task.assigned_time, self._tz)
                if assigned is None:
                    logger.debug(
                        "Skipping %r: unusable assigned_time %r", task.pattern, task.assigned_time
                    )
                    continue
                if moment - assigned <= limit:
                    continue
                logger.info(
                    "Reclaiming %r from %s (assigned %s)",
                    task.pattern,
                    task.worker_name,
                    task.assigned_time,
                )
                task.status = TaskStatus.UNFINISHED
                task.worker_name = ""
                task.assigned_time = ""
                reverted.append(task.pattern)

            if not reverted:
                return ReclaimReport()
            return ReclaimReport(reverted=reverted, persisted=self._store.snapshot())

    # ---- read side ----

    def list_tasks(self) -> list[Task]:
        with self._lock:
            return [replace(t) for t in self._store.tasks]

    def status_counts(self) -> dict[str, int]:
        with self._lock:
            return self._store.count_by_status()
