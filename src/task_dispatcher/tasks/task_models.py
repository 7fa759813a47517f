# src/task_dispatcher/tasks/task_models.py

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime, timedelta, timezone
from enum import IntEnum
from typing import Any

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


class TaskStatus(IntEnum):
    """
    Task lifecycle status.

    Stored as an integer in the snapshot file:
      0 -> unfinished, 1 -> processing, 2 -> finished
    """

    UNFINISHED = 0
    PROCESSING = 1
    FINISHED = 2

    @classmethod
    def from_raw(cls, raw: Any) -> TaskStatus:
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise ValueError(f"invalid task status: {raw!r}")
        return cls(raw)


@dataclass(slots=True)
class Task:
    pattern: str
    status: TaskStatus = TaskStatus.UNFINISHED
    worker_name: str = ""
    assigned_time: str = ""
    finished_time: str = ""
    execute_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["status"] = int(self.status)
        return data

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        if not isinstance(raw, dict):
            raise ValueError(f"task record must be an object, got {type(raw).__name__}")
        pattern = raw.get("pattern")
        if not isinstance(pattern, str):
            raise ValueError("task record is missing a string 'pattern'")
        count = raw.get("execute_count") or 0
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise ValueError(f"invalid execute_count for {pattern!r}: {count!r}")
        return cls(
            pattern=pattern,
            status=TaskStatus.from_raw(raw.get("status", 0)),
            worker_name=str(raw.get("worker_name") or ""),
            assigned_time=str(raw.get("assigned_time") or ""),
            finished_time=str(raw.get("finished_time") or ""),
            execute_count=count,
        )


def fixed_offset(hours: float) -> timezone:
    return timezone(timedelta(hours=hours))


def format_time(moment: datetime, tz: timezone) -> str:
    """Render an aware instant as civil time in ``tz`` (second precision)."""
    if moment.tzinfo is None:
        raise ValueError("naive datetime; pass an aware instant")
    return moment.astimezone(tz).strftime(TIME_FORMAT)


def parse_time(raw: str | None, tz: timezone) -> datetime | None:
    """Parse a stored civil-time string back into an aware instant; None if unusable."""
    if not raw:
        return None
    try:
        return datetime.strptime(raw.strip(), TIME_FORMAT).replace(tzinfo=tz)
    except ValueError:
        return None
