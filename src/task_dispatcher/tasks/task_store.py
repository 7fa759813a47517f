# src/task_dispatcher/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections import Counter
from pathlib import Path

from .task_models import Task, TaskStatus

logger = logging.getLogger(__name__)


class TaskStore:
    """
    JSON snapshot task store.

    The whole ordered task list lives in memory and is mirrored to a single
    JSON document:
    - load() reads the document once at startup
    - snapshot() rewrites it in full after every mutation

    Thread-safety:
    - none here; TaskDispatcher serializes every access under its own lock
    """

    def __init__(self, path: str | Path = "task.json") -> None:
        self._path = Path(path)
        self.tasks: list[Task] = []

    @property
    def path(self) -> Path:
        return self._path

    def __len__(self) -> int:
        return len(self.tasks)

    def close(self) -> None:
        """Compatibility hook for shutdown (no open handles to release)."""
        return

    # ---- persistence ----

    def load(self) -> bool:
        """
        Replace the in-memory list with the snapshot on disk.

        On read or decode failure the store is left empty and False is returned;
        the caller keeps running with zero available tasks.
        """
        self.tasks = []
        if not self._path.exists():
            logger.warning("Task snapshot %s does not exist; starting with no tasks.", self._path)
            return False

        try:
            data = json.loads(self._path.read_text("utf-8"))
            if not isinstance(data, list):
                raise ValueError(f"snapshot root must be a list, got {type(data).__name__}")
            loaded = [Task.from_dict(item) for item in data]
        except Exception:
            logger.exception("Failed to load task snapshot from %s", self._path)
            return False

        self.tasks = loaded
        logger.info("TaskStore ready path=%s total=%d", self._path, len(self.tasks))
        return True

    def snapshot(self) -> bool:
        """
        Overwrite the snapshot with the current list.

        Writes to a temporary sibling and swaps it in with os.replace, so a failed
        write never truncates the previous snapshot. Returns False on failure; the
        in-memory state is kept either way.
        """
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            payload = json.dumps([t.to_dict() for t in self.tasks], ensure_ascii=False, indent=2)
            tmp.write_text(payload, "utf-8")
            os.replace(tmp, self._path)
        except Exception:
            logger.exception("Failed to write task snapshot to %s", self._path)
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            return False

        logger.debug("Task snapshot written path=%s total=%d", self._path, len(self.tasks))
        return True

    # ---- observability ----

    def count_by_status(self) -> dict[str, int]:
        counts = Counter(t.status for t in self.tasks)
        return {status.name.lower(): counts.get(status, 0) for status in TaskStatus}
