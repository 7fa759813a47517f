# src/task_dispatcher/tasks/reclaimer.py

from __future__ import annotations

"""
Staleness reclaimer.

A small polling loop that, every interval:
- asks the dispatcher to revert processing tasks older than the timeout,
- logs what was handed back to the queue.

It shares the dispatcher's lock with request handlers, so it runs the pass in a
worker thread instead of blocking the event loop while waiting for the lock.
"""

import asyncio
import logging
from datetime import timedelta

from .dispatcher import TaskDispatcher

logger = logging.getLogger(__name__)


async def run_reclaimer(
        dispatcher: TaskDispatcher,
        *,
        interval_seconds: float = 3600.0,
        timeout_seconds: float = 10800.0,
) -> None:
    """
    Every interval_seconds:
    - call dispatcher.reclaim_stale(timeout=timeout_seconds)
    - a failing pass is logged and the loop keeps going

    To stop the reclaimer, cancel the coroutine/task.
    """
    sleep_s = max(0.01, float(interval_seconds))
    timeout = timedelta(seconds=max(0.0, float(timeout_seconds)))

    logger.info(
        "Reclaimer started interval=%.0fs timeout=%.0fs", sleep_s, timeout.total_seconds()
    )
    while True:
        await asyncio.sleep(sleep_s)

        try:
            report = await asyncio.to_thread(dispatcher.reclaim_stale, timeout=timeout)
        except Exception:
            logger.exception("reclaim_stale failed")
            continue

        if report.reverted:
            logger.info("Reclaimed %d stale task(s): %s", len(report.reverted), report.reverted)
        if not report.persisted:
            logger.warning("Reclaimed tasks were not persisted; snapshot is behind memory")
