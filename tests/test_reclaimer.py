# tests/test_reclaimer.py

from __future__ import annotations

import asyncio
from datetime import timedelta

import pytest

from task_dispatcher.tasks.dispatcher import TaskDispatcher
from task_dispatcher.tasks.reclaimer import run_reclaimer
from task_dispatcher.tasks.task_models import TaskStatus

from .fakes import FakeTaskRepo, FixedClock, unfinished


@pytest.mark.asyncio
async def test_reclaimer_reverts_stale_claims() -> None:
    clock = FixedClock()
    repo = FakeTaskRepo(unfinished("p1", "p2"))
    dispatcher = TaskDispatcher(repo, clock=clock)
    dispatcher.claim("w1")
    clock.advance(hours=4)
    dispatcher.claim("w2")  # fresh claim, must survive

    runner = asyncio.create_task(
        run_reclaimer(dispatcher, interval_seconds=0.01, timeout_seconds=3 * 3600)
    )
    await asyncio.sleep(0.1)
    runner.cancel()
    with pytest.raises(asyncio.CancelledError):
        await runner

    assert repo.tasks[0].status == TaskStatus.UNFINISHED
    assert repo.tasks[1].status == TaskStatus.PROCESSING
    assert repo.tasks[1].worker_name == "w2"


@pytest.mark.asyncio
async def test_reclaimer_survives_failing_pass() -> None:
    calls = {"n": 0}

    class FlakyDispatcher:
        def reclaim_stale(self, now=None, timeout: timedelta | None = None):
            calls["n"] += 1
            raise RuntimeError("boom")

    runner = asyncio.create_task(run_reclaimer(FlakyDispatcher(), interval_seconds=0.01))
    await asyncio.sleep(0.1)
    runner.cancel()
    with pytest.raises(asyncio.CancelledError):
        await runner

    assert calls["n"] >= 2
