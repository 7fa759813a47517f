"""Task dispatcher HTTP API.

FastAPI application exposing the worker operations (claim / complete /
withdraw) and a health check. The staleness reclaimer runs inside the app
lifespan so it lives exactly as long as the server.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .. import __version__
from ..core.state import AppState
from ..tasks.reclaimer import run_reclaimer
from .routes import system_router, tasks_router

logger = logging.getLogger(__name__)


def _start_reclaimer(state: AppState) -> asyncio.Task[None] | None:
    settings = state.settings
    if not getattr(settings, "reclaim_enabled", True):
        logger.info("Reclaimer disabled by settings")
        return None
    return asyncio.create_task(
        run_reclaimer(
            state.dispatcher,
            interval_seconds=getattr(settings, "reclaim_interval_seconds", 3600.0),
            timeout_seconds=getattr(settings, "reclaim_timeout_seconds", 10800.0),
        ),
        name="task-reclaimer",
    )


def create_app(state: AppState) -> FastAPI:
    """Build the FastAPI app over an already composed AppState."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        reclaimer = _start_reclaimer(state)
        try:
            yield
        finally:
            if reclaimer is not None:
                reclaimer.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await reclaimer
            state.task_store.close()

    app = FastAPI(
        title="Task Dispatcher",
        description="Single-queue task dispatcher for polling workers",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.app_state = state

    @app.exception_handler(RequestValidationError)
    async def _invalid_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Invalid request %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "invalid request"},
        )

    @app.middleware("http")
    async def _log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000.0
        client = request.client.host if request.client else "-"
        logger.info(
            "%s %s %s -> %d (%.1f ms)",
            client,
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    app.include_router(system_router)
    app.include_router(tasks_router)
    return app
