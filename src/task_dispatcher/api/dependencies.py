"""API dependency injection.

The composed AppState is attached to ``app.state`` by create_app(); endpoints
pull the dispatcher through these dependencies so tests can build an app over
any store.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from ..core.state import AppState
from ..tasks.dispatcher import TaskDispatcher


def get_app_state(request: Request) -> AppState:
    return request.app.state.app_state


def get_dispatcher(state: Annotated[AppState, Depends(get_app_state)]) -> TaskDispatcher:
    return state.dispatcher


AppStateDep = Annotated[AppState, Depends(get_app_state)]
DispatcherDep = Annotated[TaskDispatcher, Depends(get_dispatcher)]


def worker_identity(worker_name: str | None, request: Request) -> str:
    """Explicit worker_name wins; otherwise the caller's IP stands in for it."""
    name = (worker_name or "").strip()
    if name:
        return name
    if request.client is not None and request.client.host:
        return request.client.host
    return "unknown"
