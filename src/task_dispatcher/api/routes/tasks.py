"""Worker endpoints.

Claim, complete and withdraw. Handlers are plain ``def`` so FastAPI runs them
in its threadpool; the dispatcher lock may block briefly.
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from ...tasks.dispatcher import DispatchOutcome
from ..dependencies import DispatcherDep, worker_identity
from ..models import (
    ClaimTaskRequest,
    CompleteTaskRequest,
    ErrorResponse,
    MessageResponse,
    TaskAssignedResponse,
    WithdrawTaskRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Tasks"])

NOT_PERSISTED = "state not persisted"


def _warning(outcome: DispatchOutcome) -> str | None:
    return None if outcome.persisted else NOT_PERSISTED


@router.post(
    "/getTask",
    response_model=TaskAssignedResponse | MessageResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}},
)
def get_task(
    request: Request,
    dispatcher: DispatcherDep,
    body: ClaimTaskRequest | None = None,
):
    """Claim the first unfinished task."""
    body = body or ClaimTaskRequest()
    worker = worker_identity(body.worker_name, request)
    if body.execute_count is not None:
        logger.debug("Worker %s reports execute_count=%d", worker, body.execute_count)

    outcome = dispatcher.claim(worker)
    if not outcome.ok or outcome.task is None:
        return MessageResponse(message="no tasks available")
    return TaskAssignedResponse(task=outcome.task.pattern, warning=_warning(outcome))


@router.post(
    "/updateTask",
    response_model=MessageResponse,
    response_model_exclude_none=True,
    responses={404: {"model": MessageResponse}, 400: {"model": ErrorResponse}},
)
def update_task(request: Request, dispatcher: DispatcherDep, body: CompleteTaskRequest):
    """Mark the caller's processing task as finished."""
    worker = worker_identity(body.worker_name, request)
    outcome = dispatcher.complete(body.task, worker)
    if not outcome.ok:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": "task not found or not assigned to you"},
        )
    return MessageResponse(message="task updated", warning=_warning(outcome))


@router.post(
    "/withdrawTask",
    response_model=MessageResponse,
    response_model_exclude_none=True,
    responses={400: {"model": MessageResponse}},
)
def withdraw_task(
    request: Request,
    dispatcher: DispatcherDep,
    body: WithdrawTaskRequest | None = None,
):
    """Hand the caller's processing task back to the queue."""
    body = body or WithdrawTaskRequest()
    worker = worker_identity(body.worker_name, request)
    outcome = dispatcher.withdraw(worker)
    if not outcome.ok:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "no task assigned to you"},
        )
    return MessageResponse(message="task withdrawn", warning=_warning(outcome))
