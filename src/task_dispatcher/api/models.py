"""API request/response models.

Pydantic models used by the worker-facing endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field

# --- Requests ---


class ClaimTaskRequest(BaseModel):
    """Request for the next unfinished task."""

    model_config = ConfigDict(extra="ignore")

    worker_name: str | None = Field(
        default=None, max_length=200, description="Worker identity (client IP when omitted)"
    )
    execute_count: int | None = Field(
        default=None, ge=0, description="Worker-side run counter, logged only"
    )


class CompleteTaskRequest(BaseModel):
    """Report a claimed task as finished."""

    model_config = ConfigDict(extra="ignore")

    task: str = Field(..., description="Pattern of the claimed task")
    worker_name: str | None = Field(default=None, max_length=200)


class WithdrawTaskRequest(BaseModel):
    """Hand the caller's claimed task back to the queue."""

    model_config = ConfigDict(extra="ignore")

    worker_name: str | None = Field(default=None, max_length=200)


# --- Responses ---


class TaskAssignedResponse(BaseModel):
    task: str
    warning: str | None = None


class MessageResponse(BaseModel):
    message: str
    warning: str | None = None


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
    version: str
    tasks: dict[str, int] = Field(default_factory=dict)
