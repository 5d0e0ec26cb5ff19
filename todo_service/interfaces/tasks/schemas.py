"""
Pydantic schemas for the tasks API request/response validation.

These schemas define the API contract. Task content is deliberately
not constrained here: validating it is the domain's job, so an empty
description reaches the controller and comes back as a 400.
No business logic belongs here.
"""

from pydantic import BaseModel, Field

from todo_service.domain.tasks.entities import TASK_ID_MAX

TASK_DESCRIPTION = "What needs to be done"


class TaskDataRequest(BaseModel):
    """Request schema for creating or updating a task.

    Attributes:
        task: Description of the task.
    """

    task: str = Field(..., description=TASK_DESCRIPTION)


class TaskResponse(BaseModel):
    """A single task in a response."""

    id: int = Field(..., ge=0, le=TASK_ID_MAX, description="Task identifier")
    task: str = Field(..., description=TASK_DESCRIPTION)


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    error: str
    detail: str | None = None
