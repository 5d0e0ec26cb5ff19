"""
FastAPI router for the tasks bounded context.

All routes delegate to the task controller. No business logic here.
Request shape is validated by Pydantic schemas, task content by the domain.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, Path

from todo_service.application.tasks.dtos import (
    CreateTaskCommand,
    TaskResult,
    UpdateTaskCommand,
)
from todo_service.application.tasks.ports import TaskControllerPort
from todo_service.domain.tasks.entities import TASK_ID_MAX
from todo_service.interfaces.tasks.dependencies import get_task_controller
from todo_service.interfaces.tasks.schemas import (
    ErrorResponse,
    MessageResponse,
    TaskDataRequest,
    TaskResponse,
)

router = APIRouter(prefix="/tasks", tags=["tasks"])


def _to_response(result: TaskResult) -> TaskResponse:
    return TaskResponse(id=result.id, task=result.task)


@router.get(
    "",
    response_model=list[TaskResponse],
    summary="List tasks",
    description="Return every task ordered by id.",
)
def list_tasks(
    controller: TaskControllerPort = Depends(get_task_controller),
) -> list[TaskResponse]:
    """List all tasks."""
    return [_to_response(r) for r in controller.list()]


@router.post(
    "",
    response_model=TaskResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Create a task",
    description="Create a task and return it with its assigned id.",
)
def create_task(
    request: TaskDataRequest,
    controller: TaskControllerPort = Depends(get_task_controller),
) -> TaskResponse:
    """Create a new task."""
    result = controller.create(CreateTaskCommand(task=request.task))
    return _to_response(result)


@router.get(
    "/{task_id}",
    response_model=TaskResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get a task",
)
def get_task(
    task_id: int = Path(..., ge=0, le=TASK_ID_MAX, description="Task identifier"),
    controller: TaskControllerPort = Depends(get_task_controller),
) -> TaskResponse:
    """Return a single task by id."""
    return _to_response(controller.get(task_id))


@router.put(
    "/{task_id}",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Update a task",
    description="Replace the description of an existing task.",
)
def update_task(
    request: TaskDataRequest,
    task_id: int = Path(..., ge=0, le=TASK_ID_MAX, description="Task identifier"),
    controller: TaskControllerPort = Depends(get_task_controller),
) -> MessageResponse:
    """Update the description of a task."""
    controller.update(UpdateTaskCommand(id=task_id, task=request.task))
    return MessageResponse(message=f"Successfully updated: [{task_id}]")


@router.delete(
    "/{task_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Delete a task",
)
def delete_task(
    task_id: int = Path(..., ge=0, le=TASK_ID_MAX, description="Task identifier"),
    controller: TaskControllerPort = Depends(get_task_controller),
) -> MessageResponse:
    """Delete a task by id."""
    controller.delete(task_id)
    return MessageResponse(message=f"Successfully deleted: [{task_id}]")
