"""
Dependency injection for the tasks bounded context.

Builds the repository -> service -> controller chain once per
application, and hands the controller to routes through FastAPI
dependencies. Tests can swap the controller with
``app.dependency_overrides[get_task_controller]``.
"""

from fastapi import Request

from todo_service.application.tasks.ports import TaskControllerPort
from todo_service.application.tasks.task_controller import TaskController
from todo_service.domain.tasks.ports import TaskRepository
from todo_service.domain.tasks.task_service import TaskService
from todo_service.infrastructure.tasks.in_memory_task_repository import (
    InMemoryTaskRepositoryAdapter,
)


def build_task_controller(repository: TaskRepository | None = None) -> TaskController:
    """Wire a task controller on top of a repository.

    Args:
        repository: Backing store. A fresh in-memory store when omitted.

    Returns:
        A controller ready to serve requests.
    """
    if repository is None:
        repository = InMemoryTaskRepositoryAdapter()
    return TaskController(task_service=TaskService(repository=repository))


def get_task_controller(request: Request) -> TaskControllerPort:
    """Return the controller attached to the running application."""
    return request.app.state.task_controller
