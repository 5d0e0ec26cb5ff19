"""
Port interface for the task controller.

The interface layer depends on this contract only, so the
controller can be replaced (for example by a test double)
without touching the routes.
"""

from abc import ABC, abstractmethod

from todo_service.application.tasks.dtos import (
    CreateTaskCommand,
    TaskResult,
    UpdateTaskCommand,
)


class TaskControllerPort(ABC):
    """Port for the task operations exposed to a transport."""

    @abstractmethod
    def create(self, command: CreateTaskCommand) -> TaskResult:
        """Create a task.

        Raises:
            ControllerDataError: If the task data is invalid.
        """
        raise NotImplementedError

    @abstractmethod
    def get(self, task_id: int) -> TaskResult:
        """Return a task.

        Raises:
            ControllerLookupError: If the task does not exist.
        """
        raise NotImplementedError

    @abstractmethod
    def list(self) -> list[TaskResult]:
        """Return all tasks ordered by id ascending."""
        raise NotImplementedError

    @abstractmethod
    def update(self, command: UpdateTaskCommand) -> None:
        """Replace the description of a task.

        Raises:
            ControllerUpdateError: Wrapping a data or lookup error.
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, task_id: int) -> None:
        """Delete a task.

        Raises:
            ControllerLookupError: If the task does not exist.
        """
        raise NotImplementedError
