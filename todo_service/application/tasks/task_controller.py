"""
Controller: Task operations for transports.

Input: CreateTaskCommand, UpdateTaskCommand or a plain task id.
Output: TaskResult / list[TaskResult] / None.
Side effects: Mutations of the task store (create, update, delete).
Failure cases: ControllerDataError, ControllerLookupError, ControllerUpdateError.
"""

import logging

from todo_service.application.tasks.dtos import (
    CreateTaskCommand,
    TaskResult,
    UpdateTaskCommand,
)
from todo_service.application.tasks.errors import (
    controller_data_error,
    controller_lookup_error,
    controller_update_error,
)
from todo_service.application.tasks.ports import TaskControllerPort
from todo_service.domain.tasks.entities import TaskId
from todo_service.domain.tasks.errors import (
    TaskDataError,
    TaskLookupError,
    TaskUpdateError,
)
from todo_service.domain.tasks.ports import TaskServicePort

logger = logging.getLogger(__name__)


class TaskController(TaskControllerPort):
    """Orchestrates task operations on top of the task service.

    Converts DTOs to domain entities on the way down and back on the
    way up, and translates every domain error into its controller
    counterpart. Holds no state of its own.
    """

    def __init__(self, task_service: TaskServicePort) -> None:
        """Initialize the controller.

        Args:
            task_service: Domain service that validates and stores tasks.
        """
        self._task_service = task_service

    def create(self, command: CreateTaskCommand) -> TaskResult:
        """Create a task.

        Args:
            command: Description of the new task.

        Returns:
            The created task with its assigned id.

        Raises:
            ControllerDataError: If the description is invalid.
        """
        try:
            task = self._task_service.create(command.to_domain())
        except TaskDataError as err:
            logger.warning("Rejected task creation: invalid data")
            raise controller_data_error(err) from err

        logger.info("Created task id=%s", task.id)
        return TaskResult.from_domain(task)

    def get(self, task_id: int) -> TaskResult:
        try:
            task = self._task_service.get(TaskId(task_id))
        except TaskLookupError as err:
            raise controller_lookup_error(err) from err
        return TaskResult.from_domain(task)

    def list(self) -> list[TaskResult]:
        return [TaskResult.from_domain(t) for t in self._task_service.list()]

    def update(self, command: UpdateTaskCommand) -> None:
        """Replace the description of a task.

        Args:
            command: Id of the task and its new description.

        Raises:
            ControllerUpdateError: Data branch for an invalid description,
                lookup branch for an unknown id.
        """
        try:
            self._task_service.update(command.to_domain())
        except TaskUpdateError as err:
            logger.warning(
                "Rejected update of task id=%d: %s",
                command.id,
                "invalid data" if err.is_data_error else "not found",
            )
            raise controller_update_error(err) from err

        logger.info("Updated task id=%d", command.id)

    def delete(self, task_id: int) -> None:
        try:
            self._task_service.delete(TaskId(task_id))
        except TaskLookupError as err:
            raise controller_lookup_error(err) from err

        logger.info("Deleted task id=%d", task_id)
