"""
Domain service: Task content validation and repository delegation.

Pure business logic. No framework imports. No IO.

A task description is invalid only when it is the empty string.
Whitespace-only descriptions are accepted as they are.
"""

from todo_service.domain.tasks.entities import Task, TaskData, TaskId
from todo_service.domain.tasks.errors import (
    TaskDataError,
    TaskRepositoryNotFoundError,
    lookup_error_from_repository,
    update_error_from_data_error,
    update_error_from_repository,
)
from todo_service.domain.tasks.ports import TaskRepository, TaskServicePort


def validate_task(task: str) -> None:
    """Check a task description.

    Raises:
        TaskDataError: If the description is the empty string.
    """
    if task == "":
        raise TaskDataError(task)


class TaskService(TaskServicePort):
    """Domain service guarding mutating repository calls.

    Mutations are validated before the repository is touched, so a
    rejected request leaves the store unchanged. Reads pass straight
    through, with repository errors translated into service errors.
    """

    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def create(self, data: TaskData) -> Task:
        validate_task(data.task)
        return self._repository.create(data)

    def get(self, task_id: TaskId) -> Task:
        try:
            return self._repository.get(task_id)
        except TaskRepositoryNotFoundError as err:
            raise lookup_error_from_repository(err) from err

    def list(self) -> list[Task]:
        return self._repository.list()

    def delete(self, task_id: TaskId) -> None:
        try:
            self._repository.delete(task_id)
        except TaskRepositoryNotFoundError as err:
            raise lookup_error_from_repository(err) from err

    def update(self, task: Task) -> None:
        """Validate the new description, then replace the stored one.

        Raises:
            TaskUpdateError: Data branch if the description is empty,
                lookup branch if the task does not exist.
        """
        try:
            validate_task(task.task)
        except TaskDataError as err:
            raise update_error_from_data_error(err) from err

        try:
            self._repository.update(task)
        except TaskRepositoryNotFoundError as err:
            raise update_error_from_repository(err) from err
