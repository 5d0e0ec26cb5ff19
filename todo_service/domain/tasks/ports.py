"""
Port interfaces (ABCs) for the tasks bounded context.

Ports define the contracts that the domain requires from the outside world,
and the contract the domain offers to the application layer.
Infrastructure adapters implement the repository port.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod

from todo_service.domain.tasks.entities import Task, TaskData, TaskId


class TaskRepository(ABC):
    """Port for storing and retrieving tasks.

    Implementations own the task store outright and make every
    operation atomic with respect to the others.
    """

    @abstractmethod
    def create(self, data: TaskData) -> Task:
        """Assign the next id to the data, store it and return the new Task."""
        raise NotImplementedError

    @abstractmethod
    def get(self, task_id: TaskId) -> Task:
        """Return the task stored under an id.

        Raises:
            TaskRepositoryNotFoundError: If no task is stored under the id.
        """
        raise NotImplementedError

    @abstractmethod
    def list(self) -> list[Task]:
        """Return every stored task ordered by id ascending."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, task_id: TaskId) -> None:
        """Remove the task stored under an id.

        Raises:
            TaskRepositoryNotFoundError: If no task is stored under the id.
        """
        raise NotImplementedError

    @abstractmethod
    def update(self, task: Task) -> None:
        """Replace the description of an existing task.

        Raises:
            TaskRepositoryNotFoundError: If no task is stored under task.id.
        """
        raise NotImplementedError


class TaskServicePort(ABC):
    """Port the application layer uses to reach the task domain logic."""

    @abstractmethod
    def create(self, data: TaskData) -> Task:
        """Validate and create a task.

        Raises:
            TaskDataError: If the task description is invalid.
        """
        raise NotImplementedError

    @abstractmethod
    def get(self, task_id: TaskId) -> Task:
        """Return a task.

        Raises:
            TaskLookupError: If the task does not exist.
        """
        raise NotImplementedError

    @abstractmethod
    def list(self) -> list[Task]:
        """Return all tasks ordered by id ascending."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, task_id: TaskId) -> None:
        """Delete a task.

        Raises:
            TaskLookupError: If the task does not exist.
        """
        raise NotImplementedError

    @abstractmethod
    def update(self, task: Task) -> None:
        """Validate and update a task.

        Raises:
            TaskUpdateError: Wrapping TaskDataError or TaskLookupError.
        """
        raise NotImplementedError
