"""
Adapter: In-memory task repository.

Implements TaskRepository port.
Keeps every task in a process-local dict guarded by a single lock.
Nothing survives a restart.
"""

import logging
import threading
from dataclasses import dataclass

from todo_service.domain.tasks.entities import Task, TaskData, TaskId
from todo_service.domain.tasks.errors import TaskRepositoryNotFoundError
from todo_service.domain.tasks.ports import TaskRepository

logger = logging.getLogger(__name__)


@dataclass
class _PersistedTask:
    """Stored form of a task. The id lives in the dict key only."""

    task: str


class InMemoryTaskRepositoryAdapter(TaskRepository):
    """In-memory implementation of the task repository.

    Holds the last assigned id and the id -> task mapping. Every
    operation runs entirely under ``self._lock``, so concurrent callers
    see the store change one whole operation at a time. Ids are never
    reused: the counter keeps growing across deletions.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._last_id = 0
        self._storage: dict[TaskId, _PersistedTask] = {}

    def create(self, data: TaskData) -> Task:
        """Store new task content under the next id.

        Args:
            data: Content of the task to store.

        Returns:
            The stored task with its freshly assigned id.
        """
        with self._lock:
            task_id = TaskId(self._last_id + 1)
            self._last_id = task_id.value
            self._storage[task_id] = _PersistedTask(task=data.task)
        logger.debug("Stored task id=%s", task_id)
        return Task(id=task_id, task=data.task)

    def get(self, task_id: TaskId) -> Task:
        """Return the task stored under an id.

        Raises:
            TaskRepositoryNotFoundError: If no task is stored under the id.
        """
        with self._lock:
            persisted = self._storage.get(task_id)
            if persisted is None:
                raise TaskRepositoryNotFoundError(task_id)
            return Task(id=task_id, task=persisted.task)

    def list(self) -> list[Task]:
        """Return every stored task ordered by id ascending."""
        with self._lock:
            tasks = [
                Task(id=task_id, task=persisted.task)
                for task_id, persisted in self._storage.items()
            ]
        return sorted(tasks, key=lambda t: t.id)

    def delete(self, task_id: TaskId) -> None:
        """Remove the task stored under an id.

        Raises:
            TaskRepositoryNotFoundError: If no task is stored under the id.
        """
        with self._lock:
            if self._storage.pop(task_id, None) is None:
                raise TaskRepositoryNotFoundError(task_id)
        logger.debug("Removed task id=%s", task_id)

    def update(self, task: Task) -> None:
        """Replace the description of an existing task.

        Never inserts: updating an unknown id is an error.

        Raises:
            TaskRepositoryNotFoundError: If no task is stored under task.id.
        """
        with self._lock:
            if task.id not in self._storage:
                raise TaskRepositoryNotFoundError(task.id)
            self._storage[task.id] = _PersistedTask(task=task.task)
        logger.debug("Replaced task id=%s", task.id)
