"""
Data Transfer Objects for the tasks application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior beyond conversion
to and from domain entities.
"""

from dataclasses import dataclass

from todo_service.domain.tasks.entities import Task, TaskData, TaskId


@dataclass(frozen=True)
class CreateTaskCommand:
    """Input DTO for creating a task.

    Attributes:
        task: Description of the new task.
    """

    task: str

    def to_domain(self) -> TaskData:
        return TaskData(task=self.task)


@dataclass(frozen=True)
class UpdateTaskCommand:
    """Input DTO for replacing the description of a task.

    Attributes:
        id: Identifier of the task to update.
        task: New description.
    """

    id: int
    task: str

    def to_domain(self) -> Task:
        return Task(id=TaskId(self.id), task=self.task)


@dataclass(frozen=True)
class TaskResult:
    """Output DTO for a single task.

    Attributes:
        id: Identifier of the task.
        task: Description of the task.
    """

    id: int
    task: str

    @classmethod
    def from_domain(cls, task: Task) -> "TaskResult":
        return cls(id=task.id.value, task=task.task)
