"""
Domain entities for the tasks bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass

TASK_ID_MAX = 2**64 - 1


@dataclass(frozen=True, order=True)
class TaskId:
    """Opaque unsigned 64-bit identifier of a task.

    Assigned by the repository, never reused within its lifetime.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"TaskId value must be an int, got {type(self.value).__name__}")
        if not 0 <= self.value <= TASK_ID_MAX:
            raise ValueError(f"TaskId out of range: {self.value}")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class TaskData:
    """Content of a task that has not been assigned an identifier yet."""

    task: str


@dataclass(frozen=True, order=True)
class Task:
    """A persisted todo task.

    Attributes:
        id: Identifier assigned on creation. Never changes.
        task: Free-text description of what needs doing.
    """

    id: TaskId
    task: str
