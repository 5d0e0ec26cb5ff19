"""
Domain-specific errors for the tasks bounded context.

All errors raised from the domain layer must be defined here,
together with the functions that translate repository errors
into service errors. These are mapped to controller errors at
the application layer.
No framework imports allowed.
"""

from todo_service.domain.tasks.entities import TaskId


class TaskDomainError(Exception):
    """Base error for all tasks domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


# ── Repository errors ────────────────────────────────────────────


class TaskRepositoryNotFoundError(TaskDomainError):
    """Raised by a repository when no task is stored under an id."""

    def __init__(self, task_id: TaskId) -> None:
        super().__init__(f"Task not found in repository: {task_id}")
        self.task_id = task_id


# ── Service errors ───────────────────────────────────────────────


class TaskDataError(TaskDomainError):
    """Raised when task content fails validation."""

    def __init__(self, task: str) -> None:
        super().__init__(f"Invalid task: [{task}]")
        self.task = task


class TaskLookupError(TaskDomainError):
    """Raised when a referenced task does not exist."""

    def __init__(self, task_id: TaskId) -> None:
        super().__init__(f"Task not found: {task_id}")
        self.task_id = task_id


class TaskUpdateError(TaskDomainError):
    """Raised when an update fails.

    Wraps exactly one of TaskDataError or TaskLookupError so callers
    can tell a rejected description apart from a missing task.
    """

    def __init__(self, error: TaskDataError | TaskLookupError) -> None:
        if not isinstance(error, (TaskDataError, TaskLookupError)):
            raise TypeError(f"Unsupported update error variant: {type(error).__name__}")
        super().__init__(f"Task update failed: {error.message}")
        self.error = error

    @property
    def is_data_error(self) -> bool:
        return isinstance(self.error, TaskDataError)

    @property
    def is_lookup_error(self) -> bool:
        return isinstance(self.error, TaskLookupError)


def lookup_error_from_repository(err: TaskRepositoryNotFoundError) -> TaskLookupError:
    """Translate a repository not-found into a service lookup error."""
    return TaskLookupError(err.task_id)


def update_error_from_data_error(err: TaskDataError) -> TaskUpdateError:
    """Wrap a validation failure as the data branch of TaskUpdateError."""
    return TaskUpdateError(err)


def update_error_from_repository(err: TaskRepositoryNotFoundError) -> TaskUpdateError:
    """Wrap a repository not-found as the lookup branch of TaskUpdateError."""
    return TaskUpdateError(lookup_error_from_repository(err))
