"""
Controller-facing errors for the tasks application layer.

These form the stable vocabulary the transport layer maps to
responses: invalid task data, or no such task. Each domain error
has exactly one controller counterpart, produced by the mapping
functions below.
No framework imports allowed.
"""

from todo_service.domain.tasks.errors import (
    TaskDataError,
    TaskLookupError,
    TaskUpdateError,
)


class TaskControllerError(Exception):
    """Base error for all task controller errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ControllerDataError(TaskControllerError):
    """Invalid task data was supplied."""

    def __init__(self, task: str) -> None:
        super().__init__(f"Invalid task: [{task}]")
        self.task = task


class ControllerLookupError(TaskControllerError):
    """No task exists for the requested id."""

    def __init__(self, task_id: int) -> None:
        super().__init__(f"No such task: [{task_id}]")
        self.task_id = task_id


class ControllerUpdateError(TaskControllerError):
    """An update failed on either its data or its lookup.

    ``error`` holds the ControllerDataError or ControllerLookupError
    that caused it.
    """

    def __init__(self, error: ControllerDataError | ControllerLookupError) -> None:
        if not isinstance(error, (ControllerDataError, ControllerLookupError)):
            raise TypeError(f"Unsupported update error variant: {type(error).__name__}")
        super().__init__(error.message)
        self.error = error

    @property
    def is_data_error(self) -> bool:
        return isinstance(self.error, ControllerDataError)

    @property
    def is_lookup_error(self) -> bool:
        return isinstance(self.error, ControllerLookupError)


def controller_data_error(err: TaskDataError) -> ControllerDataError:
    """Translate a service data error."""
    return ControllerDataError(err.task)


def controller_lookup_error(err: TaskLookupError) -> ControllerLookupError:
    """Translate a service lookup error, unwrapping the task id."""
    return ControllerLookupError(err.task_id.value)


def controller_update_error(err: TaskUpdateError) -> ControllerUpdateError:
    """Translate a service update error, keeping its branch."""
    if isinstance(err.error, TaskDataError):
        return ControllerUpdateError(controller_data_error(err.error))
    return ControllerUpdateError(controller_lookup_error(err.error))
