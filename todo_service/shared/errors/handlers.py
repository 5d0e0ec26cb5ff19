"""
Centralized error handlers for FastAPI.

Maps controller errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from todo_service.application.tasks.errors import (
    ControllerDataError,
    ControllerLookupError,
    ControllerUpdateError,
    TaskControllerError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_500 = 500


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def data_error_response(exc: ControllerDataError) -> JSONResponse:
    """Respond to invalid task data with 400."""
    logger.warning("Invalid task data")
    logger.debug("Rejected task text: %r", exc.task)
    return _error_response(HTTP_400, "Invalid task", exc.message)


def lookup_error_response(exc: ControllerLookupError) -> JSONResponse:
    """Respond to an unknown task id with 404."""
    logger.warning("Task not found: %d", exc.task_id)
    return _error_response(HTTP_404, "No such task", exc.message)


def update_error_response(exc: ControllerUpdateError) -> JSONResponse:
    """Respond to a failed update according to the branch that failed."""
    if isinstance(exc.error, ControllerDataError):
        return data_error_response(exc.error)
    return lookup_error_response(exc.error)


def internal_error_response(exc: Exception) -> JSONResponse:
    """Respond to an unexpected error with 500. Must be called while handling it."""
    logger.exception("Unexpected error: %s", type(exc).__name__)
    return _error_response(HTTP_500, "Internal server error")


def register_error_handlers(app: FastAPI) -> None:
    """Register all controller error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(ControllerDataError)
    async def handle_data_error(
        _request: Request, exc: ControllerDataError
    ) -> JSONResponse:
        """Handle invalid task data."""
        return data_error_response(exc)

    @app.exception_handler(ControllerLookupError)
    async def handle_lookup_error(
        _request: Request, exc: ControllerLookupError
    ) -> JSONResponse:
        """Handle missing task errors."""
        return lookup_error_response(exc)

    @app.exception_handler(ControllerUpdateError)
    async def handle_update_error(
        _request: Request, exc: ControllerUpdateError
    ) -> JSONResponse:
        """Handle update failures, data or lookup."""
        return update_error_response(exc)

    @app.exception_handler(TaskControllerError)
    async def handle_controller_error(
        _request: Request, exc: TaskControllerError
    ) -> JSONResponse:
        """Catch-all for unhandled task controller errors."""
        logger.error("Unhandled task controller error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        return internal_error_response(exc)
