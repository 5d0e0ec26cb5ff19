"""
Application entry point.

Creates the FastAPI application and wires together:
- The task store and the controller chain on top of it
- Routers (tasks, health)
- Error handlers (centralized controller-error-to-HTTP mapping)
- Security middleware (headers) and the rate limit dependency
- Response compression
- Logging configuration

No business logic belongs here.
"""

from fastapi import Depends, FastAPI
from slowapi.errors import RateLimitExceeded
from starlette.middleware.gzip import GZipMiddleware

from todo_service.core.config import Settings, settings as default_settings
from todo_service.domain.tasks.ports import TaskRepository
from todo_service.interfaces.health import router as health_router
from todo_service.interfaces.tasks.dependencies import build_task_controller
from todo_service.interfaces.tasks.router import router as tasks_router
from todo_service.shared.errors.handlers import register_error_handlers
from todo_service.shared.logging import configure_logging
from todo_service.shared.security.headers import SecurityHeadersMiddleware
from todo_service.shared.security.rate_limiting import (
    build_limiter,
    enforce_rate_limit,
    rate_limit_exceeded_handler,
)

OPENAPI_PATH = "/api/spec"
SWAGGER_PATH = "/swagger"
# Bodies smaller than this are sent uncompressed.
GZIP_MINIMUM_SIZE = 1000


def create_app(
    settings: Settings | None = None,
    repository: TaskRepository | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, security and compression middleware.
    This is the composition root of the application: the task store
    created here lives as long as the returned app.

    Args:
        settings: Application settings. Loaded from the environment when omitted.
        repository: Task store to serve. A fresh in-memory store when omitted.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        debug=settings.debug,
        openapi_url=OPENAPI_PATH if settings.docs_enabled else None,
        docs_url=SWAGGER_PATH if settings.docs_enabled else None,
        redoc_url=None,
    )

    app.state.task_controller = build_task_controller(repository)

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(settings)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Security Middleware ---
    app.add_middleware(
        SecurityHeadersMiddleware,
        docs_path=SWAGGER_PATH if settings.docs_enabled else None,
    )

    # --- Compression ---
    app.add_middleware(GZipMiddleware, minimum_size=GZIP_MINIMUM_SIZE)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    rate_limited = [Depends(enforce_rate_limit)]
    app.include_router(health_router, dependencies=rate_limited)
    app.include_router(tasks_router, dependencies=rate_limited)

    return app


app = create_app()
