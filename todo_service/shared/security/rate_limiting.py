"""
Rate limiting configuration and setup.

Uses slowapi to enforce a default per-client rate limit on every route.
Protects against denial-of-service and resource abuse.

The limit is checked by a router dependency rather than by
SlowAPIMiddleware: the middleware looks routes up by their endpoint and
lets through every request whose route it cannot find, which is every
route mounted with ``include_router`` on current FastAPI releases.
"""

from fastapi import Request
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.responses import JSONResponse

from todo_service.core.config import Settings

HTTP_429 = 429


def build_limiter(settings: Settings) -> Limiter:
    """Create a limiter keyed on the client address.

    Args:
        settings: Supplies the default limit and whether limiting is on.

    Returns:
        A Limiter applying ``settings.rate_limit_default`` to every route.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit_default],
        enabled=settings.rate_limit_enabled,
    )


def enforce_rate_limit(request: Request) -> None:
    """Count the request against the app limiter's default limits.

    Counters are kept per client address and per request path.

    Raises:
        RateLimitExceeded: When the client is over its limit.
    """
    limiter: Limiter = request.app.state.limiter
    limiter._check_request_limit(
        request, request.scope.get("endpoint"), in_middleware=True
    )


def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a clean JSON response.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response with a clear error message.
    """
    return JSONResponse(
        status_code=HTTP_429,
        content={"error": "Rate limit exceeded", "detail": str(exc.detail)},
    )
