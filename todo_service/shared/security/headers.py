"""
Secure HTTP headers middleware.

Adds security-related headers to every response:
- X-Content-Type-Options
- X-Frame-Options
- Referrer-Policy
- Content-Security-Policy
- X-XSS-Protection

The Swagger UI page loads its assets from a CDN and runs an inline
bootstrap script, so it gets a wider Content-Security-Policy than
every other path.

Unexpected exceptions from the app are turned into the 500 error body
here, so error responses carry the headers too.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from todo_service.shared.errors.handlers import internal_error_response

DEFAULT_CSP = "default-src 'self'"
DOCS_CSP = (
    "default-src 'self'; "
    "script-src 'self' 'unsafe-inline' https://cdn.jsdelivr.net; "
    "style-src 'self' 'unsafe-inline' https://cdn.jsdelivr.net; "
    "img-src 'self' data: https://fastapi.tiangolo.com"
)

SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "X-XSS-Protection": "1; mode=block",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware that adds secure HTTP headers to every response.

    Args:
        app: The wrapped ASGI application.
        docs_path: Path of the Swagger UI page, or None when docs are off.
    """

    def __init__(self, app: ASGIApp, docs_path: str | None = None) -> None:
        super().__init__(app)
        self._docs_path = docs_path

    def content_security_policy(self, path: str) -> str:
        if self._docs_path is not None and path.startswith(self._docs_path):
            return DOCS_CSP
        return DEFAULT_CSP

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Process request and add security headers to response."""
        try:
            response = await call_next(request)
        except Exception as exc:
            response = internal_error_response(exc)
        for header_name, header_value in SECURE_HEADERS.items():
            response.headers[header_name] = header_value
        response.headers["Content-Security-Policy"] = self.content_security_policy(
            request.url.path
        )
        return response
