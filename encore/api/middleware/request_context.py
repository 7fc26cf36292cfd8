"""
Request Context Middleware

Binds per-request values into the structlog context so every log line
emitted while handling a request carries them:

    request_id  → X-Request-ID header from the caller, or a new uuid4
    method      → HTTP method
    path        → URL path

The request id is echoed back in the X-Request-ID response header, on
unexpected 500s as well: those are logged and answered here, before the
context is cleared.
"""

import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from encore.api.middleware.error_handler import internal_error_response
from encore.shared.core.logging import clear_log_context, log_context, logger


REQUEST_ID_HEADER = "X-Request-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Attach request_id/method/path to the logging context."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        clear_log_context()
        log_context(request_id=request_id, method=request.method, path=request.url.path)

        started = time.perf_counter()
        try:
            try:
                response = await call_next(request)
            except Exception as exc:
                response = internal_error_response(request, exc)
            response.headers[REQUEST_ID_HEADER] = request_id
            logger.debug(
                "Request handled",
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            return response
        finally:
            clear_log_context()
