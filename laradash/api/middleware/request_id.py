"""
Request correlation middleware.

Every request gets an ID, taken from the X-Request-ID header when the
caller sends one. The ID is stored on request.state, echoed in the
response and bound to request_id_var so builder logs can be traced back
to the request that rendered them.
"""

import time
import uuid
from typing import Callable, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from laradash.logging_config import get_logger, request_id_var

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def resolve_request_id(request: Request) -> str:
    incoming = request.headers.get(REQUEST_ID_HEADER, "").strip()
    return incoming or uuid.uuid4().hex


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Bind a request ID for the duration of each request and report slow renders."""

    def __init__(self, app: ASGIApp, slow_request_ms: Optional[int] = None):
        super().__init__(app)
        self.slow_request_ms = slow_request_ms

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = resolve_request_id(request)
        request.state.request_id = request_id
        token = request_id_var.set(request_id)
        started = time.perf_counter()
        try:
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id
            elapsed_ms = round((time.perf_counter() - started) * 1000, 1)
            if self.slow_request_ms is not None and elapsed_ms > self.slow_request_ms:
                logger.warning(
                    "Slow request %s %s",
                    request.method,
                    request.url.path,
                    extra={"status_code": response.status_code, "duration_ms": elapsed_ms},
                )
            return response
        finally:
            request_id_var.reset(token)
