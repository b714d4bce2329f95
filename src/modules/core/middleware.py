"""Per-request log context.

Every request gets a request id (``X-Request-ID`` from the client, or a new
UUID4), bound into structlog's context vars together with the method and
path, so any log line emitted while serving it carries all three.
"""

import time
import uuid
from typing import Callable

import structlog
from django.http import HttpRequest, HttpResponse

REQUEST_ID_HEADER = "X-Request-ID"

logger = structlog.get_logger(__name__)


def _request_id(request: HttpRequest) -> str:
    return request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())


class RequestLoggingMiddleware:
    """Logs ``request_started`` / ``request_finished`` and echoes the request id."""

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request_id = _request_id(request)
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            correlation_id=request_id,
            method=request.method,
            path=request.get_full_path(),
        )

        logger.info("request_started")
        started = time.perf_counter()
        response = self.get_response(request)
        logger.info(
            "request_finished",
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )

        response[REQUEST_ID_HEADER] = request_id
        return response
