"""
FastAPI middleware for request correlation and logging.
"""

import logging
import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from geowkter.core.logging_config import (
    bind_log_context,
    install_context_record_factory,
    reset_log_context,
)

logger = logging.getLogger(__name__)


class RequestCorrelationMiddleware(BaseHTTPMiddleware):
    """
    Attach a request ID to every request and echo it in the response.

    The ID is taken from the incoming header when present, otherwise generated.
    """

    def __init__(self, app, header_name: str = "X-Request-ID"):
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(self.header_name, str(uuid.uuid4()))
        request.state.request_id = request_id

        logger.info(f"Request started: {request.method} {request.url.path}")
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                f"Request failed: {request.method} {request.url.path} "
                f"- Error: {type(e).__name__} - Duration: {duration_ms:.2f}ms",
                exc_info=True,
            )
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        response.headers[self.header_name] = request_id
        logger.info(
            f"Request completed: {request.method} {request.url.path} "
            f"- Status: {response.status_code} - Duration: {duration_ms:.2f}ms"
        )
        return response


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Stamp request ID, method and path onto log records emitted while handling a request."""

    def __init__(self, app):
        super().__init__(app)
        install_context_record_factory()

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        fields = {"http_method": request.method, "request_path": request.url.path}
        request_id = getattr(request.state, "request_id", None)
        if request_id:
            fields["request_id"] = request_id

        token = bind_log_context(**fields)
        try:
            return await call_next(request)
        finally:
            reset_log_context(token)
