import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from roomlog.api.exception_handlers import error_response
from roomlog.core.exceptions import ErrorCode
from roomlog.core.logger import get_logger

REQUEST_ID_HEADER = "X-Request-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs one line per request and echoes a request id header.

    An incoming ``X-Request-ID`` is reused; otherwise a new one is generated.
    The id is bound into structlog's context so service logs carry it too.
    Exceptions no handler claimed become an ``INTERNAL_ERROR`` envelope here.
    """

    def __init__(self, app, service_name: str = "roomlog", logger=None):
        super().__init__(app)
        self.service_name = service_name
        self.logger = logger or get_logger("api.requests")

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        structlog.contextvars.bind_contextvars(request_id=request_id, service=self.service_name)
        start = time.perf_counter()
        try:
            try:
                response = await call_next(request)
            except Exception as e:
                self.logger.exception("Unhandled error", method=request.method, path=request.url.path)
                response = error_response(request, ErrorCode.INTERNAL_ERROR, str(e) or e.__class__.__name__)
            duration_ms = round((time.perf_counter() - start) * 1000, 2)
            self.logger.info(
                "Request handled",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=duration_ms,
            )
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            structlog.contextvars.unbind_contextvars("request_id", "service")
