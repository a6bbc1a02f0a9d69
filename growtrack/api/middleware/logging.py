# 📄 File: growtrack/api/middleware/logging.py
# 🧭 Purpose (Layman Explanation):
# Keeps a diary of every request made to GrowTrack: what was asked for, how long it took
# and whether it failed, tagged with an ID that ties all the log lines of a request together.
# 🧪 Purpose (Technical Summary):
# Request logging middleware with X-Request-ID correlation, timing and sensitive-header
# filtering. Binds the request ID into the logging context for the whole request.
# 🔗 Dependencies:
# starlette BaseHTTPMiddleware, growtrack.shared.utils.logging, uuid, time
# 🔄 Connected Modules / Calls From:
# growtrack.main (middleware registration)

import time
import uuid
from typing import Any, Dict

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from growtrack.shared.utils.logging import get_logger, log_context

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

# Paths too noisy to log on every hit
EXCLUDED_PATHS = {"/api/v1/health", "/favicon.ico"}

SENSITIVE_HEADERS = {"authorization", "cookie", "x-api-key"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Request logging middleware.

    Features:
    - X-Request-ID propagation (reused from the client or generated)
    - Request/response timing
    - Slow request warnings
    - Authorization and cookie headers never logged
    """

    def __init__(self, app: ASGIApp, slow_request_threshold: float = 2.0):
        super().__init__(app)
        self.slow_request_threshold = slow_request_threshold

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id

        with log_context(request_id=request_id):
            if request.url.path in EXCLUDED_PATHS:
                response = await call_next(request)
                response.headers[REQUEST_ID_HEADER] = request_id
                return response

            start_time = time.perf_counter()
            logger.info(
                f"{request.method} {request.url.path}",
                extra={"event_type": "http_request", **self._request_data(request)},
            )

            try:
                response = await call_next(request)
            except Exception as e:
                logger.error(
                    f"{request.method} {request.url.path} failed: {e}",
                    extra={
                        "event_type": "http_error",
                        "duration_ms": (time.perf_counter() - start_time) * 1000,
                        "error_type": type(e).__name__,
                    },
                    exc_info=True,
                )
                raise

            duration = time.perf_counter() - start_time
            response_data = {
                "event_type": "http_response",
                "status_code": response.status_code,
                "duration_ms": duration * 1000,
            }
            if duration > self.slow_request_threshold:
                logger.warning(f"Slow request {request.method} {request.url.path}", extra=response_data)
            else:
                logger.info(
                    f"{request.method} {request.url.path} -> {response.status_code}",
                    extra=response_data,
                )

            response.headers[REQUEST_ID_HEADER] = request_id
            return response

    @staticmethod
    def _request_data(request: Request) -> Dict[str, Any]:
        return {
            "method": request.method,
            "path": request.url.path,
            "query_params": dict(request.query_params),
            "client_ip": request.client.host if request.client else None,
            "headers": {
                k: ("[REDACTED]" if k.lower() in SENSITIVE_HEADERS else v)
                for k, v in request.headers.items()
            },
        }
