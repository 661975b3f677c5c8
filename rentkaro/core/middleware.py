"""
Per-request bookkeeping: a correlation id and one access-log line.
"""

import json
import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("rentkaro.request")

REQUEST_ID_HEADER = "X-Request-ID"


def _access_record(request: Request, status: int, elapsed: float) -> str:
    return json.dumps(
        {
            "request_id": request.state.request_id,
            "method": request.method,
            "path": request.url.path,
            "status": status,
            "duration_ms": round(elapsed * 1000, 2),
        }
    )


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Reuse the caller's X-Request-ID (or mint one) and echo it back."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request.state.request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        started = time.perf_counter()
        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request.state.request_id
        logger.info(_access_record(request, response.status_code, time.perf_counter() - started))
        return response
