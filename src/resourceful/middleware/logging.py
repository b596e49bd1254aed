"""
=============================================================================
ACCESS LOGGING MIDDLEWARE
=============================================================================

One log line per dispatched request, with timing and a short request ID
that is echoed back in the X-Request-ID response header.

=============================================================================
LOG FORMATS
=============================================================================

    text (default):
        [19/Oct/2026:10:15:02 +0000] a1b2c3d4 "GET /posts/5" 200 27 0.41ms

    json:
        {"request_id": "a1b2c3d4", "method": "GET", "path": "/posts/5",
         "query": "", "status_code": 200, "content_length": 27,
         "duration_ms": 0.41, "timestamp": "19/Oct/2026:10:15:02 +0000"}

Lines go to the "resourceful.access" logger so they can be routed apart
from application logs:

    logging.getLogger("resourceful.access").addHandler(file_handler)

=============================================================================
"""

import time
import json
import uuid
import logging
from dataclasses import dataclass, asdict
from typing import Optional
from urllib.parse import urlencode

from .base import Middleware, NextHandler
from ..http.request import Request
from ..http.response import Response


logger = logging.getLogger("resourceful.access")


@dataclass
class RequestLog:
    """Structured access log entry for one request."""

    request_id: str
    method: str
    path: str
    query: str
    status_code: int
    content_length: int
    duration_ms: float
    timestamp: str

    def to_dict(self) -> dict:
        entry = asdict(self)
        entry["status_code"] = int(self.status_code)
        entry["duration_ms"] = round(self.duration_ms, 2)
        return entry

    def to_text(self) -> str:
        target = f"{self.path}?{self.query}" if self.query else self.path
        return (
            f'[{self.timestamp}] {self.request_id} '
            f'"{self.method} {target}" {int(self.status_code)} '
            f'{self.content_length} {self.duration_ms:.2f}ms'
        )


class LoggingMiddleware(Middleware):
    """
    Request logging middleware.

    Add it first so its timing covers every other middleware:

        app.use(LoggingMiddleware(log_format="json", skip_paths=["/health"]))
    """

    def __init__(
        self,
        log_format: str = "text",
        include_request_id: bool = True,
        log_level: int = logging.INFO,
        skip_paths: Optional[list] = None,
    ):
        """
        Args:
            log_format: "text" or "json"
            include_request_id: Add X-Request-ID to responses
            log_level: Level access lines are logged at
            skip_paths: Paths that are never logged
        """
        self.log_format = log_format
        self.include_request_id = include_request_id
        self.log_level = log_level
        self.skip_paths = set(skip_paths or [])

    def __call__(self, request: Request, next: NextHandler) -> Response:
        # 8 hex chars are plenty to correlate lines within a log window
        request_id = uuid.uuid4().hex[:8]
        start_time = time.time()

        try:
            response = next(request)
        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            logger.error(
                f"Request failed: {request.method} {request.path} "
                f"- {type(e).__name__}: {e} ({duration_ms:.2f}ms)"
            )
            raise

        duration_ms = (time.time() - start_time) * 1000

        if request.path in self.skip_paths:
            return response

        log_entry = RequestLog(
            request_id=request_id,
            method=request.method,
            path=request.path,
            query=urlencode(dict(request.query)),
            status_code=response.status,
            content_length=response.content_length,
            duration_ms=duration_ms,
            timestamp=time.strftime("%d/%b/%Y:%H:%M:%S %z"),
        )

        if self.log_format == "json":
            logger.log(self.log_level, json.dumps(log_entry.to_dict()))
        else:
            logger.log(self.log_level, log_entry.to_text())

        if self.include_request_id:
            response = response.with_headers({"X-Request-ID": request_id})

        return response
