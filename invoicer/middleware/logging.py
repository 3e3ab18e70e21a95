"""
Logging middleware for structured API request logging.

Every request gets an ID (returned in ``X-Request-ID``) and one structured
log line with its timing and outcome.
"""

import time
import uuid
from typing import Callable, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from ..logger import log_api, log_app_error

REQUEST_ID_HEADER = "X-Request-ID"


class StructuredLoggingMiddleware(BaseHTTPMiddleware):
  """
  Middleware that logs all API requests with structured data.

  Features:
  - Request/response timing
  - User context from the auth dependency
  - Request ID generation for tracing
  """

  def __init__(self, app, exclude_paths: Optional[list] = None):
    super().__init__(app)
    self.exclude_paths = exclude_paths or [
      "/api/status",
      "/favicon.ico",
      "/docs",
      "/redoc",
      "/openapi.json",
    ]

  async def dispatch(self, request: Request, call_next: Callable) -> Response:
    request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
    request.state.request_id = request_id

    if any(request.url.path.startswith(path) for path in self.exclude_paths):
      response = await call_next(request)
      response.headers[REQUEST_ID_HEADER] = request_id
      return response

    start_time = time.time()

    try:
      response = await call_next(request)
    except Exception as e:
      duration_ms = (time.time() - start_time) * 1000
      user_id = getattr(request.state, "user_id", None)

      log_app_error(
        error=e,
        component="api_middleware",
        action="request_processing",
        user_id=str(user_id) if user_id else None,
        metadata={
          "method": request.method,
          "path": request.url.path,
          "duration_ms": duration_ms,
          "request_id": request_id,
        },
      )
      raise

    duration_ms = (time.time() - start_time) * 1000
    user_id = getattr(request.state, "user_id", None)

    log_api(
      method=request.method,
      path=request.url.path,
      status_code=response.status_code,
      duration_ms=duration_ms,
      user_id=str(user_id) if user_id else None,
      request_id=request_id,
    )

    response.headers[REQUEST_ID_HEADER] = request_id
    return response
