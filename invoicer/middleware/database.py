"""Database session cleanup middleware."""

from typing import Callable
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from ..database import session, activate_request_scope, deactivate_request_scope
from ..logger import logger


class DatabaseSessionMiddleware(BaseHTTPMiddleware):
  """Scope one SQLAlchemy session to each request and remove it afterwards."""

  async def dispatch(self, request: Request, call_next: Callable) -> Response:
    scope_token = activate_request_scope()
    try:
      return await call_next(request)
    finally:
      try:
        session.remove()
      except Exception as e:
        # Cleanup failure must not replace the response
        logger.warning(f"Database session cleanup failed: {e}")
      finally:
        deactivate_request_scope(scope_token)
