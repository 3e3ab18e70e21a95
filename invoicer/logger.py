"""
Invoicer Logging

Module-level loggers for the application, the API access log and
security events, configured once on import.
"""

from typing import Optional, Dict, Any

from .config.logging import (
  setup_logging,
  get_logger,
  log_api_request,
  log_error,
)

setup_logging()

logger = get_logger("invoicer")
api_logger = get_logger("invoicer.api")
security_logger = get_logger("invoicer.security")


def log_api(
  method: str,
  path: str,
  status_code: int,
  duration_ms: float,
  user_id: Optional[str] = None,
  request_id: Optional[str] = None,
) -> None:
  """Log API requests with structured data."""
  log_api_request(
    api_logger, method, path, status_code, duration_ms, user_id, request_id
  )


def log_app_error(
  error: Exception,
  component: str,
  action: str,
  error_category: str = "application",
  user_id: Optional[str] = None,
  metadata: Optional[Dict[str, Any]] = None,
) -> None:
  """Log application errors with context."""
  log_error(logger, error, component, action, error_category, user_id, metadata)


__all__ = [
  "logger",
  "api_logger",
  "security_logger",
  "log_api",
  "log_app_error",
  "get_logger",
]
