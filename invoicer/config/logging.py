"""
Logging configuration for the Invoicer service.

Development gets plain console lines; every other environment emits one
JSON object per record so request IDs, user IDs and invoice IDs can be
filtered on directly.
"""

import json
import logging
import logging.config
import traceback
from datetime import UTC, datetime
from typing import Any

from invoicer.config.env import EnvConfig

APP_LOGGERS = ["invoicer", "invoicer.api", "invoicer.security"]

# Record attributes copied into the JSON payload when present
CONTEXT_FIELDS = (
  "action",
  "request_id",
  "user_id",
  "invoice_id",
  "method",
  "path",
  "status_code",
  "duration_ms",
  "error_category",
  "metadata",
)

LEVELS_BY_ENVIRONMENT = {
  "prod": "INFO",
  "staging": "INFO",
  "test": "WARNING",
}


class StructuredFormatter(logging.Formatter):
  """Render a record as a single compact JSON line."""

  def format(self, record: logging.LogRecord) -> str:
    log_entry = {
      "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
      "level": record.levelname,
      "component": getattr(record, "component", record.name),
      "message": record.getMessage(),
    }

    for field in CONTEXT_FIELDS:
      value = getattr(record, field, None)
      if value is not None:
        log_entry[field] = value

    if record.exc_info and record.exc_info[0] is not None:
      log_entry["error"] = {
        "type": record.exc_info[0].__name__,
        "message": str(record.exc_info[1]),
        "traceback": traceback.format_exception(*record.exc_info),
      }

    return json.dumps(log_entry, default=str, separators=(",", ":"))


def get_logging_config(environment: str | None = None) -> dict[str, Any]:
  """
  Build a ``dictConfig`` mapping for the given environment.

  LOG_LEVEL only applies in development; the other environments have
  fixed levels so test runs stay quiet.
  """
  env = environment or EnvConfig.ENVIRONMENT
  level = LEVELS_BY_ENVIRONMENT.get(env, EnvConfig.LOG_LEVEL or "DEBUG")
  formatter = "simple" if env == "dev" else "structured"

  return {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
      "structured": {"()": StructuredFormatter},
      "simple": {"format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"},
    },
    "handlers": {
      "stdout": {
        "class": "logging.StreamHandler",
        "formatter": formatter,
        "stream": "ext://sys.stdout",
      },
    },
    "loggers": {
      **{
        name: {"level": level, "handlers": ["stdout"], "propagate": False}
        for name in APP_LOGGERS
      },
      "uvicorn": {"level": "WARNING", "handlers": ["stdout"], "propagate": False},
      "sqlalchemy": {"level": "WARNING", "handlers": ["stdout"], "propagate": False},
    },
    "root": {"level": "WARNING", "handlers": ["stdout"]},
  }


def setup_logging(environment: str | None = None) -> None:
  """Apply the logging configuration."""
  logging.config.dictConfig(get_logging_config(environment))


def get_logger(name: str) -> logging.Logger:
  return logging.getLogger(name)


def log_api_request(
  logger: logging.Logger,
  method: str,
  path: str,
  status_code: int,
  duration_ms: float,
  user_id: str | None = None,
  request_id: str | None = None,
) -> None:
  """Log a completed API request."""
  logger.info(
    f"{method} {path} - {status_code} ({duration_ms:.2f}ms)",
    extra={
      "component": "api",
      "action": "request_completed",
      "method": method,
      "path": path,
      "status_code": status_code,
      "duration_ms": round(duration_ms, 2),
      "user_id": user_id,
      "request_id": request_id,
    },
  )


def log_error(
  logger: logging.Logger,
  error: Exception,
  component: str,
  action: str,
  error_category: str = "application",
  user_id: str | None = None,
  metadata: dict[str, Any] | None = None,
) -> None:
  """Log an error together with the component and action it happened in."""
  logger.error(
    f"Error in {component}.{action}: {error!s}",
    exc_info=error,
    extra={
      "component": component,
      "action": action,
      "error_category": error_category,
      "user_id": user_id,
      "metadata": metadata or {},
    },
  )
