"""
Common API models shared across multiple routers.

Error envelopes and the health status payload.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
  """Standard error response format used across all API endpoints."""

  detail: str = Field(
    ...,
    description="Human-readable error message explaining what went wrong",
    examples=["Invoice not found"],
  )
  request_id: str | None = Field(
    None,
    description="Request ID for tracking and debugging",
    examples=["01J9Z8Q3K4N2V7W5X6Y8Z9A0B1"],
  )


class FieldError(BaseModel):
  """A single failed field of a request body."""

  field: str = Field(..., description="Dotted path of the failing field")
  message: str = Field(..., description="Why the value was rejected")


class ValidationErrorResponse(BaseModel):
  """Response for requests rejected at the validation boundary."""

  detail: str = Field("Invalid request data", description="Generic error message")
  errors: list[FieldError] = Field(
    default_factory=list, description="Field-level validation failures"
  )


class HealthStatus(BaseModel):
  """Health check status information."""

  status: str = Field(
    ...,
    description="Current health status",
    examples=["healthy"],
    pattern="^(healthy|degraded|unhealthy)$",
  )
  timestamp: datetime = Field(
    ..., description="Time of health check", examples=["2024-01-01T00:00:00Z"]
  )
  details: dict[str, Any] | None = Field(
    None, description="Additional health check details"
  )
