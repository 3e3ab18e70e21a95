"""
Unprotected status endpoint for load balancers and monitoring.
"""

from datetime import UTC, datetime
from importlib.metadata import PackageNotFoundError, version

from fastapi import APIRouter

from ..models.api.common import HealthStatus

router = APIRouter()


def get_app_version() -> str:
  """Get the application version from installed package metadata."""
  try:
    return version("invoicer-service")
  except PackageNotFoundError:
    return "unknown"


@router.get(
  "/status",
  response_model=HealthStatus,
  operation_id="getServiceStatus",
  summary="Health Check",
  description="Service health check endpoint for monitoring and load balancers",
  responses={200: {"description": "Service is healthy", "model": HealthStatus}},
)
async def service_status():
  return HealthStatus(
    status="healthy",
    timestamp=datetime.now(UTC),
    details={"service": "invoicer-api", "version": get_app_version()},
  )
