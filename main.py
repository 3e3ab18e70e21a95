"""Invoicer Service API main application module."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from invoicer.config import env
from invoicer.config.logging import get_logger
from invoicer.config.validation import EnvValidator
from invoicer.middleware.database import DatabaseSessionMiddleware
from invoicer.middleware.logging import StructuredLoggingMiddleware
from invoicer.operations import AuthService, InvoiceService
from invoicer.routers import api_router
from invoicer.routers.status import get_app_version
from invoicer.security import ERROR_RESPONSES, ErrorType

logger = get_logger("invoicer.api")


def format_validation_errors(exc: RequestValidationError) -> list[dict]:
  """Flatten pydantic errors to ``{field, message}`` pairs."""
  errors = []
  for error in exc.errors():
    location = [str(part) for part in error.get("loc", ()) if part != "body"]
    errors.append(
      {"field": ".".join(location) or "body", "message": error.get("msg", "")}
    )
  return errors


def create_app() -> FastAPI:
  """
  Create the FastAPI app and include the routers.

  Returns:
      FastAPI: The configured FastAPI application.
  """
  app = FastAPI(
    title="Invoicer API",
    version=get_app_version(),
    description="Authenticated invoicing API",
    openapi_url="/openapi.json",
  )

  # Stateless services shared by every request
  app.state.invoice_service = InvoiceService()
  app.state.auth_service = AuthService()

  @app.on_event("startup")
  async def startup_event():
    """Validate configuration on startup."""
    logger.info("Starting Invoicer API...")

    try:
      EnvValidator.validate_required_vars(env)
      config_summary = EnvValidator.get_config_summary(env)
      logger.info(f"Configuration validated successfully: {config_summary}")
    except Exception as e:
      logger.error(f"Configuration validation failed: {e}")
      if env.is_production():
        raise
      logger.warning("Continuing with invalid configuration (non-production)")

    logger.info("Invoicer API startup complete")

  cors_origins = env.get_cors_origins()
  logger.info(f"CORS origins: {cors_origins}")

  app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=env.CORS_ALLOW_CREDENTIALS,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=[
      "Accept",
      "Accept-Language",
      "Content-Type",
      "Authorization",
      "X-Requested-With",
    ],
    expose_headers=["X-Request-ID"],
    max_age=3600,
  )

  app.add_middleware(DatabaseSessionMiddleware)
  # Added last so it is the outermost layer and sees every response
  app.add_middleware(StructuredLoggingMiddleware)

  @app.middleware("http")
  async def security_headers_middleware(request: Request, call_next):
    """Add security headers to all responses."""
    response = await call_next(request)

    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

    if env.is_production() or env.is_staging():
      response.headers["Strict-Transport-Security"] = (
        "max-age=31536000; includeSubDomains"
      )

    if request.url.path.startswith("/api/auth/"):
      response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate, private"
      response.headers["Pragma"] = "no-cache"

    return response

  @app.exception_handler(RequestValidationError)
  async def validation_exception_handler(
    request: Request, exc: RequestValidationError
  ) -> JSONResponse:
    """Reject malformed bodies with a field-level error list."""
    error_config = ERROR_RESPONSES[ErrorType.VALIDATION_ERROR]
    errors = format_validation_errors(exc)
    logger.info(
      f"Request validation failed on {request.url.path}",
      extra={"request_id": getattr(request.state, "request_id", None)},
    )
    return JSONResponse(
      status_code=error_config["status_code"],
      content={"detail": error_config["detail"], "errors": errors},
    )

  @app.exception_handler(Exception)
  async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Global exception handler returning a generic error and request ID.

    Internal exception details are logged server-side; clients receive a
    generic message with a correlation identifier.
    """
    request_id = getattr(request.state, "request_id", None)
    error_config = ERROR_RESPONSES[ErrorType.REQUEST_ERROR]

    logger.error(
      "Unhandled exception",
      extra={"request_id": request_id},
      exc_info=exc,
    )

    return JSONResponse(
      status_code=error_config["status_code"],
      content={"detail": error_config["detail"], "request_id": request_id},
    )

  app.include_router(api_router)

  return app


app = create_app()

if __name__ == "__main__":
  import uvicorn

  uvicorn.run("main:app", host=env.HOST, port=env.PORT, reload=env.is_development())
