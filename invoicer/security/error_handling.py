"""
Secure error handling utilities to prevent information disclosure.

Full error details go to the logs; clients receive a generic message and
a status code chosen from the error category.
"""

from typing import Any, NoReturn

from fastapi import HTTPException, status

from ..exceptions import (
  AuthenticationError,
  IncompleteItemError,
  InvalidCredentialsError,
  InvoiceNotFoundError,
  InvoicerError,
  UserAlreadyExistsError,
)
from ..logger import logger


class ErrorType:
  """Standard error types for consistent handling."""

  VALIDATION_ERROR = "validation_error"
  AUTHENTICATION_ERROR = "authentication_error"
  NOT_FOUND_ERROR = "not_found_error"
  CONFLICT_ERROR = "conflict_error"
  # Anything unexpected while handling a request
  REQUEST_ERROR = "request_error"


ERROR_RESPONSES = {
  ErrorType.VALIDATION_ERROR: {
    "status_code": status.HTTP_400_BAD_REQUEST,
    "detail": "Invalid request data",
  },
  ErrorType.AUTHENTICATION_ERROR: {
    "status_code": status.HTTP_401_UNAUTHORIZED,
    "detail": "Authentication required",
  },
  ErrorType.NOT_FOUND_ERROR: {
    "status_code": status.HTTP_404_NOT_FOUND,
    "detail": "Resource not found",
  },
  ErrorType.CONFLICT_ERROR: {
    "status_code": status.HTTP_409_CONFLICT,
    "detail": "Resource conflict",
  },
  ErrorType.REQUEST_ERROR: {
    "status_code": status.HTTP_400_BAD_REQUEST,
    "detail": "Request could not be processed",
  },
}

# Application errors whose message is safe to return verbatim
_EXPOSED_ERRORS = (
  (InvoiceNotFoundError, ErrorType.NOT_FOUND_ERROR, "Invoice not found"),
  (IncompleteItemError, ErrorType.VALIDATION_ERROR, None),
  (InvalidCredentialsError, ErrorType.AUTHENTICATION_ERROR, None),
  (AuthenticationError, ErrorType.AUTHENTICATION_ERROR, None),
  (UserAlreadyExistsError, ErrorType.CONFLICT_ERROR, None),
)


def raise_secure_error(
  error_type: str,
  original_error: Exception | None = None,
  request_id: str | None = None,
  user_id: str | None = None,
  additional_context: dict[str, Any] | None = None,
  custom_detail: str | None = None,
) -> NoReturn:
  """
  Raise an HTTPException with a generic error message while logging full details.

  Args:
      error_type: Type of error from ErrorType class
      original_error: The original exception that caused this error
      request_id: Request ID for tracing
      user_id: User ID associated with the request
      additional_context: Additional context for logging
      custom_detail: Custom detail message (must not contain sensitive data)

  Raises:
      HTTPException: With generic error message and appropriate status code
  """
  if error_type not in ERROR_RESPONSES:
    logger.warning(f"Unknown error type: {error_type}, defaulting to request error")
    error_type = ErrorType.REQUEST_ERROR

  error_config = ERROR_RESPONSES[error_type]

  log_context = {
    "error_type": error_type,
    "request_id": request_id,
    "user_id": user_id,
    "status_code": error_config["status_code"],
  }

  if additional_context:
    log_context.update(additional_context)

  if original_error is not None and not isinstance(original_error, InvoicerError):
    logger.error(
      f"Secure error handler - {error_type}: {original_error!s}",
      extra=log_context,
      exc_info=original_error,
    )
  elif original_error is not None:
    logger.info(
      f"Secure error handler - {error_type}: {original_error!s}", extra=log_context
    )
  else:
    logger.warning(f"Secure error handler - {error_type}", extra=log_context)

  detail = custom_detail if custom_detail else error_config["detail"]

  headers = None
  if error_config["status_code"] == status.HTTP_401_UNAUTHORIZED:
    headers = {"WWW-Authenticate": "Bearer"}

  raise HTTPException(
    status_code=error_config["status_code"], detail=detail, headers=headers
  )


def classify_exception(exception: Exception) -> tuple[str, str | None]:
  """
  Classify an exception into an error type and an optional client-safe detail.

  Application errors map to their own categories; everything else is a
  generic request error so nothing internal leaks to the client.
  """
  for error_class, error_type, detail in _EXPOSED_ERRORS:
    if isinstance(exception, error_class):
      return error_type, detail or exception.message

  return ErrorType.REQUEST_ERROR, None


def handle_exception_securely(
  exception: Exception,
  request_id: str | None = None,
  user_id: str | None = None,
  additional_context: dict[str, Any] | None = None,
) -> NoReturn:
  """
  Handle an exception by classifying it and raising the matching HTTPException.

  Raises:
      HTTPException: With a client-safe message and appropriate status code
  """
  error_type, detail = classify_exception(exception)
  raise_secure_error(
    error_type=error_type,
    original_error=exception,
    request_id=request_id,
    user_id=user_id,
    additional_context=additional_context,
    custom_detail=detail,
  )
