"""
Custom Exception Types for the Invoicer service.

Routers translate these into HTTP responses; services raise them so the
operations layer stays free of HTTP concerns.
"""

from typing import Optional, Dict, Any
from datetime import datetime, timezone


class InvoicerError(Exception):
  """
  Base exception for all Invoicer application errors.

  Attributes:
      message: Human-readable error message
      error_code: Application-specific error code for categorization
      details: Additional error context and metadata
      timestamp: When the error occurred
  """

  def __init__(
    self,
    message: str,
    error_code: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
  ):
    super().__init__(message)
    self.message = message
    self.error_code = error_code or self.__class__.__name__
    self.details = details or {}
    self.timestamp = datetime.now(timezone.utc).isoformat()

  def to_dict(self) -> Dict[str, Any]:
    """Convert exception to dictionary for API responses."""
    return {
      "error": self.error_code,
      "message": self.message,
      "details": self.details,
      "timestamp": self.timestamp,
    }


# ============================================================================
# Invoice Exceptions
# ============================================================================


class InvoiceError(InvoicerError):
  """Base exception for invoice operations."""

  pass


class InvoiceNotFoundError(InvoiceError):
  """Raised when an invoice does not exist, is soft-deleted or belongs to someone else."""

  def __init__(self, invoice_id: str):
    super().__init__(
      f"Invoice '{invoice_id}' not found",
      error_code="INVOICE_NOT_FOUND",
      details={"invoice_id": invoice_id},
    )


class IncompleteItemError(InvoiceError):
  """Raised when an item that has to be created is missing some of its fields."""

  def __init__(self, missing: list[str]):
    super().__init__(
      "New items need name, price and quantity",
      error_code="INCOMPLETE_ITEM",
      details={"missing_fields": missing},
    )


# ============================================================================
# Authentication Exceptions
# ============================================================================


class AuthError(InvoicerError):
  """Base exception for authentication errors."""

  pass


class AuthenticationError(AuthError):
  """Raised when a credential is missing, invalid or expired."""

  def __init__(self, reason: str = "Authentication required"):
    super().__init__(
      reason,
      error_code="AUTHENTICATION_FAILED",
      details={"auth_type": "jwt"},
    )


class InvalidCredentialsError(AuthError):
  """Raised when a username/password pair does not match."""

  def __init__(self):
    super().__init__(
      "Username or password is wrong",
      error_code="INVALID_CREDENTIALS",
      details={"auth_type": "credentials"},
    )


class UserAlreadyExistsError(AuthError):
  """Raised when registering a username that is already taken."""

  def __init__(self, username: str):
    super().__init__(
      "Username already registered",
      error_code="USER_ALREADY_EXISTS",
      details={"username": username},
    )


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigurationError(InvoicerError):
  """Raised when there are configuration issues."""

  def __init__(self, config_key: str, reason: str):
    super().__init__(
      f"Configuration error for '{config_key}': {reason}",
      error_code="CONFIGURATION_ERROR",
      details={"config_key": config_key, "reason": reason},
    )
