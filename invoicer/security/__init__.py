"""
Security utilities for the Invoicer service.

- Password policy and hashing (password.py)
- Secure error handling and information disclosure prevention (error_handling.py)
- Security audit logging (audit_logger.py)
"""

from .audit_logger import SecurityAuditLogger, SecurityEventType
from .error_handling import (
  ERROR_RESPONSES,
  ErrorType,
  classify_exception,
  handle_exception_securely,
  raise_secure_error,
)
from .password import PasswordSecurity

__all__ = [
  "ERROR_RESPONSES",
  "ErrorType",
  "PasswordSecurity",
  "SecurityAuditLogger",
  "SecurityEventType",
  "classify_exception",
  "handle_exception_securely",
  "raise_secure_error",
]
