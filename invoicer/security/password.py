"""
Password utilities for the Invoicer service.

Provides password policy checks and bcrypt hashing.
"""

from dataclasses import dataclass, field
from typing import List

import bcrypt

from ..config import env


@dataclass
class PasswordValidationResult:
  """Result of password validation."""

  is_valid: bool
  errors: List[str] = field(default_factory=list)


class PasswordSecurity:
  """Password policy and bcrypt hashing."""

  MIN_LENGTH = 8
  # bcrypt only considers the first 72 bytes
  MAX_LENGTH = 72

  BCRYPT_ROUNDS = env.BCRYPT_ROUNDS

  @classmethod
  def validate_password(cls, password: str) -> PasswordValidationResult:
    """
    Validate a password against the length policy.

    Args:
        password: Password to validate

    Returns:
        PasswordValidationResult with the collected errors
    """
    errors = []

    if len(password) < cls.MIN_LENGTH:
      errors.append(f"Password must be at least {cls.MIN_LENGTH} characters long")

    if len(password.encode("utf-8")) > cls.MAX_LENGTH:
      errors.append(f"Password must not exceed {cls.MAX_LENGTH} bytes")

    return PasswordValidationResult(is_valid=not errors, errors=errors)

  @classmethod
  def hash_password(cls, password: str) -> str:
    """
    Hash a password using bcrypt.

    Args:
        password: Plain text password

    Returns:
        Bcrypt hash string
    """
    salt = bcrypt.gensalt(rounds=cls.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

  @classmethod
  def verify_password(cls, password: str, hashed: str) -> bool:
    """
    Verify a password against its bcrypt hash.

    Args:
        password: Plain text password
        hashed: Stored bcrypt hash

    Returns:
        True if password matches hash
    """
    try:
      return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except (ValueError, TypeError):
      return False
