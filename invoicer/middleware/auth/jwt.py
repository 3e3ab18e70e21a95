"""JWT token utilities.

Tokens carry the user's identity pair (``id``, ``username``) and are
signed with HS256.
"""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Dict, Any, Optional

import jwt

from ...config import env
from ...config.logging import get_logger
from ...exceptions import ConfigurationError
from ...security.audit_logger import SecurityAuditLogger, SecurityEventType

logger = get_logger("invoicer.auth.jwt")

JWT_ALGORITHM = "HS256"


class JWTConfig:
  """JWT configuration management."""

  @staticmethod
  def get_jwt_secret() -> str:
    """Get JWT secret key."""
    secret = env.JWT_SECRET_KEY
    if not secret:
      raise ConfigurationError("JWT_SECRET_KEY", "JWT secret key is not set")
    return secret


def create_jwt_token(user_id: str, username: str) -> str:
  """Create a JWT token for a user.

  Args:
    user_id: The user ID to encode in the token
    username: The username to encode in the token

  Returns:
    The encoded JWT token
  """
  secret_key = JWTConfig.get_jwt_secret()
  now = datetime.now(timezone.utc)

  payload = {
    "id": user_id,
    "username": username,
    "jti": str(uuid.uuid4()),
    "exp": now + timedelta(days=env.JWT_EXPIRY_DAYS),
    "iat": now,
    "iss": env.JWT_ISSUER,
  }
  return jwt.encode(payload, secret_key, algorithm=JWT_ALGORITHM)


def verify_jwt_token(token: str) -> Optional[Dict[str, Any]]:
  """Verify a JWT token and return the identity it carries.

  Args:
    token: The JWT token to verify

  Returns:
    ``{"id": ..., "username": ...}`` if the token is valid, None otherwise
  """
  try:
    secret_key = JWTConfig.get_jwt_secret()
    payload = jwt.decode(
      token,
      secret_key,
      algorithms=[JWT_ALGORITHM],
      issuer=env.JWT_ISSUER,
      options={"require": ["exp", "iat", "iss"]},
    )
  except jwt.ExpiredSignatureError:
    logger.info("JWT token verification failed: token expired")
    SecurityAuditLogger.log_security_event(
      event_type=SecurityEventType.AUTH_TOKEN_EXPIRED,
      details={"token_type": "jwt"},
      risk_level="low",
    )
    return None
  except jwt.InvalidTokenError as e:
    logger.info(f"JWT token verification failed: {type(e).__name__}")
    return None

  user_id = payload.get("id")
  username = payload.get("username")
  if not user_id or not username:
    logger.info("JWT token verification failed: missing identity claims")
    return None

  return {"id": user_id, "username": username}
