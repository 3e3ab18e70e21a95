"""
Authentication dependencies for FastAPI.

Security Note:
- JWT tokens are accepted in the Authorization header with either the
  ``Bearer`` or the ``JWT`` scheme
- Never log full tokens or request URLs; use request.url.path for logging
"""

from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from ...database import get_async_db_session
from ...models.iam import User
from ...operations.auth_service import AuthService
from ...operations.invoicing import InvoiceService
from ...security import ErrorType, SecurityAuditLogger, SecurityEventType, raise_secure_error
from .jwt import verify_jwt_token

AUTH_SCHEMES = ("bearer", "jwt")


def extract_token(authorization: Optional[str]) -> Optional[str]:
  """Get the token from an Authorization header value, if the scheme is accepted."""
  if not authorization:
    return None
  scheme, _, token = authorization.strip().partition(" ")
  token = token.strip()
  if scheme.lower() not in AUTH_SCHEMES or not token:
    return None
  return token


async def get_current_user(
  request: Request,
  session: Session = Depends(get_async_db_session),
) -> User:
  """
  Get the authenticated user, raising an exception if authentication fails.

  Args:
      request: FastAPI request object for extracting client info
      session: Database session

  Returns:
      User: The authenticated user.

  Raises:
      HTTPException: 401 if no valid token is provided or its user no longer exists.
  """
  client_ip = request.client.host if request.client else None
  user_agent = request.headers.get("user-agent")
  endpoint = str(request.url.path)

  jwt_token = extract_token(request.headers.get("authorization"))
  if not jwt_token:
    SecurityAuditLogger.log_auth_failure(
      reason="missing_token",
      ip_address=client_ip,
      user_agent=user_agent,
      endpoint=endpoint,
    )
    raise_secure_error(ErrorType.AUTHENTICATION_ERROR)

  identity = verify_jwt_token(jwt_token)
  user = User.get_by_id(identity["id"], session) if identity else None

  if user is None:
    SecurityAuditLogger.log_security_event(
      event_type=SecurityEventType.AUTH_TOKEN_INVALID,
      user_id=identity["id"] if identity else None,
      ip_address=client_ip,
      user_agent=user_agent,
      endpoint=endpoint,
      details={"token_type": "jwt"},
      risk_level="high",
    )
    raise_secure_error(ErrorType.AUTHENTICATION_ERROR)

  request.state.user_id = user.id
  return user


def get_invoice_service(request: Request) -> InvoiceService:
  """The application's invoice service."""
  return request.app.state.invoice_service


def get_auth_service(request: Request) -> AuthService:
  """The application's auth service."""
  return request.app.state.auth_service
