"""User signup endpoint."""

from sqlalchemy.orm import Session
from fastapi import APIRouter, Depends, HTTPException, Request, status

from ...config import env
from ...database import get_async_db_session
from ...exceptions import UserAlreadyExistsError
from ...middleware.auth.dependencies import get_auth_service
from ...models.api.auth import AuthResponse, SignupRequest
from ...models.api.common import ErrorResponse, ValidationErrorResponse
from ...operations.auth_service import AuthService
from ...security import SecurityAuditLogger, SecurityEventType, handle_exception_securely

router = APIRouter()


@router.post(
  "/signup",
  response_model=AuthResponse,
  status_code=status.HTTP_201_CREATED,
  summary="Register New User",
  description="Register a new user with a username and password and receive a token.",
  operation_id="signupUser",
  responses={
    400: {"model": ValidationErrorResponse, "description": "Invalid request data"},
    409: {"model": ErrorResponse, "description": "Username already registered"},
    503: {"model": ErrorResponse, "description": "Registration temporarily disabled"},
  },
)
async def signup(
  request: SignupRequest,
  fastapi_request: Request,
  session: Session = Depends(get_async_db_session),
  auth_service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
  """
  Register a new user account.

  Returns:
      AuthResponse: The new user's token and identity

  Raises:
      HTTPException: 409 if the username is taken, 503 if registration is disabled
  """
  client_ip = fastapi_request.client.host if fastapi_request.client else None
  user_agent = fastapi_request.headers.get("user-agent")

  if not env.USER_REGISTRATION_ENABLED:
    SecurityAuditLogger.log_security_event(
      event_type=SecurityEventType.REGISTRATION_REJECTED,
      ip_address=client_ip,
      user_agent=user_agent,
      endpoint="/api/auth/signup",
      details={"reason": "registration_disabled"},
      risk_level="low",
    )
    raise HTTPException(
      status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
      detail="Registration is temporarily disabled",
    )

  try:
    result = auth_service.register(request.username, request.password, session)
  except UserAlreadyExistsError as e:
    SecurityAuditLogger.log_security_event(
      event_type=SecurityEventType.REGISTRATION_REJECTED,
      ip_address=client_ip,
      user_agent=user_agent,
      endpoint="/api/auth/signup",
      details={"reason": "username_taken"},
      risk_level="low",
    )
    handle_exception_securely(
      e, request_id=getattr(fastapi_request.state, "request_id", None)
    )

  fastapi_request.state.user_id = result.user.id
  SecurityAuditLogger.log_security_event(
    event_type=SecurityEventType.USER_REGISTERED,
    user_id=result.user.id,
    ip_address=client_ip,
    user_agent=user_agent,
    endpoint="/api/auth/signup",
    risk_level="low",
  )
  return result
