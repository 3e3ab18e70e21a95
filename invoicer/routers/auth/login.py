"""User login endpoint."""

from sqlalchemy.orm import Session
from fastapi import APIRouter, Depends, Request, status

from ...database import get_async_db_session
from ...exceptions import InvalidCredentialsError
from ...middleware.auth.dependencies import get_auth_service
from ...models.api.auth import AuthResponse, LoginRequest
from ...models.api.common import ErrorResponse, ValidationErrorResponse
from ...operations.auth_service import AuthService
from ...security import SecurityAuditLogger, handle_exception_securely

router = APIRouter()


@router.post(
  "/login",
  response_model=AuthResponse,
  status_code=status.HTTP_200_OK,
  summary="User Login",
  description="Authenticate with username and password.",
  operation_id="loginUser",
  responses={
    400: {"model": ValidationErrorResponse, "description": "Invalid request data"},
    401: {"model": ErrorResponse, "description": "Invalid credentials"},
  },
)
async def login(
  request: LoginRequest,
  fastapi_request: Request,
  session: Session = Depends(get_async_db_session),
  auth_service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
  """
  Authenticate a user.

  Returns:
      AuthResponse: A fresh token and the user's identity

  Raises:
      HTTPException: 401 if the username is unknown or the password is wrong
  """
  client_ip = fastapi_request.client.host if fastapi_request.client else None
  user_agent = fastapi_request.headers.get("user-agent")

  try:
    result = auth_service.authenticate(request.username, request.password, session)
  except InvalidCredentialsError as e:
    SecurityAuditLogger.log_auth_failure(
      reason="invalid_credentials",
      ip_address=client_ip,
      user_agent=user_agent,
      endpoint="/api/auth/login",
    )
    handle_exception_securely(
      e, request_id=getattr(fastapi_request.state, "request_id", None)
    )

  fastapi_request.state.user_id = result.user.id
  SecurityAuditLogger.log_auth_success(
    user_id=result.user.id,
    ip_address=client_ip,
    user_agent=user_agent,
  )
  return result
