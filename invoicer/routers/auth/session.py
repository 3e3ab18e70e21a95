"""Current session endpoint."""

from fastapi import APIRouter, Depends

from ...middleware.auth.dependencies import get_current_user
from ...models.api.auth import UserView
from ...models.api.common import ErrorResponse
from ...models.iam import User

router = APIRouter()


@router.get(
  "/me",
  response_model=UserView,
  summary="Current User",
  description="Get the identity carried by the presented token.",
  operation_id="getCurrentUser",
  responses={401: {"model": ErrorResponse, "description": "Not authenticated"}},
)
async def get_me(current_user: User = Depends(get_current_user)) -> UserView:
  return UserView(**current_user.to_public_dict())
