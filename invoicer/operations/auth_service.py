"""Auth service: user registration, credential checks and identity lookup."""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..exceptions import InvalidCredentialsError, UserAlreadyExistsError
from ..middleware.auth.jwt import create_jwt_token
from ..models.api.auth import AuthResponse, UserView
from ..models.iam import User
from ..security.password import PasswordSecurity

logger = logging.getLogger(__name__)


class AuthService:
  """Stateless authentication operations over the request's session."""

  def register(self, username: str, password: str, session: Session) -> AuthResponse:
    """
    Register a new user and issue a token for them.

    Raises:
        UserAlreadyExistsError: If the username is taken
    """
    if User.get_by_username(username, session) is not None:
      raise UserAlreadyExistsError(username)

    password_hash = PasswordSecurity.hash_password(password)
    try:
      user = User.create(username, password_hash, session)
    except IntegrityError:
      # Lost a race with a concurrent signup of the same username
      raise UserAlreadyExistsError(username) from None

    logger.info(f"Registered user {user.id}", extra={"user_id": user.id})
    return self._issue(user)

  def authenticate(self, username: str, password: str, session: Session) -> AuthResponse:
    """
    Check a username/password pair and issue a token.

    Raises:
        InvalidCredentialsError: If the user is unknown or the password is wrong
    """
    user = User.get_by_username(username, session)
    if user is None or not PasswordSecurity.verify_password(
      password, user.password_hash
    ):
      raise InvalidCredentialsError()

    return self._issue(user)

  def get_user(self, user_id: str, session: Session) -> Optional[UserView]:
    user = User.get_by_id(user_id, session)
    if user is None:
      return None
    return UserView(**user.to_public_dict())

  @staticmethod
  def _issue(user: User) -> AuthResponse:
    return AuthResponse(
      token=create_jwt_token(user.id, user.username),
      user=UserView(**user.to_public_dict()),
    )
