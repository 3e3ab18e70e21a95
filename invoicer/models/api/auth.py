"""Authentication API models."""

from pydantic import BaseModel, Field, field_validator

from ...security.password import PasswordSecurity


class SignupRequest(BaseModel):
  """Registration request model."""

  username: str = Field(
    ..., min_length=5, max_length=64, description="Unique username"
  )
  password: str = Field(
    ...,
    min_length=PasswordSecurity.MIN_LENGTH,
    max_length=PasswordSecurity.MAX_LENGTH,
    description="User's password",
  )

  @field_validator("password")
  def validate_password_policy(cls, v: str) -> str:
    """Validate password meets the length policy."""
    result = PasswordSecurity.validate_password(v)

    if not result.is_valid:
      raise ValueError("; ".join(result.errors))

    return v


class LoginRequest(BaseModel):
  """Login request model."""

  username: str = Field(..., min_length=1, description="Username")
  password: str = Field(..., min_length=1, description="User's password")


class UserView(BaseModel):
  """Public identity of a user."""

  id: str = Field(..., description="User ID", examples=["user_01J9Z8Q3K4N2V7W5X6Y8Z9A0B1"])
  username: str = Field(..., description="Username")


class AuthResponse(BaseModel):
  """Authentication response model."""

  token: str = Field(..., description="JWT authentication token")
  user: UserView = Field(..., description="User information")
