"""Identity and Access Management (IAM) models package."""

from .user import User

__all__ = [
  "User",
]
