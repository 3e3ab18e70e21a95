"""Authentication middleware: JWT handling and FastAPI dependencies.

Dependencies live in ``invoicer.middleware.auth.dependencies`` and are
imported from there directly; they depend on the operations layer, which
itself uses the JWT helpers exported here.
"""

from .jwt import create_jwt_token, verify_jwt_token

__all__ = [
  "create_jwt_token",
  "verify_jwt_token",
]
