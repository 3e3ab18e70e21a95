"""Operations layer for business workflows and orchestration."""

from .auth_service import AuthService
from .invoicing import InvoiceService

__all__ = [
  "AuthService",
  "InvoiceService",
]
