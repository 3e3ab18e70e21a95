"""
API routers, all mounted under /api.
"""

from fastapi import APIRouter

from ..config import API_PREFIX
from .auth import router as auth_router
from .invoices import router as invoices_router
from .status import router as status_router

api_router = APIRouter(prefix=API_PREFIX)
api_router.include_router(auth_router)
api_router.include_router(invoices_router)
api_router.include_router(status_router, tags=["Status"])

__all__ = [
  "api_router",
  "auth_router",
  "invoices_router",
  "status_router",
]
