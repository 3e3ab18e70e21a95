"""Authentication router module."""

from fastapi import APIRouter

from .login import router as login_router
from .session import router as session_router
from .signup import router as signup_router

router = APIRouter(prefix="/auth", tags=["Auth"])

router.include_router(signup_router)
router.include_router(login_router)
router.include_router(session_router)
