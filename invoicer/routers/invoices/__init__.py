"""Invoice router module."""

from fastapi import APIRouter

from .invoice import router as invoice_router
from .main import router as main_router

router = APIRouter(tags=["Invoices"])

router.include_router(main_router, prefix="/invoices")
router.include_router(invoice_router, prefix="/invoices")
