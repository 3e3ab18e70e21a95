"""Invoice collection endpoints: list and create."""

from sqlalchemy.orm import Session
from fastapi import APIRouter, Depends, status

from ...database import get_async_db_session
from ...middleware.auth.dependencies import get_current_user, get_invoice_service
from ...models.api.common import ErrorResponse, ValidationErrorResponse
from ...models.api.invoices import (
  InvoiceCreateRequest,
  InvoiceSummaryView,
  SingleInvoiceView,
)
from ...models.iam import User
from ...operations.invoicing import InvoiceService

router = APIRouter()


@router.get(
  "",
  response_model=list[InvoiceSummaryView],
  response_model_exclude_none=True,
  summary="List Invoices",
  description="List the current user's invoices.",
  operation_id="listInvoices",
  responses={401: {"model": ErrorResponse, "description": "Not authenticated"}},
)
async def list_invoices(
  current_user: User = Depends(get_current_user),
  session: Session = Depends(get_async_db_session),
  invoice_service: InvoiceService = Depends(get_invoice_service),
) -> list[InvoiceSummaryView]:
  return invoice_service.get_invoices(current_user.id, session)


@router.post(
  "",
  response_model=SingleInvoiceView,
  response_model_exclude_none=True,
  status_code=status.HTTP_201_CREATED,
  summary="Create Invoice",
  description="Create an invoice with its address, client and items.",
  operation_id="createInvoice",
  responses={
    400: {"model": ValidationErrorResponse, "description": "Invalid request data"},
    401: {"model": ErrorResponse, "description": "Not authenticated"},
  },
)
async def create_invoice(
  request: InvoiceCreateRequest,
  current_user: User = Depends(get_current_user),
  session: Session = Depends(get_async_db_session),
  invoice_service: InvoiceService = Depends(get_invoice_service),
) -> SingleInvoiceView:
  """
  Create an invoice owned by the current user.

  Returns:
      SingleInvoiceView: The created invoice, including its self link
  """
  return invoice_service.create_invoice(request, current_user.id, session)
