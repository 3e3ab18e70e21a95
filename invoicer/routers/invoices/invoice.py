"""Single invoice endpoints: get, update and delete."""

from sqlalchemy.orm import Session
from fastapi import APIRouter, Depends, Path, Request

from ...database import get_async_db_session
from ...exceptions import IncompleteItemError, InvoiceNotFoundError
from ...middleware.auth.dependencies import get_current_user, get_invoice_service
from ...models.api.common import ErrorResponse, ValidationErrorResponse
from ...models.api.invoices import (
  DeleteInvoiceResponse,
  InvoiceUpdateRequest,
  SingleInvoiceView,
)
from ...models.iam import User
from ...operations.invoicing import InvoicePatch, InvoiceService
from ...security import handle_exception_securely

router = APIRouter()

InvoiceId = Path(..., description="Invoice ID", examples=["inv_01J9Z8Q3K4N2V7W5X6Y8Z9A0B1"])


@router.get(
  "/{invoice_id}",
  response_model=SingleInvoiceView,
  response_model_exclude_none=True,
  summary="Get Invoice",
  description="Get one of the current user's invoices.",
  operation_id="getInvoice",
  responses={
    401: {"model": ErrorResponse, "description": "Not authenticated"},
    404: {"model": ErrorResponse, "description": "Invoice not found"},
  },
)
async def get_invoice(
  fastapi_request: Request,
  invoice_id: str = InvoiceId,
  current_user: User = Depends(get_current_user),
  session: Session = Depends(get_async_db_session),
  invoice_service: InvoiceService = Depends(get_invoice_service),
) -> SingleInvoiceView:
  view = invoice_service.get_invoice(invoice_id, session, owner_id=current_user.id)
  if view is None:
    handle_exception_securely(
      InvoiceNotFoundError(invoice_id),
      request_id=getattr(fastapi_request.state, "request_id", None),
      user_id=current_user.id,
    )
  return view


@router.put(
  "/{invoice_id}",
  response_model=SingleInvoiceView,
  response_model_exclude_none=True,
  summary="Update Invoice",
  description=(
    "Sparse update: fields that are not sent stay unchanged. A sent item list "
    "replaces the stored items; items carrying an ID update that item and an "
    "empty list removes every item."
  ),
  operation_id="updateInvoice",
  responses={
    400: {"model": ValidationErrorResponse, "description": "Invalid request data"},
    401: {"model": ErrorResponse, "description": "Not authenticated"},
    404: {"model": ErrorResponse, "description": "Invoice not found"},
  },
)
async def update_invoice(
  request: InvoiceUpdateRequest,
  fastapi_request: Request,
  invoice_id: str = InvoiceId,
  current_user: User = Depends(get_current_user),
  session: Session = Depends(get_async_db_session),
  invoice_service: InvoiceService = Depends(get_invoice_service),
) -> SingleInvoiceView:
  patch = InvoicePatch.from_request(request)
  try:
    return invoice_service.update_invoice(
      invoice_id, patch, session, owner_id=current_user.id
    )
  except (InvoiceNotFoundError, IncompleteItemError) as e:
    handle_exception_securely(
      e,
      request_id=getattr(fastapi_request.state, "request_id", None),
      user_id=current_user.id,
    )


@router.delete(
  "/{invoice_id}",
  response_model=DeleteInvoiceResponse,
  summary="Delete Invoice",
  description="Soft-delete an invoice; it disappears from every read.",
  operation_id="deleteInvoice",
  responses={
    401: {"model": ErrorResponse, "description": "Not authenticated"},
    404: {"model": ErrorResponse, "description": "Invoice not found"},
  },
)
async def delete_invoice(
  fastapi_request: Request,
  invoice_id: str = InvoiceId,
  current_user: User = Depends(get_current_user),
  session: Session = Depends(get_async_db_session),
  invoice_service: InvoiceService = Depends(get_invoice_service),
) -> DeleteInvoiceResponse:
  try:
    is_deleted = invoice_service.soft_delete_invoice(
      invoice_id, session, owner_id=current_user.id
    )
  except InvoiceNotFoundError as e:
    handle_exception_securely(
      e,
      request_id=getattr(fastapi_request.state, "request_id", None),
      user_id=current_user.id,
    )
  return DeleteInvoiceResponse(status=is_deleted)
