"""Invoice service: owner-scoped reads, nested creation, sparse updates and soft deletion."""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from ...exceptions import IncompleteItemError, InvoiceNotFoundError
from ...models.api.invoices import (
  InvoiceCreateRequest,
  InvoiceSummaryView,
  SingleInvoiceView,
)
from ...models.invoicing import ITEM_FIELDS, Address, Client, Invoice, Item
from .patch import InvoicePatch, apply_fields
from .reconciliation import ItemReconciliation, reconcile_items
from .view_mapper import from_epoch_millis, map_list, map_single

logger = logging.getLogger(__name__)


class InvoiceService:
  """
  Stateless invoice operations.

  Every method takes the request's session. When ``owner_id`` is given,
  invoices of other users behave exactly like missing ones.
  """

  def get_invoice(
    self, invoice_id: str, session: Session, owner_id: Optional[str] = None
  ) -> Optional[SingleInvoiceView]:
    """Get one active invoice, or None if missing, deleted or not owned."""
    invoice = Invoice.get_active(invoice_id, session, owner_id=owner_id)
    if invoice is None:
      return None
    return map_single(invoice)

  def get_invoices(self, owner_id: str, session: Session) -> list[InvoiceSummaryView]:
    """List the active invoices of a user."""
    return map_list(Invoice.get_active_for_owner(owner_id, session))

  def create_invoice(
    self, request: InvoiceCreateRequest, owner_id: str, session: Session
  ) -> SingleInvoiceView:
    """
    Create an invoice with its issuer address, client, client address and items.

    Everything is inserted in one transaction.

    Returns:
        The created invoice's view, including its self link
    """
    invoice = Invoice(
      user_id=owner_id,
      date=from_epoch_millis(request.date),
      description=request.description,
      address=Address(**request.address.model_dump()),
      client=Client(
        name=request.client.name,
        email=str(request.client.email),
        address=Address(**request.client.address.model_dump()),
      ),
      items=[Item(**item.model_dump()) for item in request.items],
    )
    if request.payment is not None:
      invoice.payment_terms = request.payment.value
    if request.status is not None:
      invoice.status = request.status.value

    session.add(invoice)
    try:
      session.commit()
    except Exception:
      session.rollback()
      raise

    invoice_id = invoice.id
    logger.info(
      f"Created invoice {invoice_id} with {len(request.items)} items",
      extra={"user_id": owner_id, "invoice_id": invoice_id},
    )

    created = Invoice.get_active(invoice_id, session)
    return map_single(created, with_links=True)

  def update_invoice(
    self,
    invoice_id: str,
    patch: InvoicePatch,
    session: Session,
    owner_id: Optional[str] = None,
  ) -> SingleInvoiceView:
    """
    Apply a sparse patch to an invoice and its items.

    The invoice row is locked for the duration of the transaction. Item
    deletions are flushed before any item is written. Any failure rolls
    the whole update back.

    Raises:
        InvoiceNotFoundError: If the invoice is missing, deleted or not owned
    """
    try:
      invoice = Invoice.get_active(
        invoice_id, session, owner_id=owner_id, for_update=True
      )
      if invoice is None:
        raise InvoiceNotFoundError(invoice_id)

      plan = reconcile_items(invoice.items, patch.items)
      self._apply_item_plan(invoice, plan, session)

      apply_fields(invoice, patch.scalar_changes())
      if patch.address:
        apply_fields(invoice.address, patch.address)
      if patch.client:
        apply_fields(invoice.client, patch.client)
      if patch.client_address:
        apply_fields(invoice.client.address, patch.client_address)

      session.commit()
    except Exception:
      session.rollback()
      raise

    logger.info(
      f"Updated invoice {invoice_id}: {len(plan.to_delete)} items removed, "
      f"{len(plan.to_upsert)} items written",
      extra={"user_id": owner_id, "invoice_id": invoice_id},
    )

    updated = Invoice.get_active(invoice_id, session)
    return map_single(updated)

  def soft_delete_invoice(
    self, invoice_id: str, session: Session, owner_id: Optional[str] = None
  ) -> bool:
    """
    Mark an invoice as deleted.

    Returns:
        The invoice's new ``is_deleted`` value

    Raises:
        InvoiceNotFoundError: If the invoice is missing, already deleted or not owned
    """
    try:
      invoice = Invoice.get_active(
        invoice_id, session, owner_id=owner_id, for_update=True
      )
      if invoice is None:
        raise InvoiceNotFoundError(invoice_id)

      invoice.is_deleted = True
      session.commit()
    except Exception:
      session.rollback()
      raise

    logger.info(
      f"Soft-deleted invoice {invoice_id}",
      extra={"user_id": owner_id, "invoice_id": invoice_id},
    )
    return invoice.is_deleted

  @staticmethod
  def _apply_item_plan(
    invoice: Invoice, plan: ItemReconciliation, session: Session
  ) -> None:
    if plan.is_empty:
      return

    stored = {item.id: item for item in invoice.items}

    for item_id, fields in plan.to_upsert:
      missing = [name for name in ITEM_FIELDS if name not in fields]
      if item_id is None and missing:
        raise IncompleteItemError(missing)

    for item_id in plan.to_delete:
      # delete-orphan cascade removes the row on flush
      invoice.items.remove(stored[item_id])
    if plan.to_delete:
      session.flush()

    for item_id, fields in plan.to_upsert:
      if item_id is not None:
        apply_fields(stored[item_id], fields)
      else:
        invoice.items.append(Item(**fields))
