"""
Invoice view mapping.

Projects persisted invoices into the public view shapes. Attributes that
are missing, ``None`` or not loaded on the source are left out of the view
rather than defaulted.
"""

from datetime import UTC, datetime, timedelta
from typing import Any, Iterable, Optional

from sqlalchemy import inspect as sa_inspect
from sqlalchemy.exc import NoInspectionAvailable

from ...config import INVOICES_PATH
from ...models.api.invoices import (
  AddressView,
  ClientView,
  InvoiceSummaryView,
  ItemView,
  LinkView,
  PaymentView,
  SingleInvoiceView,
)
from .payment_terms import payment_terms_label

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_MILLISECOND = timedelta(milliseconds=1)


def to_epoch_millis(value: datetime) -> int:
  """Milliseconds since the Unix epoch. Naive datetimes are read as UTC."""
  if value.tzinfo is None:
    value = value.replace(tzinfo=UTC)
  return (value - EPOCH) // _ONE_MILLISECOND


def from_epoch_millis(millis: int) -> datetime:
  """Aware UTC datetime for a millisecond timestamp."""
  return EPOCH + timedelta(milliseconds=millis)


def _get(source: Any, name: str) -> Any:
  """Attribute value, or None when absent or an unloaded relationship."""
  if source is None:
    return None
  try:
    state = sa_inspect(source)
  except NoInspectionAvailable:
    state = None
  if state is not None and name in state.unloaded:
    return None
  return getattr(source, name, None)


def self_link(invoice_id: str) -> LinkView:
  return LinkView(rel="self", href=f"{INVOICES_PATH}/{invoice_id}", action="GET")


def _address_view(address: Any) -> Optional[AddressView]:
  if address is None:
    return None
  return AddressView(
    street=_get(address, "street"),
    city=_get(address, "city"),
    country=_get(address, "country"),
    post_code=_get(address, "post_code"),
  )


def _item_views(items: Optional[Iterable[Any]]) -> Optional[list[ItemView]]:
  if items is None:
    return None
  return [
    ItemView(
      id=_get(item, "id"),
      name=_get(item, "name"),
      price=_get(item, "price"),
      quantity=_get(item, "quantity"),
    )
    for item in items
  ]


def _client_view(client: Any, with_address: bool) -> Optional[ClientView]:
  if client is None:
    return None
  address = _address_view(_get(client, "address")) if with_address else None
  return ClientView(
    name=_get(client, "name"),
    email=_get(client, "email"),
    address=address,
  )


def _payment_view(code: Optional[str]) -> Optional[PaymentView]:
  if code is None:
    return None
  return PaymentView(key=str(getattr(code, "value", code)), text=payment_terms_label(code))


def _millis(value: Optional[datetime]) -> Optional[int]:
  return to_epoch_millis(value) if value is not None else None


def _status(invoice: Any) -> Optional[str]:
  status = _get(invoice, "status")
  return getattr(status, "value", status)


def map_single(invoice: Any, with_links: bool = False) -> SingleInvoiceView:
  """
  Map one invoice to its detailed view.

  Args:
      invoice: Invoice with its address, client (and client address) and items
      with_links: Attach the self link

  Returns:
      SingleInvoiceView carrying only the attributes present on the invoice
  """
  invoice_id = _get(invoice, "id")
  links = None
  if with_links and invoice_id is not None:
    links = [self_link(invoice_id)]

  return SingleInvoiceView(
    id=invoice_id,
    description=_get(invoice, "description"),
    address=_address_view(_get(invoice, "address")),
    date=_millis(_get(invoice, "date")),
    status=_status(invoice),
    items=_item_views(_get(invoice, "items")),
    client=_client_view(_get(invoice, "client"), with_address=True),
    payment=_payment_view(_get(invoice, "payment_terms")),
    links=links,
  )


def _self_links(invoice_id: Optional[str]) -> list[LinkView]:
  return [self_link(invoice_id)] if invoice_id is not None else []


def map_list(invoices: Iterable[Any]) -> list[InvoiceSummaryView]:
  """Map invoices to list views, each with its self link when it has an id."""
  return [
    InvoiceSummaryView(
      id=_get(invoice, "id"),
      date=_millis(_get(invoice, "date")),
      status=_status(invoice),
      client=_client_view(_get(invoice, "client"), with_address=False),
      items=_item_views(_get(invoice, "items")),
      payment=_payment_view(_get(invoice, "payment_terms")),
      links=_self_links(_get(invoice, "id")),
    )
    for invoice in invoices
  ]
