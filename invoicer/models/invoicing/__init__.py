"""Invoicing models package."""

from .address import Address
from .client import Client
from .invoice import Invoice, InvoiceStatus, PaymentTerms
from .item import ITEM_FIELDS, Item

__all__ = [
  "Address",
  "Client",
  "ITEM_FIELDS",
  "Invoice",
  "InvoiceStatus",
  "Item",
  "PaymentTerms",
]
