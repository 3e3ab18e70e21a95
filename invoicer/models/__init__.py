# Import every mapped class so relationship targets resolve on first use
from .iam import User
from .invoicing import Address, Client, Invoice, InvoiceStatus, Item, PaymentTerms


__all__ = [
  "Address",
  "Client",
  "Invoice",
  "InvoiceStatus",
  "Item",
  "PaymentTerms",
  "User",
]
