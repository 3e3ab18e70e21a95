"""Invoicing operations: view mapping, item reconciliation and the invoice service."""

from .invoice_service import InvoiceService
from .patch import CLEAR, UNCHANGED, Clear, InvoicePatch, ItemPatch, SetTo, Unchanged
from .payment_terms import payment_terms_label
from .reconciliation import ItemReconciliation, reconcile_items
from .view_mapper import from_epoch_millis, map_list, map_single, to_epoch_millis

__all__ = [
  "CLEAR",
  "Clear",
  "InvoicePatch",
  "InvoiceService",
  "ItemPatch",
  "ItemReconciliation",
  "SetTo",
  "UNCHANGED",
  "Unchanged",
  "from_epoch_millis",
  "map_list",
  "map_single",
  "payment_terms_label",
  "reconcile_items",
  "to_epoch_millis",
]
