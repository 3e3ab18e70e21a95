"""
Item reconciliation for invoice updates.

Compares the stored items of an invoice with the submitted item patch and
produces the deletions and upserts that bring the store in line with the
submission. Pure: nothing here touches the session.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from .patch import Clear, FieldPatch, ItemPatch, SetTo


@dataclass
class ItemReconciliation:
  """
  Planned item operations.

  Attributes:
      to_delete: IDs of stored items to remove
      to_upsert: (stored item ID or None for a new item, fields) in
          submission order
  """

  to_delete: set[str] = field(default_factory=set)
  to_upsert: list[tuple[Optional[str], dict[str, Any]]] = field(default_factory=list)

  @property
  def is_empty(self) -> bool:
    return not self.to_delete and not self.to_upsert


def reconcile_items(stored_items: Iterable[Any], submitted: FieldPatch) -> ItemReconciliation:
  """
  Plan the item operations for an update.

  Matching is on item ID only. A submitted ID that matches no stored item
  is planned as a create, and the store assigns a fresh ID.

  Args:
      stored_items: Items currently stored for the invoice (anything with ``id``)
      submitted: Items patch from the update request

  Returns:
      ItemReconciliation with the deletions and upserts to apply
  """
  stored_ids = {item.id for item in stored_items}

  if isinstance(submitted, Clear):
    return ItemReconciliation(to_delete=stored_ids)

  if not isinstance(submitted, SetTo):
    return ItemReconciliation()

  submitted_items: list[ItemPatch] = submitted.value
  kept_ids = {item.id for item in submitted_items if item.id in stored_ids}

  plan = ItemReconciliation(to_delete=stored_ids - kept_ids)
  for item in submitted_items:
    target_id = item.id if item.id in stored_ids else None
    plan.to_upsert.append((target_id, item.fields()))

  return plan
