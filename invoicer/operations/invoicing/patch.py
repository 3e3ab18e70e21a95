"""
Sparse patches for invoice updates.

Each patchable field carries one of three states so "not sent" and
"cleared" can never be confused:

- ``Unchanged``: leave the stored value alone
- ``SetTo(value)``: replace the stored value
- ``Clear``: remove the stored value (only meaningful for collections)
"""

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar, Union

from ...models.api.invoices import InvoiceUpdateRequest, ItemUpdateInput
from .view_mapper import from_epoch_millis

T = TypeVar("T")


@dataclass(frozen=True)
class Unchanged:
  pass


@dataclass(frozen=True)
class SetTo(Generic[T]):
  value: T


@dataclass(frozen=True)
class Clear:
  pass


UNCHANGED = Unchanged()
CLEAR = Clear()

FieldPatch = Union[Unchanged, SetTo, Clear]


def _scalar(value: Any) -> FieldPatch:
  return UNCHANGED if value is None else SetTo(value)


def _fields(model: Any) -> dict[str, Any]:
  """Sent, non-null keys of a nested partial model."""
  if model is None:
    return {}
  return model.model_dump(exclude_none=True, exclude={"address"})


@dataclass(frozen=True)
class ItemPatch:
  """A submitted item: an id for an existing item (or None) plus the fields that were sent."""

  id: str | None
  values: dict[str, Any] = field(default_factory=dict)

  @classmethod
  def from_input(cls, item: ItemUpdateInput) -> "ItemPatch":
    return cls(
      id=item.id,
      values=item.model_dump(exclude_unset=True, exclude_none=True, exclude={"id"}),
    )

  def fields(self) -> dict[str, Any]:
    return dict(self.values)


@dataclass(frozen=True)
class InvoicePatch:
  description: FieldPatch = UNCHANGED
  date: FieldPatch = UNCHANGED
  status: FieldPatch = UNCHANGED
  payment: FieldPatch = UNCHANGED
  address: dict[str, Any] = field(default_factory=dict)
  client: dict[str, Any] = field(default_factory=dict)
  client_address: dict[str, Any] = field(default_factory=dict)
  items: FieldPatch = UNCHANGED

  @classmethod
  def from_request(cls, request: InvoiceUpdateRequest) -> "InvoicePatch":
    """Build a patch from a validated update request."""
    if request.items is None:
      items: FieldPatch = UNCHANGED
    elif not request.items:
      items = CLEAR
    else:
      items = SetTo([ItemPatch.from_input(item) for item in request.items])

    date: FieldPatch = UNCHANGED
    if request.date is not None:
      date = SetTo(from_epoch_millis(request.date))

    return cls(
      description=_scalar(request.description),
      date=date,
      status=_scalar(request.status.value if request.status else None),
      payment=_scalar(request.payment.value if request.payment else None),
      address=_fields(request.address),
      client=_fields(request.client),
      client_address=_fields(request.client.address if request.client else None),
      items=items,
    )

  def scalar_changes(self) -> dict[str, Any]:
    """Invoice column values to overwrite."""
    columns = {
      "description": self.description,
      "date": self.date,
      "status": self.status,
      "payment_terms": self.payment,
    }
    return {
      name: patch.value for name, patch in columns.items() if isinstance(patch, SetTo)
    }


def apply_fields(target: Any, values: dict[str, Any]) -> None:
  for name, value in values.items():
    setattr(target, name, value)


__all__ = [
  "CLEAR",
  "Clear",
  "FieldPatch",
  "InvoicePatch",
  "ItemPatch",
  "SetTo",
  "UNCHANGED",
  "Unchanged",
  "apply_fields",
]
