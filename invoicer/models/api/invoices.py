"""
Invoice API models.

Request models are the validation boundary for invoice payloads. View
models describe the JSON shapes returned to clients; every view field is
optional so a partially loaded invoice projects to a partial view, and
responses are serialized with ``exclude_none``.
"""

from typing import Optional

from pydantic import BaseModel, EmailStr, Field, model_validator

from ..invoicing.invoice import InvoiceStatus, PaymentTerms


# ============================================================================
# Requests
# ============================================================================


class AddressInput(BaseModel):
  """A full postal address."""

  street: str = Field(..., description="Street and number")
  city: str = Field(..., description="City")
  country: str = Field(..., description="Country")
  post_code: str = Field(..., description="Postal code")


class ClientInput(BaseModel):
  """The billed party of a new invoice."""

  name: str = Field(..., min_length=1, description="Client name")
  email: EmailStr = Field(..., description="Client email address")
  address: AddressInput


class ItemInput(BaseModel):
  """A line item of a new invoice."""

  name: str = Field(..., description="Item name")
  price: float = Field(..., description="Unit price")
  quantity: int = Field(..., description="Quantity")


class InvoiceCreateRequest(BaseModel):
  """Request body for creating an invoice."""

  date: int = Field(
    ...,
    description="Issue date in milliseconds since the Unix epoch",
    examples=[1700000000000],
  )
  description: str = Field(..., min_length=1, description="Free-text description")
  address: AddressInput = Field(..., description="Issuer address")
  client: ClientInput
  payment: Optional[PaymentTerms] = Field(
    None, description="Payment terms code (defaults to terms_30)"
  )
  status: Optional[InvoiceStatus] = Field(
    None, description="Invoice status (defaults to pending)"
  )
  items: list[ItemInput] = Field(default_factory=list)


class AddressPatchInput(BaseModel):
  """Partial address; only the sent keys are changed."""

  street: Optional[str] = None
  city: Optional[str] = None
  country: Optional[str] = None
  post_code: Optional[str] = None


class ClientPatchInput(BaseModel):
  """Partial client; only the sent keys are changed."""

  name: Optional[str] = Field(None, min_length=1)
  email: Optional[EmailStr] = None
  address: Optional[AddressPatchInput] = None


class ItemUpdateInput(BaseModel):
  """
  A submitted item.

  With an id it refers to a stored item and only the sent fields change.
  Without one it is a new item and needs every field.
  """

  id: Optional[str] = Field(None, description="ID of an existing item")
  name: Optional[str] = Field(None, description="Item name")
  price: Optional[float] = Field(None, description="Unit price")
  quantity: Optional[int] = Field(None, description="Quantity")

  @model_validator(mode="after")
  def new_items_are_complete(self) -> "ItemUpdateInput":
    if self.id is None and None in (self.name, self.price, self.quantity):
      raise ValueError("New items need name, price and quantity")
    return self


class InvoiceUpdateRequest(BaseModel):
  """Request body for a sparse invoice update."""

  date: Optional[int] = Field(
    None, description="Issue date in milliseconds since the Unix epoch"
  )
  description: Optional[str] = Field(None, min_length=1)
  address: Optional[AddressPatchInput] = None
  client: Optional[ClientPatchInput] = None
  payment: Optional[PaymentTerms] = None
  status: Optional[InvoiceStatus] = None
  items: Optional[list[ItemUpdateInput]] = Field(
    None,
    description="Desired item set; an empty list removes every item",
  )


# ============================================================================
# Views
# ============================================================================


class AddressView(BaseModel):
  street: Optional[str] = None
  city: Optional[str] = None
  country: Optional[str] = None
  post_code: Optional[str] = None


class ItemView(BaseModel):
  id: Optional[str] = None
  name: Optional[str] = None
  price: Optional[float] = None
  quantity: Optional[int] = None


class ClientView(BaseModel):
  name: Optional[str] = None
  email: Optional[str] = None
  address: Optional[AddressView] = None


class PaymentView(BaseModel):
  key: str = Field(..., examples=["terms_30"])
  text: str = Field(..., examples=["Net 30 Days"])


class LinkView(BaseModel):
  rel: str = Field(..., examples=["self"])
  href: str = Field(..., examples=["/api/invoices/inv_01J9Z8Q3K4N2V7W5X6Y8Z9A0B1"])
  action: str = Field(..., examples=["GET"])


class SingleInvoiceView(BaseModel):
  """Detailed projection of one invoice."""

  id: Optional[str] = None
  description: Optional[str] = None
  address: Optional[AddressView] = None
  date: Optional[int] = Field(None, description="Milliseconds since the Unix epoch")
  status: Optional[str] = None
  items: Optional[list[ItemView]] = None
  client: Optional[ClientView] = None
  payment: Optional[PaymentView] = None
  links: Optional[list[LinkView]] = None


class InvoiceSummaryView(BaseModel):
  """List projection of an invoice; always carries its self link."""

  id: Optional[str] = None
  date: Optional[int] = Field(None, description="Milliseconds since the Unix epoch")
  status: Optional[str] = None
  client: Optional[ClientView] = None
  items: Optional[list[ItemView]] = None
  payment: Optional[PaymentView] = None
  links: list[LinkView]


class DeleteInvoiceResponse(BaseModel):
  status: bool = Field(..., description="The invoice's new soft-delete flag")
