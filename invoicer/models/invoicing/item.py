"""Invoice line item model."""

from datetime import UTC, datetime

from sqlalchemy import Column, DateTime, Float, ForeignKey, Index, Integer, String
from sqlalchemy.orm import relationship

from ...config import IdPrefixes
from ...database import Base
from ...utils.ulid import generate_prefixed_ulid

# Columns a new item must be given
ITEM_FIELDS = ("name", "price", "quantity")


class Item(Base):
  """A billable line on an invoice.

  Ids are assigned on first insert and stay stable across updates.
  """

  __tablename__ = "items"

  id = Column(
    String, primary_key=True, default=lambda: generate_prefixed_ulid(IdPrefixes.ITEM)
  )
  invoice_id = Column(String, ForeignKey("invoices.id"), nullable=False)

  name = Column(String, nullable=False)
  price = Column(Float, nullable=False)
  quantity = Column(Integer, nullable=False)

  created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

  invoice = relationship("Invoice", back_populates="items")

  __table_args__ = (Index("idx_item_invoice", "invoice_id"),)

  def __repr__(self) -> str:
    return f"<Item {self.id} {self.name} x{self.quantity}>"
