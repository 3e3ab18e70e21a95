"""Invoice model with its issuer address, client and line items."""

from datetime import UTC, datetime
from enum import Enum
from typing import Optional

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, String
from sqlalchemy.orm import Session, relationship, selectinload

from ...config import IdPrefixes
from ...database import Base
from ...utils.ulid import generate_prefixed_ulid


class InvoiceStatus(str, Enum):
  DRAFT = "draft"
  PENDING = "pending"
  PAID = "paid"


class PaymentTerms(str, Enum):
  TERMS_1 = "terms_1"
  TERMS_7 = "terms_7"
  TERMS_14 = "terms_14"
  TERMS_30 = "terms_30"


class Invoice(Base):
  """An invoice issued by a user.

  Deletion is soft: the row stays with is_deleted set and is hidden from
  every read and write path afterwards.
  """

  __tablename__ = "invoices"

  id = Column(
    String,
    primary_key=True,
    default=lambda: generate_prefixed_ulid(IdPrefixes.INVOICE),
  )
  user_id = Column(String, ForeignKey("users.id"), nullable=False)

  date = Column(DateTime(timezone=True), nullable=False)
  description = Column(String, nullable=False)
  payment_terms = Column(String, nullable=False, default=PaymentTerms.TERMS_30.value)
  status = Column(String, nullable=False, default=InvoiceStatus.PENDING.value)
  is_deleted = Column(Boolean, nullable=False, default=False)

  address_id = Column(String, ForeignKey("addresses.id"), nullable=False)
  client_id = Column(String, ForeignKey("clients.id"), nullable=False)

  created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)
  updated_at = Column(
    DateTime,
    default=lambda: datetime.now(UTC),
    onupdate=lambda: datetime.now(UTC),
    nullable=False,
  )

  user = relationship("User", back_populates="invoices")
  address = relationship(
    "Address",
    foreign_keys=[address_id],
    cascade="all, delete-orphan",
    single_parent=True,
  )
  client = relationship(
    "Client",
    foreign_keys=[client_id],
    cascade="all, delete-orphan",
    single_parent=True,
  )
  items = relationship(
    "Item",
    back_populates="invoice",
    cascade="all, delete-orphan",
    order_by="Item.created_at",
  )

  __table_args__ = (
    Index("idx_invoice_user", "user_id"),
    Index("idx_invoice_user_deleted", "user_id", "is_deleted"),
  )

  def __repr__(self) -> str:
    return f"<Invoice {self.id} {self.status}>"

  @staticmethod
  def _with_children():
    from .client import Client

    return (
      selectinload(Invoice.address),
      selectinload(Invoice.client).selectinload(Client.address),
      selectinload(Invoice.items),
    )

  @classmethod
  def get_active(
    cls,
    invoice_id: str,
    session: Session,
    owner_id: Optional[str] = None,
    for_update: bool = False,
  ) -> Optional["Invoice"]:
    """Get a non-deleted invoice by ID, optionally restricted to its owner."""
    query = session.query(cls).filter(cls.id == invoice_id, cls.is_deleted.is_(False))
    if owner_id is not None:
      query = query.filter(cls.user_id == owner_id)
    if for_update:
      query = query.with_for_update()
    return query.options(*cls._with_children()).first()

  @classmethod
  def get_active_for_owner(cls, owner_id: str, session: Session) -> list["Invoice"]:
    """Get every non-deleted invoice of a user, oldest first."""
    return (
      session.query(cls)
      .filter(cls.user_id == owner_id, cls.is_deleted.is_(False))
      .options(*cls._with_children())
      .order_by(cls.created_at.asc(), cls.id.asc())
      .all()
    )
