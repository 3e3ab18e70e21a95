"""Invoice client model."""

from sqlalchemy import Column, ForeignKey, String
from sqlalchemy.orm import relationship

from ...config import IdPrefixes
from ...database import Base
from ...utils.ulid import generate_prefixed_ulid


class Client(Base):
  """The billed party of an invoice. Not shared between invoices."""

  __tablename__ = "clients"

  id = Column(
    String,
    primary_key=True,
    default=lambda: generate_prefixed_ulid(IdPrefixes.CLIENT),
  )
  name = Column(String, nullable=False)
  email = Column(String, nullable=False)
  address_id = Column(String, ForeignKey("addresses.id"), nullable=False)

  address = relationship(
    "Address",
    foreign_keys=[address_id],
    cascade="all, delete-orphan",
    single_parent=True,
  )

  def __repr__(self) -> str:
    return f"<Client {self.id} {self.email}>"
