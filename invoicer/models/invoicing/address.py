"""Postal address model shared by issuers and clients (never the same row)."""

from sqlalchemy import Column, String

from ...config import IdPrefixes
from ...database import Base
from ...utils.ulid import generate_prefixed_ulid


class Address(Base):
  """A street address owned by exactly one invoice or one client."""

  __tablename__ = "addresses"

  id = Column(
    String,
    primary_key=True,
    default=lambda: generate_prefixed_ulid(IdPrefixes.ADDRESS),
  )
  street = Column(String, nullable=False)
  city = Column(String, nullable=False)
  country = Column(String, nullable=False)
  post_code = Column(String, nullable=False)

  def __repr__(self) -> str:
    return f"<Address {self.id} {self.city}, {self.country}>"
