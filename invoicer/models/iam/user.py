"""User authentication model."""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship, Session
from sqlalchemy.exc import SQLAlchemyError

from ...config import IdPrefixes
from ...database import Base
from ...utils.ulid import generate_prefixed_ulid


class User(Base):
  """User model for authentication and invoice ownership."""

  __tablename__ = "users"

  id = Column(
    String, primary_key=True, default=lambda: generate_prefixed_ulid(IdPrefixes.USER)
  )
  username = Column(String, unique=True, nullable=False, index=True)
  password_hash = Column(String, nullable=False)
  created_at = Column(
    DateTime, default=lambda: datetime.now(timezone.utc), nullable=False
  )
  updated_at = Column(
    DateTime,
    default=lambda: datetime.now(timezone.utc),
    onupdate=lambda: datetime.now(timezone.utc),
    nullable=False,
  )

  invoices = relationship("Invoice", back_populates="user")

  def __repr__(self) -> str:
    """String representation of the user."""
    return f"<User {self.id} {self.username}>"

  @classmethod
  def get_by_id(cls, user_id: str, session: Session) -> Optional["User"]:
    """Get a user by ID."""
    return session.query(cls).filter(cls.id == user_id).first()

  @classmethod
  def get_by_username(cls, username: str, session: Session) -> Optional["User"]:
    """Get a user by username (exact match)."""
    return session.query(cls).filter(cls.username == username).first()

  @classmethod
  def create(cls, username: str, password_hash: str, session: Session) -> "User":
    """Create a new user."""
    user = cls(username=username, password_hash=password_hash)
    session.add(user)
    try:
      session.commit()
      session.refresh(user)
    except SQLAlchemyError:
      session.rollback()
      raise
    return user

  def to_public_dict(self) -> dict:
    """The identity pair exposed to clients and encoded in tokens."""
    return {"id": self.id, "username": self.username}
