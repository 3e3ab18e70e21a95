"""create users and invoicing tables

Revision ID: 3f9c1d2e7a10
Revises:
Create Date: 2026-10-19 09:12:44.318207

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "3f9c1d2e7a10"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
  op.create_table(
    "users",
    sa.Column("id", sa.String(), nullable=False),
    sa.Column("username", sa.String(), nullable=False),
    sa.Column("password_hash", sa.String(), nullable=False),
    sa.Column("created_at", sa.DateTime(), nullable=False),
    sa.Column("updated_at", sa.DateTime(), nullable=False),
    sa.PrimaryKeyConstraint("id"),
  )
  op.create_index(op.f("ix_users_username"), "users", ["username"], unique=True)

  op.create_table(
    "addresses",
    sa.Column("id", sa.String(), nullable=False),
    sa.Column("street", sa.String(), nullable=False),
    sa.Column("city", sa.String(), nullable=False),
    sa.Column("country", sa.String(), nullable=False),
    sa.Column("post_code", sa.String(), nullable=False),
    sa.PrimaryKeyConstraint("id"),
  )

  op.create_table(
    "clients",
    sa.Column("id", sa.String(), nullable=False),
    sa.Column("name", sa.String(), nullable=False),
    sa.Column("email", sa.String(), nullable=False),
    sa.Column("address_id", sa.String(), nullable=False),
    sa.ForeignKeyConstraint(["address_id"], ["addresses.id"]),
    sa.PrimaryKeyConstraint("id"),
  )

  op.create_table(
    "invoices",
    sa.Column("id", sa.String(), nullable=False),
    sa.Column("user_id", sa.String(), nullable=False),
    sa.Column("date", sa.DateTime(timezone=True), nullable=False),
    sa.Column("description", sa.String(), nullable=False),
    sa.Column("payment_terms", sa.String(), nullable=False),
    sa.Column("status", sa.String(), nullable=False),
    sa.Column("is_deleted", sa.Boolean(), nullable=False),
    sa.Column("address_id", sa.String(), nullable=False),
    sa.Column("client_id", sa.String(), nullable=False),
    sa.Column("created_at", sa.DateTime(), nullable=False),
    sa.Column("updated_at", sa.DateTime(), nullable=False),
    sa.ForeignKeyConstraint(["address_id"], ["addresses.id"]),
    sa.ForeignKeyConstraint(["client_id"], ["clients.id"]),
    sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
    sa.PrimaryKeyConstraint("id"),
  )
  op.create_index("idx_invoice_user", "invoices", ["user_id"], unique=False)
  op.create_index(
    "idx_invoice_user_deleted", "invoices", ["user_id", "is_deleted"], unique=False
  )

  op.create_table(
    "items",
    sa.Column("id", sa.String(), nullable=False),
    sa.Column("invoice_id", sa.String(), nullable=False),
    sa.Column("name", sa.String(), nullable=False),
    sa.Column("price", sa.Float(), nullable=False),
    sa.Column("quantity", sa.Integer(), nullable=False),
    sa.Column("created_at", sa.DateTime(), nullable=False),
    sa.ForeignKeyConstraint(["invoice_id"], ["invoices.id"]),
    sa.PrimaryKeyConstraint("id"),
  )
  op.create_index("idx_item_invoice", "items", ["invoice_id"], unique=False)


def downgrade() -> None:
  op.drop_index("idx_item_invoice", table_name="items")
  op.drop_table("items")
  op.drop_index("idx_invoice_user_deleted", table_name="invoices")
  op.drop_index("idx_invoice_user", table_name="invoices")
  op.drop_table("invoices")
  op.drop_table("clients")
  op.drop_table("addresses")
  op.drop_index(op.f("ix_users_username"), table_name="users")
  op.drop_table("users")
