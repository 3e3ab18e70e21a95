"""Tests for invoice view mapping."""

from datetime import UTC, datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from invoicer.models.invoicing import Address, Client, Invoice, Item
from invoicer.operations.invoicing.view_mapper import (
  from_epoch_millis,
  map_list,
  map_single,
  to_epoch_millis,
)


def make_invoice(**overrides):
  invoice = SimpleNamespace(
    id="inv_1",
    description="Consulting",
    date=datetime(2023, 11, 14, 22, 13, 20, tzinfo=UTC),
    status="pending",
    payment_terms="terms_30",
    address=SimpleNamespace(
      street="1 Main St", city="Springfield", country="US", post_code="12345"
    ),
    client=SimpleNamespace(
      name="Acme",
      email="billing@acme.example.com",
      address=SimpleNamespace(
        street="99 Market St", city="Shelbyville", country="US", post_code="54321"
      ),
    ),
    items=[SimpleNamespace(id="item_1", name="Hours", price=100.0, quantity=3)],
  )
  for key, value in overrides.items():
    setattr(invoice, key, value)
  return invoice


class TestEpochMillis:
  def test_aware_datetime(self):
    value = datetime(2023, 11, 14, 22, 13, 20, tzinfo=UTC)
    assert to_epoch_millis(value) == 1700000000000

  def test_naive_datetime_is_utc(self):
    assert to_epoch_millis(datetime(1970, 1, 1, 0, 0, 1)) == 1000

  def test_other_offsets_are_normalized(self):
    value = datetime(1970, 1, 1, 1, 0, tzinfo=timezone(timedelta(hours=1)))
    assert to_epoch_millis(value) == 0

  def test_millisecond_precision_is_exact(self):
    millis = 1700000000123
    assert to_epoch_millis(from_epoch_millis(millis)) == millis

  def test_pre_epoch(self):
    assert to_epoch_millis(from_epoch_millis(-1500)) == -1500


class TestMapSingle:
  def test_full_projection(self):
    view = map_single(make_invoice())

    assert view.model_dump(exclude_none=True) == {
      "id": "inv_1",
      "description": "Consulting",
      "address": {
        "street": "1 Main St",
        "city": "Springfield",
        "country": "US",
        "post_code": "12345",
      },
      "date": 1700000000000,
      "status": "pending",
      "items": [{"id": "item_1", "name": "Hours", "price": 100.0, "quantity": 3}],
      "client": {
        "name": "Acme",
        "email": "billing@acme.example.com",
        "address": {
          "street": "99 Market St",
          "city": "Shelbyville",
          "country": "US",
          "post_code": "54321",
        },
      },
      "payment": {"key": "terms_30", "text": "Net 30 Days"},
    }

  def test_links_absent_by_default(self):
    dumped = map_single(make_invoice()).model_dump(exclude_none=True)
    assert "links" not in dumped

  def test_with_links(self):
    view = map_single(make_invoice(), with_links=True)

    assert [link.model_dump() for link in view.links] == [
      {"rel": "self", "href": "/api/invoices/inv_1", "action": "GET"}
    ]

  def test_partial_input_gives_partial_output(self):
    invoice = SimpleNamespace(id="inv_2", status="paid")

    assert map_single(invoice).model_dump(exclude_none=True) == {
      "id": "inv_2",
      "status": "paid",
    }

  def test_payment_text_follows_code(self):
    view = map_single(make_invoice(payment_terms="terms_7"))
    assert view.payment.model_dump() == {"key": "terms_7", "text": "Net 7 Days"}

  def test_unknown_payment_code_raises(self):
    with pytest.raises(KeyError):
      map_single(make_invoice(payment_terms="terms_90"))

  def test_unloaded_relationships_are_omitted(self):
    # A transient model whose relationships were never set
    invoice = Invoice(id="inv_3", description="Bare", status="draft")

    dumped = map_single(invoice).model_dump(exclude_none=True)
    assert dumped["id"] == "inv_3"
    assert "address" not in dumped
    assert "client" not in dumped

  def test_orm_objects(self):
    invoice = Invoice(
      id="inv_4",
      description="ORM",
      date=datetime(2024, 1, 1),
      status="pending",
      payment_terms="terms_1",
      address=Address(street="s", city="c", country="k", post_code="p"),
      client=Client(
        name="n",
        email="n@example.com",
        address=Address(street="s2", city="c2", country="k2", post_code="p2"),
      ),
      items=[Item(id="item_9", name="i", price=2.5, quantity=4)],
    )

    view = map_single(invoice)

    assert view.date == 1704067200000
    assert view.client.address.street == "s2"
    assert view.items[0].id == "item_9"
    assert view.payment.text == "Net 1 Day"


class TestMapList:
  def test_summary_shape(self):
    views = map_list([make_invoice()])

    assert len(views) == 1
    dumped = views[0].model_dump(exclude_none=True)
    assert dumped["client"] == {"name": "Acme", "email": "billing@acme.example.com"}
    assert "description" not in dumped
    assert "address" not in dumped
    assert dumped["links"] == [
      {"rel": "self", "href": "/api/invoices/inv_1", "action": "GET"}
    ]
    assert dumped["payment"] == {"key": "terms_30", "text": "Net 30 Days"}

  def test_every_entry_has_a_self_link(self):
    views = map_list([make_invoice(id="inv_a"), make_invoice(id="inv_b")])

    assert [view.links[0].href for view in views] == [
      "/api/invoices/inv_a",
      "/api/invoices/inv_b",
    ]

  def test_missing_id_gets_no_link(self):
    invoice = make_invoice()
    del invoice.id

    view = map_list([invoice])[0]

    assert view.id is None
    assert view.links == []

  def test_empty(self):
    assert map_list([]) == []
