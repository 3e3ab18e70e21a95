"""Tests for the invoice service against the test database."""

from unittest.mock import patch

import pytest

from invoicer.exceptions import IncompleteItemError, InvoiceNotFoundError
from invoicer.models.api.invoices import InvoiceCreateRequest, InvoiceUpdateRequest
from invoicer.models.invoicing import Address, Client, Invoice, Item
from invoicer.operations.invoicing import InvoicePatch, InvoiceService


@pytest.fixture
def service():
  return InvoiceService()


@pytest.fixture
def owner(make_user):
  return make_user("owner_user")


@pytest.fixture
def stored_invoice(service, test_db, owner, invoice_payload):
  view = service.create_invoice(
    InvoiceCreateRequest.model_validate(invoice_payload), owner.id, test_db
  )
  return view


def update(service, test_db, invoice_id, body, owner_id=None):
  patch_ = InvoicePatch.from_request(InvoiceUpdateRequest.model_validate(body))
  return service.update_invoice(invoice_id, patch_, test_db, owner_id=owner_id)


def items_by_name(view):
  return {item.name: item for item in view.items}


class TestCreateInvoice:
  def test_creates_nested_graph(self, stored_invoice, test_db):
    assert stored_invoice.id.startswith("inv_")
    assert stored_invoice.date == 1700000000000
    assert stored_invoice.status == "pending"
    assert stored_invoice.payment.key == "terms_30"
    assert stored_invoice.client.address.city == "Shelbyville"
    assert {item.name for item in stored_invoice.items} == {"Design", "Hosting"}
    assert all(item.id.startswith("item_") for item in stored_invoice.items)

    assert test_db.query(Invoice).count() == 1
    assert test_db.query(Client).count() == 1
    assert test_db.query(Address).count() == 2
    assert test_db.query(Item).count() == 2

  def test_includes_self_link(self, stored_invoice):
    assert [link.href for link in stored_invoice.links] == [
      f"/api/invoices/{stored_invoice.id}"
    ]

  def test_explicit_status_and_payment(self, service, test_db, owner, invoice_payload):
    invoice_payload.update(status="draft", payment="terms_14")
    view = service.create_invoice(
      InvoiceCreateRequest.model_validate(invoice_payload), owner.id, test_db
    )

    assert view.status == "draft"
    assert view.payment.text == "Net 14 Days"


class TestGetInvoices:
  def test_get_invoice_without_links(self, service, test_db, owner, stored_invoice):
    view = service.get_invoice(stored_invoice.id, test_db, owner_id=owner.id)

    assert view.id == stored_invoice.id
    assert view.links is None

  def test_foreign_owner_sees_nothing(
    self, service, test_db, make_user, stored_invoice
  ):
    stranger = make_user("stranger")

    assert service.get_invoice(stored_invoice.id, test_db, owner_id=stranger.id) is None
    assert service.get_invoices(stranger.id, test_db) == []

  def test_list_for_owner(self, service, test_db, owner, stored_invoice):
    views = service.get_invoices(owner.id, test_db)

    assert [view.id for view in views] == [stored_invoice.id]
    assert views[0].links[0].href == f"/api/invoices/{stored_invoice.id}"


class TestSoftDelete:
  def test_soft_delete_hides_but_keeps_row(
    self, service, test_db, owner, stored_invoice
  ):
    assert service.soft_delete_invoice(stored_invoice.id, test_db, owner_id=owner.id)

    assert service.get_invoice(stored_invoice.id, test_db) is None
    assert service.get_invoices(owner.id, test_db) == []
    row = test_db.query(Invoice).filter(Invoice.id == stored_invoice.id).one()
    assert row.is_deleted is True

  def test_deleting_twice_is_not_found(self, service, test_db, owner, stored_invoice):
    service.soft_delete_invoice(stored_invoice.id, test_db, owner_id=owner.id)

    with pytest.raises(InvoiceNotFoundError):
      service.soft_delete_invoice(stored_invoice.id, test_db, owner_id=owner.id)

  def test_deleted_invoice_cannot_be_updated(
    self, service, test_db, owner, stored_invoice
  ):
    service.soft_delete_invoice(stored_invoice.id, test_db, owner_id=owner.id)

    with pytest.raises(InvoiceNotFoundError):
      update(service, test_db, stored_invoice.id, {"description": "x"})


class TestUpdateInvoice:
  def test_empty_patch_changes_nothing(self, service, test_db, stored_invoice):
    view = update(service, test_db, stored_invoice.id, {})

    expected = stored_invoice.model_copy(update={"links": None})
    assert view.model_dump(exclude={"items"}) == expected.model_dump(
      exclude={"items"}
    )
    assert items_by_name(view).keys() == items_by_name(stored_invoice).keys()
    assert view.links is None

  def test_scalar_patch(self, service, test_db, stored_invoice):
    view = update(
      service,
      test_db,
      stored_invoice.id,
      {"description": "Changed", "status": "paid", "payment": "terms_1", "date": 0},
    )

    assert view.description == "Changed"
    assert view.status == "paid"
    assert view.payment.text == "Net 1 Day"
    assert view.date == 0
    assert view.client == stored_invoice.client

  def test_nested_address_patches(self, service, test_db, stored_invoice):
    view = update(
      service,
      test_db,
      stored_invoice.id,
      {"address": {"city": "Ogdenville"}, "client": {"address": {"country": "CA"}}},
    )

    assert view.address.city == "Ogdenville"
    assert view.address.street == stored_invoice.address.street
    assert view.client.address.country == "CA"
    assert view.client.address.city == stored_invoice.client.address.city

  def test_clear_removes_all_items(self, service, test_db, stored_invoice):
    view = update(service, test_db, stored_invoice.id, {"items": []})

    assert view.items == []
    assert test_db.query(Item).count() == 0

  def test_keep_update_delete_and_create(self, service, test_db, stored_invoice):
    design = items_by_name(stored_invoice)["Design"]
    view = update(
      service,
      test_db,
      stored_invoice.id,
      {
        "items": [
          {"id": design.id, "name": "Design v2", "price": 1500, "quantity": 1},
          {"name": "Support", "price": 80, "quantity": 5},
        ]
      },
    )

    items = items_by_name(view)
    assert set(items) == {"Design v2", "Support"}
    assert items["Design v2"].id == design.id
    assert items["Design v2"].price == 1500.0
    assert items["Support"].id.startswith("item_")
    assert items["Support"].id not in {item.id for item in stored_invoice.items}

  def test_unknown_item_id_gets_fresh_id(self, service, test_db, stored_invoice):
    view = update(
      service,
      test_db,
      stored_invoice.id,
      {"items": [{"id": "item_forged", "name": "Ghost", "price": 1, "quantity": 1}]},
    )

    assert len(view.items) == 1
    assert view.items[0].name == "Ghost"
    assert view.items[0].id != "item_forged"
    assert test_db.query(Item).filter(Item.id == "item_forged").count() == 0

  def test_partial_item_update_keeps_other_columns(
    self, service, test_db, stored_invoice
  ):
    hosting = items_by_name(stored_invoice)["Hosting"]
    design = items_by_name(stored_invoice)["Design"]

    view = update(
      service,
      test_db,
      stored_invoice.id,
      {"items": [{"id": hosting.id, "name": "Cloud hosting"}, {"id": design.id}]},
    )

    items = {item.id: item for item in view.items}
    assert items[hosting.id].name == "Cloud hosting"
    assert items[hosting.id].price == 25.5
    assert items[hosting.id].quantity == 12
    assert items[design.id] == design

  def test_unknown_item_id_with_partial_fields_is_rejected(
    self, service, test_db, stored_invoice
  ):
    with pytest.raises(IncompleteItemError) as exc_info:
      update(
        service,
        test_db,
        stored_invoice.id,
        {"description": "Never stored", "items": [{"id": "item_forged", "name": "Ghost"}]},
      )

    assert exc_info.value.details == {"missing_fields": ["price", "quantity"]}
    view = service.get_invoice(stored_invoice.id, test_db)
    assert view.description == stored_invoice.description
    assert len(view.items) == 2

  def test_foreign_owner_is_not_found(self, service, test_db, make_user, stored_invoice):
    stranger = make_user("stranger")

    with pytest.raises(InvoiceNotFoundError):
      update(
        service, test_db, stored_invoice.id, {"description": "x"}, owner_id=stranger.id
      )

  def test_missing_invoice_is_not_found(self, service, test_db, owner):
    with pytest.raises(InvoiceNotFoundError):
      update(service, test_db, "inv_missing", {"description": "x"})

  def test_failure_rolls_back_everything(self, service, test_db, stored_invoice):
    with patch.object(
      test_db, "commit", side_effect=RuntimeError("commit failed")
    ):
      with pytest.raises(RuntimeError):
        update(
          service,
          test_db,
          stored_invoice.id,
          {"description": "Never stored", "items": []},
        )

    view = service.get_invoice(stored_invoice.id, test_db)
    assert view.description == stored_invoice.description
    assert len(view.items) == 2
