"""Integration tests for the CreateOrder use case.

Uses the in-memory ledger — no file I/O.
"""

import pytest

from storefront.application.create_order import CreateOrderHandler
from storefront.application.delete_order import DeleteOrderHandler
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import OrderStatus
from storefront.infrastructure.persistence.memory_order_repository import (
    MemoryOrderRepository,
)

SHIRT = {"name": "Shirt", "price": 10, "quantity": 2}


def _setup() -> tuple[CreateOrderHandler, MemoryOrderRepository]:
    order_repo = MemoryOrderRepository()
    return CreateOrderHandler(order_repo), order_repo


class TestCreateOrderHappyPath:

    def test_first_order_gets_id_1(self):
        handler, _ = _setup()
        dto = handler.handle([SHIRT], {"name": "Li"})
        assert dto.id == 1
        assert dto.status == "placed"

    def test_sequential_ids(self):
        handler, _ = _setup()
        dto1 = handler.handle([SHIRT], {"name": "Li"})
        dto2 = handler.handle([SHIRT], {"name": "Wang"})
        assert dto2.id == dto1.id + 1

    def test_persists_snapshot_of_items(self):
        handler, order_repo = _setup()
        dto = handler.handle(
            [SHIRT, {"name": "Hat", "price": "12.5", "quantity": 1}],
            {"name": "Li"},
        )
        saved = order_repo.get_by_id(dto.id)
        assert saved is not None
        assert saved.status == OrderStatus.PLACED
        assert [(i.name, i.price.as_number(), i.quantity.value) for i in saved.items] == [
            ("Shirt", 10, 2),
            ("Hat", 12.5, 1),
        ]

    def test_optional_customer_fields_kept(self):
        handler, _ = _setup()
        dto = handler.handle(
            [SHIRT],
            {"name": "Li", "phone": "13800000000", "address": "Gate 3", "note": None},
        )
        assert dto.customer.phone == "13800000000"
        assert dto.customer.address == "Gate 3"
        assert dto.customer.note == ""

    def test_customer_name_is_trimmed(self):
        handler, _ = _setup()
        assert handler.handle([SHIRT], {"name": "  Li "}).customer.name == "Li"


class TestOrderIdsNeverReused:

    def test_id_of_deleted_latest_order_is_skipped(self):
        handler, order_repo = _setup()
        handler.handle([SHIRT], {"name": "Li"})
        second = handler.handle([SHIRT], {"name": "Wang"})

        DeleteOrderHandler(order_repo).handle(second.id)
        third = handler.handle([SHIRT], {"name": "Zhao"})

        assert third.id == 3


class TestCreateOrderValidation:

    @pytest.mark.parametrize("items", [None, [], "Shirt", {"name": "Shirt"}])
    def test_missing_or_empty_items_rejected(self, items):
        handler, order_repo = _setup()
        with pytest.raises(ValidationError, match="at least one item"):
            handler.handle(items, {"name": "A"})
        assert order_repo.list_all() == []

    @pytest.mark.parametrize("customer", [None, {}, {"name": ""}, {"name": "  "}, "Li"])
    def test_missing_customer_name_rejected(self, customer):
        handler, order_repo = _setup()
        with pytest.raises(ValidationError, match="Customer name"):
            handler.handle([SHIRT], customer)
        assert order_repo.list_all() == []

    def test_item_without_price_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="price is required"):
            handler.handle([{"name": "Shirt", "quantity": 1}], {"name": "Li"})

    def test_item_with_zero_quantity_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="must be positive"):
            handler.handle([{"name": "Shirt", "price": 10, "quantity": 0}], {"name": "Li"})

    def test_non_object_item_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="Invalid order item"):
            handler.handle(["Shirt"], {"name": "Li"})
