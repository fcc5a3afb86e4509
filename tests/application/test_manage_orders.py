"""Tests for the admin order use cases: show, list, status and delete."""

import pytest

from storefront.application.create_order import CreateOrderHandler
from storefront.application.delete_order import DeleteOrderHandler
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.application.update_order_status import UpdateOrderStatusHandler
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.order import Order
from storefront.infrastructure.persistence.memory_order_repository import (
    MemoryOrderRepository,
)


class DeletedMidUpdateRepository(MemoryOrderRepository):
    """Loses every order it reads, as if a delete-order request ran right after."""

    def get_by_id(self, order_id: int) -> Order | None:
        order = super().get_by_id(order_id)
        self.delete(order_id)
        return order


@pytest.fixture()
def order_repo() -> MemoryOrderRepository:
    repo = MemoryOrderRepository()
    create = CreateOrderHandler(repo)
    create.handle([{"name": "Shirt", "price": 10, "quantity": 2}], {"name": "Li"})
    create.handle(
        [
            {"name": "Hat", "price": 5, "quantity": 1},
            {"name": "Socks", "price": 2, "quantity": 3},
        ],
        {"name": "Wang"},
    )
    return repo


class TestShowOrder:

    def test_returns_order(self, order_repo):
        dto = ShowOrderHandler(order_repo).handle(2)
        assert dto.customer.name == "Wang"
        assert [i.name for i in dto.items] == ["Hat", "Socks"]

    def test_unknown_id(self, order_repo):
        with pytest.raises(EntityNotFoundError, match="Order #99 not found"):
            ShowOrderHandler(order_repo).handle(99)

    def test_accepts_id_string(self, order_repo):
        assert ShowOrderHandler(order_repo).handle("2").customer.name == "Wang"

    @pytest.mark.parametrize("order_id", ["abc", "", None, True, 1.5])
    def test_unparsable_id_not_found(self, order_repo, order_id):
        with pytest.raises(EntityNotFoundError):
            ShowOrderHandler(order_repo).handle(order_id)


class TestListOrders:

    def test_sorted_by_id(self, order_repo):
        dtos = ListOrdersHandler(order_repo).handle()
        assert [d.id for d in dtos] == [1, 2]


class TestUpdateOrderStatus:

    def test_mark_paid(self, order_repo):
        dto = UpdateOrderStatusHandler(order_repo).handle(1, "paid")
        assert dto.status == "paid"
        assert ShowOrderHandler(order_repo).handle(1).status == "paid"

    def test_back_to_placed(self, order_repo):
        handler = UpdateOrderStatusHandler(order_repo)
        handler.handle(1, "paid")
        assert handler.handle(1, "placed").status == "placed"

    def test_invalid_status_rejected(self, order_repo):
        with pytest.raises(ValidationError, match="Unsupported order status"):
            UpdateOrderStatusHandler(order_repo).handle(1, "shipped")
        assert ShowOrderHandler(order_repo).handle(1).status == "placed"

    def test_unknown_id(self, order_repo):
        with pytest.raises(EntityNotFoundError):
            UpdateOrderStatusHandler(order_repo).handle(99, "paid")

    def test_unparsable_id_not_found(self, order_repo):
        with pytest.raises(EntityNotFoundError):
            UpdateOrderStatusHandler(order_repo).handle("abc", "paid")

    def test_invalid_status_wins_over_unknown_id(self, order_repo):
        with pytest.raises(ValidationError):
            UpdateOrderStatusHandler(order_repo).handle("abc", "shipped")

    def test_order_deleted_during_update_stays_deleted(self):
        repo = DeletedMidUpdateRepository()
        CreateOrderHandler(repo).handle(
            [{"name": "Shirt", "price": 1, "quantity": 1}], {"name": "Li"}
        )

        with pytest.raises(EntityNotFoundError):
            UpdateOrderStatusHandler(repo).handle(1, "paid")
        assert repo.list_all() == []


class TestDeleteOrder:

    def test_returns_removed_order(self, order_repo):
        dto = DeleteOrderHandler(order_repo).handle(1)
        assert dto.customer.name == "Li"
        assert [o.id for o in order_repo.list_all()] == [2]

    def test_unknown_id_leaves_ledger_untouched(self, order_repo):
        with pytest.raises(EntityNotFoundError):
            DeleteOrderHandler(order_repo).handle(99)
        assert len(order_repo.list_all()) == 2

    def test_accepts_id_string(self, order_repo):
        DeleteOrderHandler(order_repo).handle("2")
        assert [o.id for o in order_repo.list_all()] == [1]

    def test_unparsable_id_not_found(self, order_repo):
        with pytest.raises(EntityNotFoundError, match="Order #abc not found"):
            DeleteOrderHandler(order_repo).handle("abc")
        assert len(order_repo.list_all()) == 2
