"""Tests for the in-memory order ledger."""

import threading

import pytest

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.order import Customer, Order, OrderLineItem, OrderStatus
from storefront.domain.model.value_objects import Money, Quantity
from storefront.infrastructure.persistence.memory_order_repository import (
    MemoryOrderRepository,
)


def _order() -> Order:
    return Order.create(
        Customer(name="Li"),
        [OrderLineItem(name="Shirt", price=Money.of("10"), quantity=Quantity(1))],
    )


class TestMemoryOrderRepository:

    def test_assigns_ids_from_1(self):
        repo = MemoryOrderRepository()
        assert repo.next_id() == 1
        order = _order()
        repo.save(order)
        assert order.id == 1
        assert repo.next_id() == 2

    def test_returned_orders_are_detached(self):
        repo = MemoryOrderRepository()
        repo.save(_order())

        fetched = repo.get_by_id(1)
        fetched.update_status(OrderStatus.PAID)

        assert repo.get_by_id(1).status == OrderStatus.PLACED

    def test_ids_not_reused_after_delete(self):
        repo = MemoryOrderRepository()
        repo.save(_order())
        repo.save(_order())
        repo.delete(2)
        order = _order()
        repo.save(order)
        assert order.id == 3

    def test_update_of_deleted_order_refused(self):
        repo = MemoryOrderRepository()
        repo.save(_order())
        stale = repo.get_by_id(1)
        repo.delete(1)
        stale.update_status(OrderStatus.PAID)
        with pytest.raises(EntityNotFoundError):
            repo.save(stale)
        assert repo.list_all() == []

    def test_delete_unknown_returns_none(self):
        assert MemoryOrderRepository().delete(1) is None

    def test_concurrent_creates_get_distinct_ids(self):
        repo = MemoryOrderRepository()
        ids: list[int] = []

        def place_orders():
            for _ in range(50):
                order = _order()
                repo.save(order)
                ids.append(order.id)

        threads = [threading.Thread(target=place_orders) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert sorted(ids) == list(range(1, 401))
