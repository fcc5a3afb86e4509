"""In-memory implementation of OrderRepository.

Orders live for the lifetime of the process. Ids come from a counter
that only moves forward, so deleting the newest order does not free its id.
"""

from __future__ import annotations

import copy
import threading

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.order import Order
from storefront.domain.repository.order_repository import OrderRepository


class MemoryOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[int, Order] = {}
        self._last_id = 0
        self._lock = threading.RLock()

    def next_id(self) -> int:
        with self._lock:
            return self._last_id + 1

    def get_by_id(self, order_id: int) -> Order | None:
        with self._lock:
            order = self._store.get(order_id)
            # Callers mutate what they get back; only save() may change the ledger.
            return copy.deepcopy(order) if order is not None else None

    def list_all(self) -> list[Order]:
        with self._lock:
            return [copy.deepcopy(self._store[k]) for k in sorted(self._store)]

    def save(self, order: Order) -> None:
        with self._lock:
            if order.id is None:
                order.id = self.next_id()
                self._last_id = order.id
            elif order.id not in self._store:
                # Deleted since it was read; an update must not bring it back.
                raise EntityNotFoundError(f"Order #{order.id} not found")
            self._store[order.id] = copy.deepcopy(order)

    def delete(self, order_id: int) -> Order | None:
        with self._lock:
            return self._store.pop(order_id, None)
