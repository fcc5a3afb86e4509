"""JSON-file-backed implementation of OrderRepository.

File layout::

    {"last_id": 3, "orders": {"1": {...}, "3": {...}}}

``last_id`` is the highest id ever handed out. It survives the deletion
of the orders it counted, which is what keeps ids from being reused.
"""

from __future__ import annotations

import json
import threading
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.exceptions import EntityNotFoundError, StorageError, ValidationError
from storefront.domain.model.order import Customer, Order, OrderLineItem, OrderStatus
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.order_repository import OrderRepository


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = threading.RLock()
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> int:
        with self._lock:
            return self._next_id(self._load_raw())

    def get_by_id(self, order_id: int) -> Order | None:
        with self._lock:
            raw = self._load_raw()["orders"].get(str(order_id))
        return self._to_domain(raw) if raw is not None else None

    def list_all(self) -> list[Order]:
        with self._lock:
            records = self._load_raw()["orders"]
        orders = [self._to_domain(raw) for raw in records.values()]
        return sorted(orders, key=lambda o: o.id)

    def save(self, order: Order) -> None:
        with self._lock:
            document = self._load_raw()

            if order.id is None:
                order.id = self.next_id()
            elif str(order.id) not in document["orders"]:
                raise EntityNotFoundError(f"Order #{order.id} not found")

            document["orders"][str(order.id)] = self._to_raw(order)
            document["last_id"] = max(document["last_id"], order.id)
            self._persist_raw(document)

    def delete(self, order_id: int) -> Order | None:
        with self._lock:
            document = self._load_raw()
            raw = document["orders"].pop(str(order_id), None)
            if raw is None:
                return None
            self._persist_raw(document)
            return self._to_domain(raw)

    # --- Id assignment --------------------------------------------------------

    @staticmethod
    def _next_id(document: dict) -> int:
        highest = max((int(k) for k in document["orders"]), default=0)
        return max(highest, document["last_id"]) + 1

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "customer": {
                "name": order.customer.name,
                "phone": order.customer.phone,
                "address": order.customer.address,
                "note": order.customer.note,
            },
            "items": [
                {
                    "name": item.name,
                    "price": item.price.as_number(),
                    "quantity": item.quantity.value,
                }
                for item in order.items
            ],
            "status": order.status.value,
            "createdAt": order.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        try:
            customer = raw["customer"]
            return Order(
                id=raw["id"],
                customer=Customer(
                    name=customer["name"],
                    phone=customer.get("phone", ""),
                    address=customer.get("address", ""),
                    note=customer.get("note", ""),
                ),
                items=[
                    OrderLineItem(
                        name=i["name"],
                        price=Money(Decimal(str(i["price"]))),
                        quantity=Quantity(i["quantity"]),
                    )
                    for i in raw["items"]
                ],
                status=OrderStatus(raw["status"]),
                created_at=datetime.fromisoformat(raw["createdAt"]),
            )
        except (KeyError, TypeError, ValueError, ArithmeticError, ValidationError) as exc:
            raise StorageError(f"Malformed order record: {raw!r}") from exc

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict:
        try:
            document = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise StorageError(f"Cannot read order ledger {self._file_path}") from exc
        if (
            not isinstance(document, dict)
            or not isinstance(document.get("orders"), dict)
            or not isinstance(document.get("last_id"), int)
        ):
            raise StorageError(f"Order ledger {self._file_path} is malformed")
        return document

    def _persist_raw(self, document: dict) -> None:
        try:
            self._file_path.write_text(
                json.dumps(document, indent=2, ensure_ascii=False) + "\n",
                encoding="utf-8",
            )
        except OSError as exc:
            raise StorageError(f"Cannot write order ledger {self._file_path}") from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._persist_raw({"last_id": 0, "orders": {}})
