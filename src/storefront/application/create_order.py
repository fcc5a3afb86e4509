"""Application service: Create Order use case.

Turns the raw submission (as decoded from JSON) into domain objects,
lets the Order aggregate validate it and persists it. The ledger assigns
the id on save.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import Customer, Order, OrderLineItem
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class CreateOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, items: object, customer: object) -> OrderDTO:
        """Create a new order.

        Steps:
        1. Reject a missing, non-list or empty ``items``.
        2. Reject a customer without a name.
        3. Snapshot each submitted line item.
        4. Persist and return a DTO carrying the assigned id.
        """
        if not isinstance(items, list) or not items:
            raise ValidationError("Order must contain at least one item")

        parsed_customer = self._parse_customer(customer)
        line_items = [self._parse_item(raw) for raw in items]

        order = Order.create(customer=parsed_customer, items=line_items)
        self._order_repo.save(order)

        logger.info(
            "Order created",
            order_id=order.id,
            item_count=len(order.items),
        )
        return order_to_dto(order)

    # --- Parsing --------------------------------------------------------------

    @staticmethod
    def _parse_customer(raw: object) -> Customer:
        if not isinstance(raw, dict):
            raise ValidationError("Customer name is required")
        name = raw.get("name")
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Customer name is required")

        def _optional(key: str) -> str:
            value = raw.get(key)
            return "" if value is None else str(value)

        return Customer(
            name=name.strip(),
            phone=_optional("phone"),
            address=_optional("address"),
            note=_optional("note"),
        )

    @staticmethod
    def _parse_item(raw: object) -> OrderLineItem:
        if not isinstance(raw, dict):
            raise ValidationError(f"Invalid order item: {raw!r}")

        name = raw.get("name")
        if not isinstance(name, str):
            raise ValidationError("Item name is required")
        if raw.get("price") is None:
            raise ValidationError(f"Item price is required for '{name}'")
        if raw.get("quantity") is None:
            raise ValidationError(f"Item quantity is required for '{name}'")

        return OrderLineItem(
            name=name,
            price=Money.of(raw["price"]),
            quantity=Quantity(raw["quantity"]),
        )
