"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its line items. Line items are a
snapshot of what the customer submitted; they do not reference catalog
products and placing an order never touches stock.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PLACED = "placed"
    PAID = "paid"

    @classmethod
    def parse(cls, value: object) -> OrderStatus:
        """Resolve a raw status string, rejecting anything outside the enum."""
        for status in cls:
            if status.value == value:
                return status
        allowed = ", ".join(s.value for s in cls)
        raise ValidationError(f"Unsupported order status {value!r} (allowed: {allowed})")


@dataclass(frozen=True)
class Customer:
    """Who placed the order. Only the name is mandatory."""

    name: str
    phone: str = ""
    address: str = ""
    note: str = ""


@dataclass(frozen=True)
class OrderLineItem:
    """Name, price and quantity copied from the submission at creation time."""

    name: str
    price: Money
    quantity: Quantity

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Item name is required")

    @property
    def label(self) -> str:
        """Compact ``name×quantity`` form used by the public order board."""
        return f"{self.name}×{self.quantity.value}"


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders — it enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: int | None
    customer: Customer
    items: list[OrderLineItem]
    status: OrderStatus = OrderStatus.PLACED
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(customer: Customer, items: list[OrderLineItem]) -> Order:
        """Create a new order, enforcing all invariants."""
        if not items:
            raise ValidationError("Order must contain at least one item")

        if not customer.name or not customer.name.strip():
            raise ValidationError("Customer name is required")

        return Order(id=None, customer=customer, items=list(items))

    # --- State transitions ----------------------------------------------------

    def update_status(self, status: OrderStatus) -> None:
        """Set the order status.

        Any member of OrderStatus is accepted from any current status, so an
        order marked paid by mistake can be put back to placed.
        """
        self.status = status
