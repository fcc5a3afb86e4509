"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data from the application layer to the HTTP and CLI layers
without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.order import Order
from storefront.domain.model.product import Product


@dataclass(frozen=True)
class CustomerDTO:
    name: str
    phone: str
    address: str
    note: str


@dataclass(frozen=True)
class OrderLineItemDTO:
    name: str
    price: int | float
    quantity: int


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as the admin sees it."""

    id: int
    customer: CustomerDTO
    items: list[OrderLineItemDTO]
    status: str
    created_at: str  # ISO-8601, UTC


@dataclass(frozen=True)
class PublicOrderDTO:
    """Output: an order as shown on the public board, name masked."""

    id: int
    name: str
    created_at: str
    status: str
    items: list[str]  # "name×quantity"


@dataclass(frozen=True)
class ProductDTO:
    id: int
    name: str
    price: int | float
    stock: int
    image: str
    description: str


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        customer=CustomerDTO(
            name=order.customer.name,
            phone=order.customer.phone,
            address=order.customer.address,
            note=order.customer.note,
        ),
        items=[
            OrderLineItemDTO(
                name=item.name,
                price=item.price.as_number(),
                quantity=item.quantity.value,
            )
            for item in order.items
        ],
        status=order.status.value,
        created_at=order.created_at.isoformat(),
    )


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,  # type: ignore[arg-type]
        name=product.name,
        price=product.price.as_number(),
        stock=product.stock,
        image=product.image,
        description=product.description,
    )
