"""Pydantic request/response schemas for the storefront API.

These are external contracts, kept separate from the application DTOs.
Field names are snake_case in Python and camelCase on the wire.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class MessageResponse(CamelModel):
    message: str


class ProductSchema(CamelModel):
    id: int
    name: str
    price: int | float
    stock: int
    image: str
    description: str


class CustomerSchema(CamelModel):
    name: str
    phone: str = ""
    address: str = ""
    note: str = ""


class OrderItemSchema(CamelModel):
    name: str
    price: int | float
    quantity: int


class OrderSchema(CamelModel):
    id: int
    customer: CustomerSchema
    items: list[OrderItemSchema]
    status: str
    created_at: str


class PublicOrderSchema(CamelModel):
    id: int
    name: str
    created_at: str
    status: str
    items: list[str]


class CreateOrderResponse(CamelModel):
    message: str
    order_id: int


class AddProductResponse(CamelModel):
    message: str
    product: ProductSchema


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
# Order and product fields are loosely typed on purpose: the application
# handlers own their validation and report it as a 400 with a readable
# message, after the admin password has been checked.
class CreateOrderRequest(CamelModel):
    items: Any = None
    customer: Any = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "items": [{"name": "Shirt", "price": 10, "quantity": 2}],
                    "customer": {"name": "Li"},
                }
            ]
        }
    )


class AdminRequest(CamelModel):
    password: Any = None


class AddProductRequest(AdminRequest):
    name: Any = None
    price: Any = None
    stock: Any = None
    image: Any = None
    description: Any = None


class UpdateStockRequest(AdminRequest):
    product_id: Any = None
    stock: Any = None


class DeleteProductRequest(AdminRequest):
    product_id: Any = None


class UpdateOrderStatusRequest(AdminRequest):
    order_id: Any = None
    status: Any = None


class DeleteOrderRequest(AdminRequest):
    order_id: Any = None
