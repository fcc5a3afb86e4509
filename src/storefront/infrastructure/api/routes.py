"""FastAPI routes — the public storefront and the admin surface.

Route functions are plain ``def``: FastAPI runs them in its thread pool,
and the repositories serialize their own writes.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse, Response

from storefront.application.add_product import AddProductHandler
from storefront.application.auth import AuthProvider
from storefront.application.create_order import CreateOrderHandler
from storefront.application.delete_order import DeleteOrderHandler
from storefront.application.delete_product import DeleteProductHandler
from storefront.application.export_orders import ExportOrdersHandler
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.public_orders import ListPublicOrdersHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.application.update_order_status import UpdateOrderStatusHandler
from storefront.application.update_stock import UpdateStockHandler
from storefront.domain.exceptions import AuthenticationError, ValidationError
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.api.dependencies import (
    get_auth_provider,
    get_order_repository,
    get_product_repository,
)
from storefront.infrastructure.api.schemas import (
    AddProductRequest,
    AddProductResponse,
    CreateOrderRequest,
    CreateOrderResponse,
    DeleteOrderRequest,
    DeleteProductRequest,
    MessageResponse,
    OrderSchema,
    ProductSchema,
    PublicOrderSchema,
    UpdateOrderStatusRequest,
    UpdateStockRequest,
)

# ---------------------------------------------------------------------------
# Storefront Router
# ---------------------------------------------------------------------------
store_router = APIRouter(prefix="/api", tags=["storefront"])


@store_router.get("/products", response_model=list[ProductSchema])
def list_products(
    product_repo: ProductRepository = Depends(get_product_repository),
) -> list[ProductSchema]:
    products = ListProductsHandler(product_repo).handle()
    return [ProductSchema.model_validate(p) for p in products]


@store_router.post("/orders", response_model=CreateOrderResponse)
def create_order(
    body: CreateOrderRequest,
    order_repo: OrderRepository = Depends(get_order_repository),
) -> CreateOrderResponse:
    order = CreateOrderHandler(order_repo).handle(items=body.items, customer=body.customer)
    return CreateOrderResponse(
        message="Order created (test environment, no payment has been taken)",
        order_id=order.id,
    )


@store_router.get("/orders/{order_id}", response_model=OrderSchema)
def show_order(
    order_id: str,
    order_repo: OrderRepository = Depends(get_order_repository),
) -> OrderSchema:
    return OrderSchema.model_validate(ShowOrderHandler(order_repo).handle(order_id))


@store_router.get("/public-orders", response_model=list[PublicOrderSchema])
def list_public_orders(
    order_repo: OrderRepository = Depends(get_order_repository),
) -> list[PublicOrderSchema]:
    orders = ListPublicOrdersHandler(order_repo).handle()
    return [PublicOrderSchema.model_validate(o) for o in orders]


# ---------------------------------------------------------------------------
# Admin Router
# ---------------------------------------------------------------------------
admin_router = APIRouter(prefix="/api/admin", tags=["admin"])


@admin_router.get("/orders", response_model=list[OrderSchema])
def list_orders(
    password: str | None = None,
    auth: AuthProvider = Depends(get_auth_provider),
    order_repo: OrderRepository = Depends(get_order_repository),
) -> list[OrderSchema]:
    auth.verify(password)
    orders = ListOrdersHandler(order_repo).handle()
    return [OrderSchema.model_validate(o) for o in orders]


@admin_router.post("/add-product", response_model=AddProductResponse)
def add_product(
    body: AddProductRequest,
    auth: AuthProvider = Depends(get_auth_provider),
    product_repo: ProductRepository = Depends(get_product_repository),
) -> AddProductResponse:
    auth.verify(body.password)
    product = AddProductHandler(product_repo).handle(
        name=body.name,
        price=body.price,
        stock=body.stock,
        image=body.image,
        description=body.description,
    )
    return AddProductResponse(
        message="Product added",
        product=ProductSchema.model_validate(product),
    )


@admin_router.post("/update-stock", response_model=MessageResponse)
def update_stock(
    body: UpdateStockRequest,
    auth: AuthProvider = Depends(get_auth_provider),
    product_repo: ProductRepository = Depends(get_product_repository),
) -> MessageResponse:
    auth.verify(body.password)
    product = UpdateStockHandler(product_repo).handle(body.product_id, body.stock)
    return MessageResponse(message=f"Stock of '{product.name}' set to {product.stock}")


@admin_router.post("/delete-product", response_model=MessageResponse)
def delete_product(
    body: DeleteProductRequest,
    auth: AuthProvider = Depends(get_auth_provider),
    product_repo: ProductRepository = Depends(get_product_repository),
) -> MessageResponse:
    auth.verify(body.password)
    if body.product_id is None or body.product_id == "":
        raise ValidationError("Product ID is required")
    product = DeleteProductHandler(product_repo).handle(body.product_id)
    return MessageResponse(message=f"Deleted product '{product.name}' (ID {product.id})")


@admin_router.post("/update-order-status", response_model=MessageResponse)
def update_order_status(
    body: UpdateOrderStatusRequest,
    auth: AuthProvider = Depends(get_auth_provider),
    order_repo: OrderRepository = Depends(get_order_repository),
) -> MessageResponse:
    auth.verify(body.password)
    order = UpdateOrderStatusHandler(order_repo).handle(body.order_id, body.status)
    return MessageResponse(message=f"Order {order.id} status set to '{order.status}'")


@admin_router.post("/delete-order", response_model=MessageResponse)
def delete_order(
    body: DeleteOrderRequest,
    auth: AuthProvider = Depends(get_auth_provider),
    order_repo: OrderRepository = Depends(get_order_repository),
) -> MessageResponse:
    auth.verify(body.password)
    order = DeleteOrderHandler(order_repo).handle(body.order_id)
    return MessageResponse(message=f"Deleted order {order.id} ({order.customer.name})")


@admin_router.get("/export-orders")
def export_orders(
    password: str | None = None,
    auth: AuthProvider = Depends(get_auth_provider),
    order_repo: OrderRepository = Depends(get_order_repository),
) -> Response:
    try:
        auth.verify(password)
    except AuthenticationError as exc:
        return PlainTextResponse(str(exc), status_code=403)

    return Response(
        content=ExportOrdersHandler(order_repo).handle(),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": 'attachment; filename="orders.csv"'},
    )
