"""FastAPI dependencies handing the app's stores to the routes.

The stores are created once by ``create_app`` and kept on ``app.state``.
"""

from fastapi import Request

from storefront.application.auth import AuthProvider
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository


def get_order_repository(request: Request) -> OrderRepository:
    return request.app.state.order_repo


def get_product_repository(request: Request) -> ProductRepository:
    return request.app.state.product_repo


def get_auth_provider(request: Request) -> AuthProvider:
    return request.app.state.auth_provider
