"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from storefront.application.auth import AuthProvider, SharedSecretAuthProvider
from storefront.config import Settings
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.memory_order_repository import (
    MemoryOrderRepository,
)


def product_repository(settings: Settings) -> JsonProductRepository:
    return JsonProductRepository(settings.products_file)


def order_repository(settings: Settings) -> OrderRepository:
    if settings.order_store == "json":
        return JsonOrderRepository(settings.orders_file)
    return MemoryOrderRepository()


def auth_provider(settings: Settings) -> AuthProvider:
    return SharedSecretAuthProvider(settings.admin_password)


def persistent_order_repository(settings: Settings) -> JsonOrderRepository:
    """The on-disk ledger, whatever store the server is configured with."""
    return JsonOrderRepository(settings.orders_file)
