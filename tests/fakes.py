"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

from storefront.domain.exceptions import EntityNotFoundError, StorageError
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[int, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def get_by_id(self, product_id: int) -> Product | None:
        return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        if product.id is None:
            product.id = max(self._store, default=0) + 1
        elif product.id not in self._store:
            raise EntityNotFoundError(f"Product with ID {product.id} not found")
        self._store[product.id] = product

    def delete(self, product_id: int) -> Product | None:
        return self._store.pop(product_id, None)


class BrokenProductRepository(ProductRepository):
    """Behaves like a catalog whose backing file cannot be read."""

    def _fail(self, *args, **kwargs):
        raise StorageError("Cannot read product catalog")

    get_by_id = _fail
    list_all = _fail
    save = _fail
    delete = _fail
