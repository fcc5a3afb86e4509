"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, in stored order."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product.

        A product without an id gets ``max(existing ids) + 1`` (or 1).
        Raises EntityNotFoundError when updating a product that is no
        longer in the catalog.
        """

    @abstractmethod
    def delete(self, product_id: int) -> Product | None:
        """Remove a product and return it, or None if not found."""
