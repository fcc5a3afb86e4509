"""Abstract repository for the Order aggregate (the order ledger)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order


class OrderRepository(ABC):
    """Ledger of orders keyed by integer id.

    Implementations must never hand out an id twice, including ids of
    orders that have since been deleted.
    """

    @abstractmethod
    def next_id(self) -> int:
        """Return the id the next new order will receive."""

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order sorted by id ascending."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order, assigning an id to new ones.

        Raises EntityNotFoundError when updating an order that is no
        longer in the ledger.
        """

    @abstractmethod
    def delete(self, order_id: int) -> Order | None:
        """Remove an order and return it, or None if not found."""
