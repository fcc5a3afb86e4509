"""Application service: the public order board.

Customers can see that orders are coming in without seeing who placed
them: every character of the name after the first is replaced by ``*``.
"""

from __future__ import annotations

from storefront.application.dto import PublicOrderDTO
from storefront.domain.repository.order_repository import OrderRepository


def mask_name(name: str | None) -> str:
    """Keep the first character of *name* and star out the rest.

    A one-character name still gets a single ``*`` so that it never shows
    up unmasked.

    >>> mask_name("Alice")
    'A****'
    >>> mask_name("A")
    'A*'
    """
    if not name:
        return ""
    if len(name) == 1:
        return name + "*"
    return name[0] + "*" * (len(name) - 1)


class ListPublicOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self) -> list[PublicOrderDTO]:
        return [
            PublicOrderDTO(
                id=order.id,  # type: ignore[arg-type]
                name=mask_name(order.customer.name),
                created_at=order.created_at.isoformat(),
                status=order.status.value,
                items=[item.label for item in order.items],
            )
            for order in self._order_repo.list_all()
        ]
