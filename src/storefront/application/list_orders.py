"""Application service: List Orders use case (admin query)."""

from __future__ import annotations

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self) -> list[OrderDTO]:
        return [order_to_dto(order) for order in self._order_repo.list_all()]
