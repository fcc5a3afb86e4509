"""Application service: Delete Order use case.

The deleted order's id stays burned; the ledger never hands it out again.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.identifiers import parse_id
from storefront.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class DeleteOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: object) -> OrderDTO:
        parsed_id = parse_id(order_id)
        removed = self._order_repo.delete(parsed_id) if parsed_id is not None else None
        if removed is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        logger.info("Order deleted", order_id=removed.id)
        return order_to_dto(removed)
