"""Application service: Update Order Status use case."""

from __future__ import annotations

import structlog

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.identifiers import parse_id
from storefront.domain.model.order import OrderStatus
from storefront.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class UpdateOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: object, status: object) -> OrderDTO:
        # Status is validated before the lookup: an unknown status is a 400
        # even for an unknown order.
        new_status = OrderStatus.parse(status)

        parsed_id = parse_id(order_id)
        order = self._order_repo.get_by_id(parsed_id) if parsed_id is not None else None
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        order.update_status(new_status)
        # Raises EntityNotFoundError if the order was deleted since the read.
        self._order_repo.save(order)

        logger.info("Order status updated", order_id=order.id, status=new_status.value)
        return order_to_dto(order)
