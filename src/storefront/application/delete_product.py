"""Application service: Delete Product use case."""

from __future__ import annotations

import structlog

from storefront.application.dto import ProductDTO, product_to_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.identifiers import parse_id
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: object) -> ProductDTO:
        parsed_id = parse_id(product_id)
        removed = self._product_repo.delete(parsed_id) if parsed_id is not None else None
        if removed is None:
            raise EntityNotFoundError(f"Product with ID {product_id} not found")

        logger.info("Product deleted", product_id=removed.id, name=removed.name)
        return product_to_dto(removed)
