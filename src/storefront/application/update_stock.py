"""Application service: Update Stock use case."""

from __future__ import annotations

import structlog

from storefront.application.dto import ProductDTO, product_to_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.identifiers import parse_id
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class UpdateStockHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: object, stock: object) -> ProductDTO:
        """Overwrite a product's stock level.

        Orders never decrement stock; this is the only way it changes.
        """
        parsed_id = parse_id(product_id)
        product = self._product_repo.get_by_id(parsed_id) if parsed_id is not None else None
        if product is None:
            raise EntityNotFoundError(f"Product with ID {product_id} not found")

        product.update_stock(stock)
        # Raises EntityNotFoundError if the product was deleted since the read.
        self._product_repo.save(product)

        logger.info("Stock updated", product_id=product.id, stock=product.stock)
        return product_to_dto(product)
