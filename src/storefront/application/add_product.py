"""Application service: Add Product use case."""

from __future__ import annotations

import structlog

from storefront.application.dto import ProductDTO, product_to_dto
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product, validate_stock
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: object,
        price: object,
        stock: object = None,
        image: object = None,
        description: object = None,
    ) -> ProductDTO:
        """Add a new product to the catalog.

        Only name and price are required; stock defaults to 0 and the
        text fields to empty strings.
        """
        if not isinstance(name, str) or not name.strip() or price is None or price == "":
            raise ValidationError("Product name and price are required")

        product = Product(
            id=None,  # assigned by the repository
            name=name.strip(),
            price=Money.of(price),
            stock=0 if stock is None or stock == "" else validate_stock(stock),
            image=_text(image),
            description=_text(description),
        )
        self._product_repo.save(product)

        logger.info("Product added", product_id=product.id, name=product.name)
        return product_to_dto(product)


def _text(value: object) -> str:
    return "" if value is None else str(value)
