"""Application service: List Products use case (query)."""

from __future__ import annotations

from storefront.application.dto import ProductDTO, product_to_dto
from storefront.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[ProductDTO]:
        return [product_to_dto(p) for p in self._product_repo.list_all()]
