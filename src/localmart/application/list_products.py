"""Application service: List Products use case (query)."""

from __future__ import annotations

from localmart.application.dto import ProductDTO, product_to_dto
from localmart.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self, category: str | None = None, vendor_id: str | None = None
    ) -> list[ProductDTO]:
        """Active products, optionally narrowed by category and/or vendor."""
        products = [p for p in self._product_repo.list_all() if p.is_active]
        if category:
            products = [p for p in products if p.category.lower() == category.lower()]
        if vendor_id:
            products = [p for p in products if p.vendor_id == vendor_id]
        return [product_to_dto(p) for p in products]
