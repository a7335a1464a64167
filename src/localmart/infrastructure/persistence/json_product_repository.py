"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from localmart.domain.model.product import Product
from localmart.domain.model.value_objects import DEFAULT_CURRENCY, Money
from localmart.domain.repository.product_repository import ProductRepository
from localmart.infrastructure.persistence.json_store import JsonDocumentFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonDocumentFile(file_path, empty=[])

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def list_by_vendor(self, vendor_id: str) -> list[Product]:
        return [p for p in self._load().values() if p.vendor_id == vendor_id]

    def save(self, product: Product) -> None:
        with self._file.locked():
            products = self._load()
            products[product.id] = product
            self._persist(products)

    def decrement_stock_if_available(self, product_id: str, quantity: int) -> bool:
        with self._file.locked():
            products = self._load()
            product = products.get(product_id)
            if product is None or not product.can_supply(quantity):
                return False
            product.take_stock(quantity)
            self._persist(products)
            return True

    def increment_stock(self, product_id: str, quantity: int) -> None:
        with self._file.locked():
            products = self._load()
            product = products.get(product_id)
            if product is None:
                # Deleted from the catalog since the order; nothing to return to.
                return
            product.restock(quantity)
            self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        return {
            item["id"]: Product(
                id=item["id"],
                name=item["name"],
                price=Money(Decimal(item["price"]), item.get("currency", DEFAULT_CURRENCY)),
                stock=item["stock"],
                vendor_id=item["vendor_id"],
                category=item.get("category", ""),
                description=item.get("description", ""),
                is_active=item.get("is_active", True),
            )
            for item in self._file.read()
        }

    def _persist(self, products: dict[str, Product]) -> None:
        self._file.write(
            [
                {
                    "id": p.id,
                    "name": p.name,
                    "description": p.description,
                    "category": p.category,
                    "price": str(p.price.amount),
                    "currency": p.price.currency,
                    "stock": p.stock,
                    "vendor_id": p.vendor_id,
                    "is_active": p.is_active,
                }
                for p in products.values()
            ]
        )
