"""Abstract repository for Product aggregate (the catalog store).

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from localmart.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def list_by_vendor(self, vendor_id: str) -> list[Product]:
        """Return every product owned by the vendor, active or not."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""

    @abstractmethod
    def decrement_stock_if_available(self, product_id: str, quantity: int) -> bool:
        """Atomically remove *quantity* units if at least that many remain.

        Returns False, leaving stock untouched, when the product is missing
        or short. Implementations must make the check and the decrement a
        single step with respect to concurrent callers: a separate read then
        write would let two orders both claim the last unit.
        """

    @abstractmethod
    def increment_stock(self, product_id: str, quantity: int) -> None:
        """Atomically add *quantity* units back to the product's stock."""
