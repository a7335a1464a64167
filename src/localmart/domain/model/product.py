"""Product aggregate.

Products live independently of orders and belong to exactly one vendor.
The ledger only ever touches a product to adjust its stock; everything
else about it is managed by the owning vendor through the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass

from localmart.domain.exceptions import InsufficientStockError, ValidationError
from localmart.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    Invariants:
    - ``stock`` is never negative
    - ``price`` is never negative (enforced by Money)
    """

    id: str
    name: str
    price: Money
    stock: int
    vendor_id: str
    category: str = ""
    description: str = ""
    is_active: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.stock, int) or self.stock < 0:
            raise ValidationError(
                f"Stock for {self.name} must be a non-negative integer, got {self.stock!r}"
            )

    def can_supply(self, quantity: int) -> bool:
        return quantity <= self.stock

    def take_stock(self, quantity: int) -> None:
        """Remove *quantity* units, refusing to go below zero."""
        if quantity <= 0:
            raise ValidationError("Stock adjustment must be positive")
        if not self.can_supply(quantity):
            raise InsufficientStockError(
                f"Insufficient stock for {self.name} "
                f"(need {quantity}, have {self.stock})"
            )
        self.stock -= quantity

    def restock(self, quantity: int) -> None:
        """Return *quantity* units to the shelf (cancellation, rollback)."""
        if quantity <= 0:
            raise ValidationError("Stock adjustment must be positive")
        self.stock += quantity
