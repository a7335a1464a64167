"""Domain service: Stock Allocation.

Coordinates the cross-aggregate operation of taking stock from several
products for one order, and giving it back.  Each product is adjusted
through the repository's atomic conditional decrement, so two orders
racing for the last unit cannot both win.

Allocation is all-or-nothing: if any product comes up short, every
decrement already applied for the same order is compensated before the
error is raised.
"""

from __future__ import annotations

import structlog

from localmart.domain.exceptions import InsufficientStockError
from localmart.domain.model.order import OrderLineItem
from localmart.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class StockAllocationService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def allocate(self, items: list[OrderLineItem]) -> None:
        """Decrement stock for every line, or for none of them."""
        applied: list[OrderLineItem] = []

        for line in items:
            qty = line.quantity.value
            if not self._product_repo.decrement_stock_if_available(line.product_id, qty):
                logger.warning(
                    "Stock claim lost, compensating",
                    product_id=line.product_id,
                    quantity=qty,
                    compensated_lines=len(applied),
                )
                self.release(applied)
                raise InsufficientStockError(
                    f"Insufficient stock for {line.product_name}"
                )
            applied.append(line)

    def release(self, items: list[OrderLineItem]) -> None:
        """Return stock for every line (rollback or cancellation)."""
        for line in items:
            self._product_repo.increment_stock(line.product_id, line.quantity.value)
