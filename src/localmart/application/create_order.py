"""Application service: Create Order use case.

Orchestrates the catalog lookup, the Order aggregate, stock allocation
and vendor notifications.  Validation happens before any mutation; the
stock decrement and the order write succeed or fail together.
"""

from __future__ import annotations

from collections import Counter
from decimal import Decimal, InvalidOperation

import structlog

from localmart.application.dto import AddressSpec, OrderDTO, OrderItemSpec, order_to_dto
from localmart.application.notifications import publish_quietly
from localmart.domain.exceptions import (
    EmptyOrderError,
    InsufficientStockError,
    ProductNotFoundError,
    TotalMismatchError,
)
from localmart.domain.model.events import NewOrder
from localmart.domain.model.order import Order, OrderLineItem
from localmart.domain.model.product import Product
from localmart.domain.model.user import Caller
from localmart.domain.model.value_objects import DeliveryAddress, Quantity
from localmart.domain.repository.order_repository import OrderRepository
from localmart.domain.repository.product_repository import ProductRepository
from localmart.domain.repository.user_repository import UserRepository
from localmart.domain.service.notification_publisher import NotificationPublisher
from localmart.domain.service.stock_allocation_service import StockAllocationService

logger = structlog.get_logger(__name__)

# Largest gap allowed between a client-computed total and ours.
TOTAL_TOLERANCE = Decimal("0.01")


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        user_repo: UserRepository,
        publisher: NotificationPublisher,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._user_repo = user_repo
        self._publisher = publisher

    def handle(
        self,
        caller: Caller,
        item_specs: list[OrderItemSpec],
        delivery_address: AddressSpec,
        expected_total: str | Decimal | None = None,
    ) -> OrderDTO:
        """Place an order for *caller*.

        Steps:
        1. Reject an empty cart, a bad address or bad quantities.
        2. Resolve each product and check current stock (no mutation yet).
        3. Build line items with *current* prices and vendors (snapshot).
        4. Compare against the caller's total, if one was supplied.
        5. Claim stock atomically, then persist; undo the claim on failure.
        6. Tell each vendor about their share of the order.
        """
        if not item_specs:
            raise EmptyOrderError("Order must have at least one item")

        address = DeliveryAddress(
            street=delivery_address.street,
            city=delivery_address.city,
            phone=delivery_address.phone,
        )
        quantities = [Quantity(spec.quantity) for spec in item_specs]

        products = self._resolve_products(item_specs)
        requested: Counter[str] = Counter()
        for spec, qty in zip(item_specs, quantities):
            requested[spec.product_id] += qty.value
        for product_id, qty in requested.items():
            product = products[product_id]
            if not product.can_supply(qty):
                raise InsufficientStockError(
                    f"Insufficient stock for {product.name} "
                    f"(need {qty}, have {product.stock})"
                )

        line_items = [
            OrderLineItem(
                product_id=spec.product_id,
                product_name=products[spec.product_id].name,
                vendor_id=products[spec.product_id].vendor_id,
                vendor_name=self._vendor_name(products[spec.product_id].vendor_id),
                quantity=qty,
                unit_price=products[spec.product_id].price,  # <-- price snapshot
            )
            for spec, qty in zip(item_specs, quantities)
        ]

        order = Order.create(
            customer_id=caller.user_id,
            customer_name=caller.name,
            items=line_items,
            delivery_address=address,
        )

        if expected_total is not None:
            _check_supplied_total(order, expected_total)

        allocation = StockAllocationService(self._product_repo)
        allocation.allocate(order.items)
        try:
            self._order_repo.save(order)
        except Exception:
            logger.error("Order write failed, returning stock", customer_id=caller.user_id)
            allocation.release(order.items)
            raise

        logger.info(
            "Order created",
            order_id=order.id,
            customer_id=caller.user_id,
            lines=len(order.items),
            total=str(order.total),
        )

        for vendor_id in order.vendor_ids:
            publish_quietly(
                self._publisher,
                vendor_id,
                NewOrder(
                    order_id=order.id,  # type: ignore[arg-type]
                    vendor_id=vendor_id,
                    customer_name=caller.name,
                    amount=order.subtotal_for_vendor(vendor_id),
                ),
            )

        return order_to_dto(order)

    # --- Internal helpers -----------------------------------------------------

    def _resolve_products(self, item_specs: list[OrderItemSpec]) -> dict[str, Product]:
        products: dict[str, Product] = {}
        for spec in item_specs:
            if spec.product_id in products:
                continue
            product = self._product_repo.get_by_id(spec.product_id)
            if product is None or not product.is_active:
                raise ProductNotFoundError(f"Product {spec.product_id} not found")
            products[spec.product_id] = product
        return products

    def _vendor_name(self, vendor_id: str) -> str:
        vendor = self._user_repo.get_by_id(vendor_id)
        return vendor.name if vendor is not None else vendor_id


def _check_supplied_total(order: Order, expected_total: str | Decimal) -> None:
    """Any supplied total that is not a number within tolerance is a mismatch."""
    try:
        supplied = Decimal(str(expected_total).strip())
    except InvalidOperation:
        supplied = None
    if (
        supplied is None
        or not supplied.is_finite()
        or abs(order.total.amount - supplied) > TOTAL_TOLERANCE
    ):
        raise TotalMismatchError(
            f"Total amount mismatch (expected {order.total}, got {expected_total})"
        )
