"""Order aggregate, the core of the ledger.

The Order is an aggregate root that owns its line items and its status
history. All status rules are enforced here; stock and notifications are
coordinated by the application handlers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from localmart.domain.exceptions import (
    EmptyOrderError,
    InvalidStatusError,
    InvalidTransitionError,
    ValidationError,
)
from localmart.domain.model.value_objects import DeliveryAddress, Money, Quantity


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OrderStatus(Enum):
    PENDING = "pending"
    PACKAGING = "packaging"
    IN_TRANSIT = "in transit"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (OrderStatus.DELIVERED, OrderStatus.CANCELLED)

    @staticmethod
    def parse(value: str) -> OrderStatus:
        """Resolve a raw status string, e.g. ``"in transit"``."""
        try:
            return OrderStatus(value.strip().lower())
        except (AttributeError, ValueError):
            allowed = ", ".join(s.value for s in OrderStatus)
            raise InvalidStatusError(
                f"Invalid status {value!r} (expected one of: {allowed})"
            ) from None


# Forward-only fulfilment pipeline; CANCELLED sits outside it.
FULFILMENT_SEQUENCE = (
    OrderStatus.PENDING,
    OrderStatus.PACKAGING,
    OrderStatus.IN_TRANSIT,
    OrderStatus.DELIVERED,
)

MAX_LINE_ITEMS = 50


@dataclass(frozen=True)
class OrderLineItem:
    """Captures the product, its vendor and its price at order-creation time.

    The snapshot means later catalog edits (price, name) never change what
    the customer was charged or which vendor fulfils the line.
    """

    product_id: str
    product_name: str
    vendor_id: str
    vendor_name: str
    quantity: Quantity
    unit_price: Money  # locked at order-creation time

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass(frozen=True)
class StatusChange:
    status: OrderStatus
    timestamp: datetime


@dataclass
class Order:
    """Aggregate root for marketplace orders.

    Use the ``Order.create()`` factory for new orders; it enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: int | None
    customer_id: str
    customer_name: str
    items: list[OrderLineItem]
    delivery_address: DeliveryAddress
    status: OrderStatus = OrderStatus.PENDING
    status_history: list[StatusChange] = field(default_factory=list)
    created_at: datetime = field(default_factory=_utcnow)
    delivered_at: datetime | None = None

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        customer_id: str,
        customer_name: str,
        items: list[OrderLineItem],
        delivery_address: DeliveryAddress,
    ) -> Order:
        """Create a new pending order with its first history entry."""
        if not customer_id:
            raise ValidationError("Customer is required")

        if not items:
            raise EmptyOrderError("Order must have at least one item")

        if len(items) > MAX_LINE_ITEMS:
            raise ValidationError(f"Maximum {MAX_LINE_ITEMS} items per order")

        created_at = _utcnow()
        return Order(
            id=None,
            customer_id=customer_id,
            customer_name=customer_name,
            items=list(items),
            delivery_address=delivery_address,
            status=OrderStatus.PENDING,
            status_history=[StatusChange(OrderStatus.PENDING, created_at)],
            created_at=created_at,
        )

    # --- State transitions ----------------------------------------------------

    def can_transition_to(self, target: OrderStatus) -> bool:
        """Monotonic rule: any later fulfilment step, or cancellation.

        Terminal orders accept nothing. Skipping steps (e.g. straight from
        ``pending`` to ``delivered``) is allowed; staying put or moving back
        is not.
        """
        if self.status.is_terminal:
            return False
        if target == OrderStatus.CANCELLED:
            return True
        return FULFILMENT_SEQUENCE.index(target) > FULFILMENT_SEQUENCE.index(self.status)

    def transition_to(self, target: OrderStatus, at: datetime | None = None) -> None:
        if not self.can_transition_to(target):
            raise InvalidTransitionError(
                f"Cannot move order #{self.id} from '{self.status.value}' "
                f"to '{target.value}'"
            )
        timestamp = at or _utcnow()
        self.status = target
        self.status_history.append(StatusChange(target, timestamp))
        if target == OrderStatus.DELIVERED:
            self.delivered_at = timestamp

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        return _sum_lines(self.items)

    @property
    def vendor_ids(self) -> list[str]:
        """Distinct vendors in this order, in first-appearance order."""
        seen: dict[str, None] = {}
        for item in self.items:
            seen.setdefault(item.vendor_id, None)
        return list(seen)

    def has_items_from(self, vendor_id: str) -> bool:
        return any(item.vendor_id == vendor_id for item in self.items)

    def items_for_vendor(self, vendor_id: str) -> list[OrderLineItem]:
        return [item for item in self.items if item.vendor_id == vendor_id]

    def subtotal_for_vendor(self, vendor_id: str) -> Money:
        return _sum_lines(self.items_for_vendor(vendor_id))


def _sum_lines(items: list[OrderLineItem]) -> Money:
    if not items:
        return Money.zero()
    result = Money.zero(items[0].unit_price.currency)
    for item in items:
        result = result + item.line_total
    return result
