"""Notification events raised by the order ledger.

Each event knows its wire name and how to render itself as a plain dict
so any channel adapter (in-process hub, JSON outbox, websocket bridge)
can forward it unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from localmart.domain.model.order import OrderStatus
from localmart.domain.model.value_objects import Money

STATUS_MESSAGES = {
    OrderStatus.PENDING: "Order #{order_id} has been received",
    OrderStatus.PACKAGING: "Order #{order_id} is being packaged",
    OrderStatus.IN_TRANSIT: "Order #{order_id} is on its way",
    OrderStatus.DELIVERED: "Order #{order_id} has been delivered",
    OrderStatus.CANCELLED: "Order #{order_id} has been cancelled",
}


@dataclass(frozen=True)
class NotificationEvent:
    name: ClassVar[str] = "notification"

    def to_payload(self) -> dict[str, Any]:
        raise NotImplementedError


@dataclass(frozen=True)
class NewOrder(NotificationEvent):
    """Sent to each vendor with line items in a freshly placed order."""

    name: ClassVar[str] = "newOrder"

    order_id: int
    vendor_id: str
    customer_name: str
    amount: Money  # the vendor's own subtotal, never the order total

    def to_payload(self) -> dict[str, Any]:
        return {
            "orderId": self.order_id,
            "vendorId": self.vendor_id,
            "customerName": self.customer_name,
            "amount": f"{self.amount.amount:.2f}",
            "currency": self.amount.currency,
        }


@dataclass(frozen=True)
class OrderStatusUpdated(NotificationEvent):
    """Sent to the customer whenever a vendor moves their order along."""

    name: ClassVar[str] = "orderStatusUpdated"

    order_id: int
    status: OrderStatus
    customer_name: str

    @property
    def message(self) -> str:
        return STATUS_MESSAGES[self.status].format(order_id=self.order_id)

    def to_payload(self) -> dict[str, Any]:
        return {
            "orderId": self.order_id,
            "status": self.status.value,
            "customerName": self.customer_name,
            "message": self.message,
        }
