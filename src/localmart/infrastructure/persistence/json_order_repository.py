"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from localmart.domain.model.order import Order, OrderLineItem, OrderStatus, StatusChange
from localmart.domain.model.value_objects import (
    DEFAULT_CURRENCY,
    DeliveryAddress,
    Money,
    Quantity,
)
from localmart.domain.repository.order_repository import OrderRepository
from localmart.infrastructure.persistence.json_store import JsonDocumentFile


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonDocumentFile(file_path, empty=[])

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._file.read():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_by_customer(self, customer_id: str) -> list[Order]:
        return _newest_first(
            self._to_domain(raw)
            for raw in self._file.read()
            if raw["customer_id"] == customer_id
        )

    def list_containing_products(self, product_ids: set[str]) -> list[Order]:
        return _newest_first(
            self._to_domain(raw)
            for raw in self._file.read()
            if any(item["product_id"] in product_ids for item in raw["items"])
        )

    def save(self, order: Order) -> None:
        with self._file.locked():
            orders = self._file.read()

            if order.id is None:
                order.id = max((o["id"] for o in orders), default=0) + 1

            # Upsert: replace if exists, otherwise append
            for i, raw in enumerate(orders):
                if raw["id"] == order.id:
                    orders[i] = self._to_raw(order)
                    break
            else:
                orders.append(self._to_raw(order))

            self._file.write(orders)

    def save_if_status(self, order: Order, expected: OrderStatus) -> bool:
        with self._file.locked():
            orders = self._file.read()
            for i, raw in enumerate(orders):
                if raw["id"] == order.id:
                    if raw["status"] != expected.value:
                        return False
                    orders[i] = self._to_raw(order)
                    self._file.write(orders)
                    return True
            return False

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "customer_id": order.customer_id,
            "customer_name": order.customer_name,
            "status": order.status.value,
            "created_at": order.created_at.isoformat(),
            "delivered_at": order.delivered_at.isoformat() if order.delivered_at else None,
            "delivery_address": {
                "street": order.delivery_address.street,
                "city": order.delivery_address.city,
                "phone": order.delivery_address.phone,
            },
            "status_history": [
                {"status": change.status.value, "timestamp": change.timestamp.isoformat()}
                for change in order.status_history
            ],
            "items": [
                {
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "vendor_id": item.vendor_id,
                    "vendor_name": item.vendor_name,
                    "quantity": item.quantity.value,
                    "unit_price": str(item.unit_price.amount),
                    "currency": item.unit_price.currency,
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = [
            OrderLineItem(
                product_id=i["product_id"],
                product_name=i["product_name"],
                vendor_id=i["vendor_id"],
                vendor_name=i.get("vendor_name", i["vendor_id"]),
                quantity=Quantity(i["quantity"]),
                unit_price=Money(Decimal(i["unit_price"]), i.get("currency", DEFAULT_CURRENCY)),
            )
            for i in raw["items"]
        ]
        address = raw["delivery_address"]
        return Order(
            id=raw["id"],
            customer_id=raw["customer_id"],
            customer_name=raw["customer_name"],
            items=items,
            delivery_address=DeliveryAddress(
                street=address["street"], city=address["city"], phone=address["phone"]
            ),
            status=OrderStatus(raw["status"]),
            status_history=[
                StatusChange(OrderStatus(h["status"]), datetime.fromisoformat(h["timestamp"]))
                for h in raw.get("status_history", [])
            ],
            created_at=datetime.fromisoformat(raw["created_at"]),
            delivered_at=(
                datetime.fromisoformat(raw["delivered_at"]) if raw.get("delivered_at") else None
            ),
        )


def _newest_first(orders) -> list[Order]:
    return sorted(orders, key=lambda o: (o.created_at, o.id), reverse=True)
