"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from localmart.domain.model.order import Order, OrderLineItem
from localmart.domain.model.product import Product

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M UTC"


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: what the customer asked for (product ID + quantity)."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class AddressSpec:
    """Input: raw delivery address fields."""

    street: str
    city: str
    phone: str


@dataclass(frozen=True)
class OrderLineItemDTO:
    """Output: a single line item as displayed to the user."""

    product_id: str
    product_name: str
    vendor_id: str
    vendor_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "KES 150.00"
    line_total: str


@dataclass(frozen=True)
class StatusChangeDTO:
    status: str
    timestamp: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: an order as displayed to one caller.

    For a vendor, ``items`` and ``total`` cover only that vendor's lines.
    """

    id: int
    customer_id: str
    customer_name: str
    status: str
    items: list[OrderLineItemDTO]
    total: str
    delivery_address: str
    status_history: list[StatusChangeDTO]
    created_at: str
    delivered_at: str | None


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    category: str
    price: str
    stock: int
    vendor_id: str


@dataclass(frozen=True)
class VendorStatsDTO:
    total_products: int
    total_orders: int
    total_revenue: str
    pending_orders: int
    recent_orders: list[OrderDTO]
    low_stock_products: list[ProductDTO]


# --- Mapping ------------------------------------------------------------------


def order_to_dto(order: Order, vendor_id: str | None = None) -> OrderDTO:
    """Map an order, scoped to *vendor_id*'s lines when one is given."""
    if vendor_id is None:
        items = order.items
        total = order.total
    else:
        items = order.items_for_vendor(vendor_id)
        total = order.subtotal_for_vendor(vendor_id)

    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        customer_id=order.customer_id,
        customer_name=order.customer_name,
        status=order.status.value,
        items=[_line_to_dto(item) for item in items],
        total=str(total),
        delivery_address=str(order.delivery_address),
        status_history=[
            StatusChangeDTO(
                status=change.status.value,
                timestamp=change.timestamp.strftime(TIMESTAMP_FORMAT),
            )
            for change in order.status_history
        ],
        created_at=order.created_at.strftime(TIMESTAMP_FORMAT),
        delivered_at=(
            order.delivered_at.strftime(TIMESTAMP_FORMAT) if order.delivered_at else None
        ),
    )


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        category=product.category,
        price=str(product.price),
        stock=product.stock,
        vendor_id=product.vendor_id,
    )


def _line_to_dto(item: OrderLineItem) -> OrderLineItemDTO:
    return OrderLineItemDTO(
        product_id=item.product_id,
        product_name=item.product_name,
        vendor_id=item.vendor_id,
        vendor_name=item.vendor_name,
        quantity=item.quantity.value,
        unit_price=str(item.unit_price),
        line_total=str(item.line_total),
    )
