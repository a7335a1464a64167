"""Who may see or move an order.

Every ledger handler calls one of these checks up front instead of
relying on role-specific entry points.
"""

from __future__ import annotations

from localmart.domain.exceptions import ForbiddenError
from localmart.domain.model.order import Order
from localmart.domain.model.user import Caller


def caller_is_owning_vendor(order: Order, caller: Caller) -> bool:
    """True when *caller* is a vendor with at least one line in *order*."""
    return caller.is_vendor and order.has_items_from(caller.user_id)


def caller_is_customer(order: Order, caller: Caller) -> bool:
    return order.customer_id == caller.user_id


def ensure_can_view(order: Order, caller: Caller) -> None:
    if not (caller_is_customer(order, caller) or caller_is_owning_vendor(order, caller)):
        raise ForbiddenError(f"Not authorized to view order #{order.id}")


def ensure_can_update_status(order: Order, caller: Caller) -> None:
    if not caller_is_owning_vendor(order, caller):
        raise ForbiddenError(f"Not authorized to update order #{order.id}")


def ensure_vendor(caller: Caller) -> None:
    if not caller.is_vendor:
        raise ForbiddenError("Vendor account required")
