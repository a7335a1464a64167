"""Application service: List Vendor Orders use case (query).

Finds orders through the vendor's products, then trims each one down to
the vendor's own lines and subtotal.  Other vendors' lines in a shared
order are never returned.
"""

from __future__ import annotations

from localmart.application.dto import OrderDTO, order_to_dto
from localmart.domain.exceptions import ValidationError
from localmart.domain.model.order import OrderStatus
from localmart.domain.model.user import Caller
from localmart.domain.repository.order_repository import OrderRepository
from localmart.domain.repository.product_repository import ProductRepository
from localmart.domain.service.order_access import ensure_vendor


class ListVendorOrdersHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(
        self,
        caller: Caller,
        status: str | None = None,
        page: int = 1,
        limit: int | None = None,
    ) -> list[OrderDTO]:
        ensure_vendor(caller)
        if page < 1:
            raise ValidationError("Page must be at least 1")
        if limit is not None and limit < 1:
            raise ValidationError("Limit must be at least 1")

        wanted = OrderStatus.parse(status) if status is not None else None
        product_ids = {p.id for p in self._product_repo.list_by_vendor(caller.user_id)}
        if not product_ids:
            return []

        orders = [
            order
            for order in self._order_repo.list_containing_products(product_ids)
            if order.has_items_from(caller.user_id)
            and (wanted is None or order.status == wanted)
        ]

        if limit is not None:
            start = (page - 1) * limit
            orders = orders[start:start + limit]

        return [order_to_dto(order, vendor_id=caller.user_id) for order in orders]
