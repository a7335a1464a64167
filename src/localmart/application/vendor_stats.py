"""Application service: Vendor Dashboard Stats use case (query)."""

from __future__ import annotations

from localmart.application.dto import VendorStatsDTO, order_to_dto, product_to_dto
from localmart.domain.model.order import OrderStatus
from localmart.domain.model.user import Caller
from localmart.domain.model.value_objects import Money
from localmart.domain.repository.order_repository import OrderRepository
from localmart.domain.repository.product_repository import ProductRepository
from localmart.domain.service.order_access import ensure_vendor

LOW_STOCK_THRESHOLD = 5
DASHBOARD_LIST_SIZE = 5


class VendorStatsHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(self, caller: Caller) -> VendorStatsDTO:
        """Summarise the vendor's catalog and their share of orders.

        Revenue counts only the vendor's own lines and skips cancelled
        orders, whose stock has been returned.  Recent orders are scoped
        to the vendor's lines, newest first.  Low-stock products are
        active ones with at most ``LOW_STOCK_THRESHOLD`` units left.
        """
        ensure_vendor(caller)

        products = self._product_repo.list_by_vendor(caller.user_id)
        product_ids = {p.id for p in products}
        orders = (
            [
                o
                for o in self._order_repo.list_containing_products(product_ids)
                if o.has_items_from(caller.user_id)
            ]
            if product_ids
            else []
        )

        revenue = Money.zero()
        for order in orders:
            if order.status != OrderStatus.CANCELLED:
                revenue = revenue + order.subtotal_for_vendor(caller.user_id)

        low_stock = [
            p for p in products if p.is_active and p.stock <= LOW_STOCK_THRESHOLD
        ]

        return VendorStatsDTO(
            total_products=sum(1 for p in products if p.is_active),
            total_orders=len(orders),
            total_revenue=str(revenue),
            pending_orders=sum(1 for o in orders if o.status == OrderStatus.PENDING),
            recent_orders=[
                order_to_dto(o, vendor_id=caller.user_id)
                for o in orders[:DASHBOARD_LIST_SIZE]
            ],
            low_stock_products=[
                product_to_dto(p) for p in low_stock[:DASHBOARD_LIST_SIZE]
            ],
        )
