"""Application service: Update Order Status use case.

A vendor with at least one line in the order moves it through the
fulfilment pipeline.  The write only lands if the stored status is still
the one read, so a cancellation restocks at most once and a terminal
order never changes.  Cancelling puts every line's stock back on the
shelf.  The customer is notified of every successful change.
"""

from __future__ import annotations

import structlog

from localmart.application.dto import OrderDTO, order_to_dto
from localmart.application.notifications import publish_quietly
from localmart.domain.exceptions import InvalidTransitionError, OrderNotFoundError
from localmart.domain.model.events import OrderStatusUpdated
from localmart.domain.model.order import OrderStatus
from localmart.domain.model.user import Caller
from localmart.domain.repository.order_repository import OrderRepository
from localmart.domain.repository.product_repository import ProductRepository
from localmart.domain.service.notification_publisher import NotificationPublisher
from localmart.domain.service.order_access import ensure_can_update_status
from localmart.domain.service.stock_allocation_service import StockAllocationService

logger = structlog.get_logger(__name__)


class UpdateOrderStatusHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        publisher: NotificationPublisher,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._publisher = publisher

    def handle(self, order_id: int, target_status: str, caller: Caller) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(f"Order #{order_id} not found")

        ensure_can_update_status(order, caller)
        target = OrderStatus.parse(target_status)

        previous = order.status
        order.transition_to(target)
        if not self._order_repo.save_if_status(order, expected=previous):
            # Another update committed between our read and this write.
            raise InvalidTransitionError(
                f"Order #{order_id} is no longer '{previous.value}'; reload and retry"
            )

        if target == OrderStatus.CANCELLED:
            StockAllocationService(self._product_repo).release(order.items)

        logger.info(
            "Order status changed",
            order_id=order.id,
            vendor_id=caller.user_id,
            from_status=previous.value,
            to_status=target.value,
        )

        publish_quietly(
            self._publisher,
            order.customer_id,
            OrderStatusUpdated(
                order_id=order.id,  # type: ignore[arg-type]
                status=target,
                customer_name=order.customer_name,
            ),
        )

        return order_to_dto(order, vendor_id=caller.user_id)
