"""Application service: Show Order use case (query)."""

from __future__ import annotations

from localmart.application.dto import OrderDTO, order_to_dto
from localmart.domain.exceptions import OrderNotFoundError
from localmart.domain.model.user import Caller
from localmart.domain.repository.order_repository import OrderRepository
from localmart.domain.service.order_access import caller_is_customer, ensure_can_view


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, caller: Caller) -> OrderDTO:
        """Return the order as *caller* may see it.

        The customer gets the whole order; a vendor gets only their lines.
        """
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(f"Order #{order_id} not found")

        ensure_can_view(order, caller)

        if caller_is_customer(order, caller):
            return order_to_dto(order)
        return order_to_dto(order, vendor_id=caller.user_id)
