"""Application service: List Customer Orders use case (query)."""

from __future__ import annotations

from localmart.application.dto import OrderDTO, order_to_dto
from localmart.domain.model.user import Caller
from localmart.domain.repository.order_repository import OrderRepository


class ListCustomerOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, caller: Caller) -> list[OrderDTO]:
        """Every order the caller placed, newest first."""
        return [order_to_dto(order) for order in self._order_repo.list_by_customer(caller.user_id)]
