"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from localmart.domain.model.order import Order, OrderStatus


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_by_customer(self, customer_id: str) -> list[Order]:
        """Return every order placed by the customer, newest first."""

    @abstractmethod
    def list_containing_products(self, product_ids: set[str]) -> list[Order]:
        """Return orders with at least one line for the given products, newest first."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order, assigning an ID to new ones."""

    @abstractmethod
    def save_if_status(self, order: Order, expected: OrderStatus) -> bool:
        """Persist an existing order only if its stored status is still *expected*.

        The check and the write happen as one step with respect to
        concurrent callers.  Returns False, writing nothing, when the stored
        status has moved on or the order does not exist.
        """
