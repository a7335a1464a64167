"""Integration tests for the order read side: show, customer list, vendor list."""

from datetime import datetime, timedelta, timezone

import pytest

from localmart.application.create_order import CreateOrderHandler
from localmart.application.dto import AddressSpec, OrderItemSpec
from localmart.application.list_customer_orders import ListCustomerOrdersHandler
from localmart.application.list_vendor_orders import ListVendorOrdersHandler
from localmart.application.show_order import ShowOrderHandler
from localmart.application.update_order_status import UpdateOrderStatusHandler
from localmart.domain.exceptions import (
    ForbiddenError,
    InvalidStatusError,
    OrderNotFoundError,
    ValidationError,
)
from tests.builders import ALICE, BAKERY, BOB, GROCER, OUTSIDER, USERS, caller, catalog
from tests.fakes import (
    FakeOrderRepository,
    FakeProductRepository,
    FakeUserRepository,
    RecordingPublisher,
)

ADDRESS = AddressSpec(street="12 Moi Avenue", city="Nairobi", phone="+254700000001")


class _World:
    """Fakes plus a helper for placing orders with distinct timestamps."""

    def __init__(self) -> None:
        self.order_repo = FakeOrderRepository()
        self.product_repo = FakeProductRepository(catalog())
        self.create = CreateOrderHandler(
            self.order_repo, self.product_repo, FakeUserRepository(USERS), RecordingPublisher()
        )
        self._clock = datetime(2026, 1, 1, tzinfo=timezone.utc)

    def place(self, user, *specs: tuple[str, int]) -> int:
        dto = self.create.handle(caller(user), [OrderItemSpec(p, q) for p, q in specs], ADDRESS)
        # Spread creation times so newest-first ordering is deterministic.
        self._clock += timedelta(minutes=1)
        self.order_repo.get_by_id(dto.id).created_at = self._clock
        return dto.id


class TestShowOrder:

    def test_customer_sees_full_order(self):
        world = _World()
        order_id = world.place(ALICE, ("p1", 1), ("p2", 2))

        dto = ShowOrderHandler(world.order_repo).handle(order_id, caller(ALICE))

        assert [i.product_id for i in dto.items] == ["p1", "p2"]
        assert dto.total == "KES 270.00"

    def test_vendor_sees_only_their_lines(self):
        world = _World()
        order_id = world.place(ALICE, ("p1", 1), ("p2", 2))

        dto = ShowOrderHandler(world.order_repo).handle(order_id, caller(BAKERY))

        assert [i.product_id for i in dto.items] == ["p2"]
        assert dto.total == "KES 120.00"

    def test_unrelated_vendor_forbidden(self):
        world = _World()
        order_id = world.place(ALICE, ("p1", 1))
        with pytest.raises(ForbiddenError):
            ShowOrderHandler(world.order_repo).handle(order_id, caller(OUTSIDER))

    def test_other_customer_forbidden(self):
        world = _World()
        order_id = world.place(ALICE, ("p1", 1))
        with pytest.raises(ForbiddenError):
            ShowOrderHandler(world.order_repo).handle(order_id, caller(BOB))

    def test_missing_order(self):
        with pytest.raises(OrderNotFoundError):
            ShowOrderHandler(FakeOrderRepository()).handle(42, caller(ALICE))


class TestCustomerOrders:

    def test_lists_only_own_orders_newest_first(self):
        world = _World()
        first = world.place(ALICE, ("p1", 1))
        world.place(BOB, ("p2", 1))
        latest = world.place(ALICE, ("p4", 1))

        orders = ListCustomerOrdersHandler(world.order_repo).handle(caller(ALICE))

        assert [o.id for o in orders] == [latest, first]

    def test_no_orders(self):
        assert ListCustomerOrdersHandler(FakeOrderRepository()).handle(caller(BOB)) == []


class TestVendorOrders:

    def _handler(self, world):
        return ListVendorOrdersHandler(world.order_repo, world.product_repo)

    def test_shared_order_is_scoped_per_vendor(self):
        world = _World()
        order_id = world.place(ALICE, ("p1", 2), ("p2", 1), ("p3", 1))

        grocer_view = self._handler(world).handle(caller(GROCER))
        bakery_view = self._handler(world).handle(caller(BAKERY))

        assert [o.id for o in grocer_view] == [order_id]
        assert {i.vendor_id for i in grocer_view[0].items} == {"v1"}
        assert grocer_view[0].total == "KES 310.00"
        assert [i.product_id for i in bakery_view[0].items] == ["p2"]
        assert bakery_view[0].total == "KES 60.00"

    def test_status_change_by_one_vendor_keeps_the_other_scoped(self):
        world = _World()
        order_id = world.place(ALICE, ("p1", 1), ("p2", 1))
        UpdateOrderStatusHandler(
            world.order_repo, world.product_repo, RecordingPublisher()
        ).handle(order_id, "packaging", caller(GROCER))

        bakery_view = self._handler(world).handle(caller(BAKERY))

        assert bakery_view[0].status == "packaging"
        assert [i.product_id for i in bakery_view[0].items] == ["p2"]
        assert bakery_view[0].total == "KES 60.00"

    def test_vendor_without_matching_orders_gets_nothing(self):
        world = _World()
        world.place(ALICE, ("p1", 1))
        assert self._handler(world).handle(caller(OUTSIDER)) == []

    def test_customer_forbidden(self):
        world = _World()
        with pytest.raises(ForbiddenError):
            self._handler(world).handle(caller(ALICE))

    def test_status_filter(self):
        world = _World()
        moved = world.place(ALICE, ("p1", 1))
        world.place(BOB, ("p1", 1))
        UpdateOrderStatusHandler(
            world.order_repo, world.product_repo, RecordingPublisher()
        ).handle(moved, "in transit", caller(GROCER))

        orders = self._handler(world).handle(caller(GROCER), status="in transit")

        assert [o.id for o in orders] == [moved]

    def test_bad_status_filter(self):
        with pytest.raises(InvalidStatusError):
            self._handler(_World()).handle(caller(GROCER), status="lost")

    def test_pagination_newest_first(self):
        world = _World()
        ids = [world.place(ALICE, ("p1", 1)) for _ in range(5)]

        page_one = self._handler(world).handle(caller(GROCER), page=1, limit=2)
        page_three = self._handler(world).handle(caller(GROCER), page=3, limit=2)

        assert [o.id for o in page_one] == [ids[4], ids[3]]
        assert [o.id for o in page_three] == [ids[0]]

    def test_bad_page_rejected(self):
        with pytest.raises(ValidationError, match="Page"):
            self._handler(_World()).handle(caller(GROCER), page=0, limit=5)
