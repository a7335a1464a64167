"""Tests for the JSON-file repositories, against a temporary data directory."""

import json
import threading
from datetime import timedelta

import pytest

from localmart.domain.model.order import OrderStatus
from localmart.domain.model.user import Role
from localmart.infrastructure.persistence.json_order_repository import JsonOrderRepository
from localmart.infrastructure.persistence.json_product_repository import JsonProductRepository
from localmart.infrastructure.persistence.json_store import StorageError
from localmart.infrastructure.persistence.json_user_repository import JsonUserRepository
from tests.builders import ALICE, BOB, USERS, catalog, line, order


class TestJsonProductRepository:

    def _repo(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        for product in catalog():
            repo.save(product)
        return repo

    def test_creates_empty_file(self, tmp_path):
        JsonProductRepository(tmp_path / "nested" / "products.json")
        assert json.loads((tmp_path / "nested" / "products.json").read_text()) == []

    def test_save_and_reload(self, tmp_path):
        self._repo(tmp_path)
        reloaded = JsonProductRepository(tmp_path / "products.json").get_by_id("p2")
        assert reloaded.name == "Bread"
        assert str(reloaded.price) == "KES 60.00"
        assert reloaded.vendor_id == "v2"
        assert reloaded.category == "Bakery"

    def test_list_by_vendor(self, tmp_path):
        repo = self._repo(tmp_path)
        assert sorted(p.id for p in repo.list_by_vendor("v1")) == ["p1", "p3"]

    def test_conditional_decrement(self, tmp_path):
        repo = self._repo(tmp_path)
        assert repo.decrement_stock_if_available("p3", 1) is True
        assert repo.decrement_stock_if_available("p3", 1) is False
        assert repo.decrement_stock_if_available("missing", 1) is False
        assert repo.get_by_id("p3").stock == 0

    def test_increment(self, tmp_path):
        repo = self._repo(tmp_path)
        repo.increment_stock("p2", 4)
        repo.increment_stock("missing", 4)
        assert repo.get_by_id("p2").stock == 9

    def test_concurrent_decrements_never_oversell(self, tmp_path):
        repo = self._repo(tmp_path)  # Bread has 5 loaves
        wins = []

        def claim():
            other_handle = JsonProductRepository(tmp_path / "products.json")
            if other_handle.decrement_stock_if_available("p2", 1):
                wins.append(1)

        threads = [threading.Thread(target=claim) for _ in range(12)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(wins) == 5
        assert repo.get_by_id("p2").stock == 0

    def test_corrupt_file_raises_storage_error(self, tmp_path):
        path = tmp_path / "products.json"
        path.write_text("{not json")
        with pytest.raises(StorageError, match="Corrupt data file"):
            JsonProductRepository(path).list_all()


class TestJsonOrderRepository:

    def test_assigns_sequential_ids(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        first, second = order(), order()
        repo.save(first)
        repo.save(second)
        assert (first.id, second.id) == (1, 2)

    def test_round_trip_keeps_history_and_snapshot(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        o = order(line("p1", "v1", qty=2, price="150.00"), line("p2", "v2", price="60.00"))
        o.transition_to(OrderStatus.DELIVERED)
        repo.save(o)

        loaded = JsonOrderRepository(tmp_path / "orders.json").get_by_id(o.id)

        assert loaded.status == OrderStatus.DELIVERED
        assert [c.status for c in loaded.status_history] == [
            OrderStatus.PENDING, OrderStatus.DELIVERED,
        ]
        assert loaded.delivered_at == o.delivered_at
        assert loaded.total == o.total
        assert loaded.items == o.items
        assert loaded.delivery_address == o.delivery_address

    def test_update_replaces_record(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        o = order()
        repo.save(o)
        o.transition_to(OrderStatus.PACKAGING)
        repo.save(o)

        raw = json.loads((tmp_path / "orders.json").read_text())
        assert len(raw) == 1
        assert raw[0]["status"] == "packaging"

    def test_conditional_save_checks_stored_status(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        o = order()
        repo.save(o)

        stale = repo.get_by_id(o.id)
        o.transition_to(OrderStatus.CANCELLED)
        assert repo.save_if_status(o, expected=OrderStatus.PENDING) is True

        stale.transition_to(OrderStatus.DELIVERED)
        assert repo.save_if_status(stale, expected=OrderStatus.PENDING) is False
        assert repo.get_by_id(o.id).status == OrderStatus.CANCELLED

    def test_conditional_save_of_unknown_order_writes_nothing(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        o = order()
        o.id = 7
        assert repo.save_if_status(o, expected=OrderStatus.PENDING) is False
        assert repo.get_by_id(7) is None

    def test_customer_and_product_lookups_newest_first(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        older = order(line("p1", "v1"))
        newer = order(line("p2", "v2"), line("p1", "v1"))
        newer.created_at = older.created_at + timedelta(minutes=5)
        bobs = order(line("p4", "v3"), customer=BOB)
        for o in (older, newer, bobs):
            repo.save(o)

        assert [o.id for o in repo.list_by_customer(ALICE.id)] == [newer.id, older.id]
        assert [o.id for o in repo.list_containing_products({"p1"})] == [newer.id, older.id]
        assert [o.id for o in repo.list_containing_products({"p4"})] == [bobs.id]
        assert repo.get_by_id(99) is None


class TestJsonUserRepository:

    def test_save_and_lookup(self, tmp_path):
        repo = JsonUserRepository(tmp_path / "users.json")
        for user in USERS:
            repo.save(user)

        assert repo.get_by_email("ALICE@example.com").id == "c1"
        assert repo.get_by_id("v2").role == Role.VENDOR
        assert repo.get_by_id("nobody") is None
        assert len(repo.list_all()) == len(USERS)

    def test_save_overwrites_same_id(self, tmp_path):
        repo = JsonUserRepository(tmp_path / "users.json")
        repo.save(ALICE)
        repo.save(ALICE)
        assert len(repo.list_all()) == 1
