"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from localmart.infrastructure.config import Settings
from localmart.infrastructure.notifications.json_outbox import JsonNotificationOutbox
from localmart.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from localmart.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from localmart.infrastructure.persistence.json_user_repository import (
    JsonUserRepository,
)


def settings() -> Settings:
    return Settings.from_env()


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(settings().data_dir / "products.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(settings().data_dir / "orders.json")


def user_repository() -> JsonUserRepository:
    return JsonUserRepository(settings().data_dir / "users.json")


def notification_outbox() -> JsonNotificationOutbox:
    return JsonNotificationOutbox(settings().data_dir / "notifications.json")
