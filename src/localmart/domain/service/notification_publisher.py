"""Port for pushing ledger events to connected users.

Handlers receive a publisher at construction time. Delivery is
best-effort: a publisher may raise, and callers must not let that
undo the order mutation that produced the event.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from localmart.domain.model.events import NotificationEvent


class NotificationPublisher(ABC):

    @abstractmethod
    def publish(self, user_id: str, event: NotificationEvent) -> None:
        """Deliver *event* to every subscription held by *user_id*."""
