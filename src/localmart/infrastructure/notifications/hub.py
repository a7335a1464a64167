"""In-process publish/subscribe channel keyed by user ID.

Stands in for the websocket server: a connection subscribes once it has
been authenticated, and every event published for that user is handed to
its listener.  Users with no live subscription simply miss the event.
"""

from __future__ import annotations

import threading
from collections.abc import Callable

import structlog

from localmart.domain.exceptions import AuthenticationError
from localmart.domain.model.events import NotificationEvent
from localmart.domain.model.user import Caller
from localmart.domain.service.notification_publisher import NotificationPublisher

logger = structlog.get_logger(__name__)

Listener = Callable[[NotificationEvent], None]


class Subscription:

    def __init__(self, hub: NotificationHub, user_id: str, listener: Listener) -> None:
        self._hub = hub
        self.user_id = user_id
        self.listener = listener

    def close(self) -> None:
        self._hub.unsubscribe(self)


class NotificationHub(NotificationPublisher):

    def __init__(self) -> None:
        self._subscriptions: dict[str, list[Subscription]] = {}
        self._lock = threading.Lock()

    def subscribe(self, caller: Caller | None, listener: Listener) -> Subscription:
        """Attach *listener* to the caller's channel.

        Connections that have not been authenticated are rejected.
        """
        if caller is None:
            raise AuthenticationError("Unauthenticated connection rejected")
        subscription = Subscription(self, caller.user_id, listener)
        with self._lock:
            self._subscriptions.setdefault(caller.user_id, []).append(subscription)
        logger.debug("Subscriber connected", user_id=caller.user_id)
        return subscription

    def publish(self, user_id: str, event: NotificationEvent) -> None:
        with self._lock:
            targets = list(self._subscriptions.get(user_id, ()))
        for subscription in targets:
            try:
                subscription.listener(event)
            except Exception as exc:
                logger.warning(
                    "Subscriber failed to handle notification",
                    user_id=user_id,
                    notification=event.name,
                    error=str(exc),
                )

    def subscriber_count(self, user_id: str) -> int:
        with self._lock:
            return len(self._subscriptions.get(user_id, ()))

    def unsubscribe(self, subscription: Subscription) -> None:
        with self._lock:
            remaining = [
                s for s in self._subscriptions.get(subscription.user_id, ())
                if s is not subscription
            ]
            if remaining:
                self._subscriptions[subscription.user_id] = remaining
            else:
                self._subscriptions.pop(subscription.user_id, None)
        logger.debug("Subscriber disconnected", user_id=subscription.user_id)
