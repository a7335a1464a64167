"""Best-effort event publishing shared by the ledger handlers."""

from __future__ import annotations

import structlog

from localmart.domain.model.events import NotificationEvent
from localmart.domain.service.notification_publisher import NotificationPublisher

logger = structlog.get_logger(__name__)


def publish_quietly(
    publisher: NotificationPublisher, user_id: str, event: NotificationEvent
) -> None:
    """Publish *event*, logging instead of raising if delivery fails.

    The order mutation that produced the event has already been committed.
    """
    try:
        publisher.publish(user_id, event)
    except Exception as exc:
        logger.warning(
            "Notification delivery failed",
            user_id=user_id,
            notification=event.name,
            error=str(exc),
        )
    else:
        logger.debug("Notification published", user_id=user_id, notification=event.name)
