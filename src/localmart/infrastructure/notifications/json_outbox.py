"""Notification publisher that records events in a JSON file.

Lets CLI users, who are never connected when an event fires, read what
was sent to them afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from localmart.domain.model.events import NotificationEvent
from localmart.domain.service.notification_publisher import NotificationPublisher
from localmart.infrastructure.persistence.json_store import JsonDocumentFile


@dataclass(frozen=True)
class StoredNotification:
    user_id: str
    event: str
    payload: dict[str, Any]
    published_at: str


class JsonNotificationOutbox(NotificationPublisher):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonDocumentFile(file_path, empty=[])

    def publish(self, user_id: str, event: NotificationEvent) -> None:
        with self._file.locked():
            entries = self._file.read()
            entries.append(
                {
                    "user_id": user_id,
                    "event": event.name,
                    "payload": event.to_payload(),
                    "published_at": datetime.now(timezone.utc).isoformat(),
                }
            )
            self._file.write(entries)

    def list_for(self, user_id: str) -> list[StoredNotification]:
        """Everything published to *user_id*, oldest first."""
        return [
            StoredNotification(
                user_id=raw["user_id"],
                event=raw["event"],
                payload=raw["payload"],
                published_at=raw["published_at"],
            )
            for raw in self._file.read()
            if raw["user_id"] == user_id
        ]
