"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

NOTIFICATION_MESSAGE_MAX_LENGTH = 280


class NotificationType(str, Enum):
    """Closed set of notification kinds a user can receive."""

    MENTION = "mention"
    THREAD_RESPONSE = "thread_response"
    DIRECT_MESSAGE = "direct_message"
    FOLLOW = "follow"

    @classmethod
    def parse(cls, value: object) -> NotificationType | None:
        """Return the member matching ``value`` or ``None`` when unknown."""

        if isinstance(value, cls):
            return value
        candidate = str(value or "").strip().lower()
        if not candidate:
            return None
        try:
            return cls(candidate)
        except ValueError:
            return None


@dataclass
class Notification:
    """Information message delivered to a specific user."""

    id: int | None
    user_id: int
    type: NotificationType
    message: str
    actor_user_id: int | None = None
    entity_type: str | None = None
    entity_id: int | None = None
    thread_id: int | None = None
    created_at: datetime | None = None
    read_at: datetime | None = None

    @property
    def is_read(self) -> bool:
        return self.read_at is not None


@dataclass
class NotificationInbox:
    """A page of notifications together with the user's unread badge count."""

    notifications: list[Notification]
    unread_count: int


__all__ = [
    "NOTIFICATION_MESSAGE_MAX_LENGTH",
    "Notification",
    "NotificationInbox",
    "NotificationType",
]
