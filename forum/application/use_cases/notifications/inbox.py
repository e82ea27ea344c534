"""Use cases for reading and acknowledging a user's notifications."""

from __future__ import annotations

from sqlalchemy.orm import Session

from forum.domain.entities import Notification, NotificationInbox
from forum.domain.exceptions import NotFoundError, ValidationError
from forum.infrastructure.repositories import NotificationRepository
from forum.utils import coerce_positive_int

DEFAULT_INBOX_LIMIT = 50
MAX_INBOX_LIMIT = 100


def _clamp_limit(limit: int | None) -> int:
    if not isinstance(limit, int) or isinstance(limit, bool):
        return DEFAULT_INBOX_LIMIT
    return min(max(limit, 1), MAX_INBOX_LIMIT)


def list_notifications(
    session: Session,
    user_id: int,
    *,
    unread_only: bool = False,
    limit: int | None = DEFAULT_INBOX_LIMIT,
) -> NotificationInbox:
    """Return the newest notifications for ``user_id`` and the unread badge."""

    repository = NotificationRepository(session)
    notifications = repository.list_for_user(
        user_id, unread_only=unread_only, limit=_clamp_limit(limit)
    )
    return NotificationInbox(
        notifications=list(notifications),
        unread_count=repository.count_unread(user_id),
    )


def mark_notification_read(
    session: Session, *, user_id: int, notification_id: int
) -> Notification:
    """Mark one of the user's notifications as read.

    A notification that was already read keeps its first ``read_at``.
    """

    normalized_id = coerce_positive_int(notification_id)
    if normalized_id is None:
        raise ValidationError("Invalid notification id")

    notification = NotificationRepository(session).mark_as_read(
        normalized_id, user_id=user_id
    )
    if notification is None:
        raise NotFoundError("Notification not found")
    return notification


def mark_all_notifications_read(session: Session, user_id: int) -> int:
    """Mark every unread notification of ``user_id`` as read."""

    return NotificationRepository(session).mark_all_as_read(user_id)


__all__ = [
    "DEFAULT_INBOX_LIMIT",
    "MAX_INBOX_LIMIT",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
]
