"""Use case for writing a single notification."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from forum.domain.entities import (
    NOTIFICATION_MESSAGE_MAX_LENGTH,
    Notification,
    NotificationType,
)
from forum.infrastructure.notifications import dispatch_notification
from forum.infrastructure.repositories import NotificationRepository
from forum.utils import coerce_positive_int, normalize_text, now_in_app_timezone

logger = logging.getLogger(__name__)


def create_notification(
    session: Session,
    *,
    user_id: Any,
    notification_type: NotificationType | str | None,
    message: Any,
    actor_user_id: Any = None,
    entity_type: Any = None,
    entity_id: Any = None,
    thread_id: Any = None,
) -> int | None:
    """Persist a notification for ``user_id`` and return its id.

    Notifications are a best-effort side effect of another action. A payload
    missing its recipient, type or message, or a store failure while writing
    it, is logged and reported as ``None`` instead of raising, so the action
    that triggered it is never interrupted. Messages longer than
    :data:`NOTIFICATION_MESSAGE_MAX_LENGTH` are truncated, and malformed
    optional references are stored as ``NULL``.

    The row is inserted under a savepoint on the caller's session, so a failed
    insert discards only the notification. On success the session is
    committed, together with anything the caller still had pending.
    """

    recipient_id = coerce_positive_int(user_id)
    parsed_type = NotificationType.parse(notification_type)
    text = normalize_text(message)[:NOTIFICATION_MESSAGE_MAX_LENGTH]
    if recipient_id is None or parsed_type is None or not text:
        logger.warning(
            "Skipping notification with invalid payload (user_id=%r, type=%r)",
            user_id,
            notification_type,
        )
        return None

    notification = Notification(
        id=None,
        user_id=recipient_id,
        type=parsed_type,
        message=text,
        actor_user_id=coerce_positive_int(actor_user_id),
        entity_type=normalize_text(entity_type) or None,
        entity_id=coerce_positive_int(entity_id),
        thread_id=coerce_positive_int(thread_id),
        created_at=now_in_app_timezone(),
    )
    repository = NotificationRepository(session)
    try:
        # Savepoint: a failed insert must leave the caller's pending work intact.
        with session.begin_nested():
            saved = repository.create(notification, commit=False)
    except SQLAlchemyError:
        logger.exception(
            "Could not store %s notification for user %s", parsed_type.value, recipient_id
        )
        return None

    try:
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        logger.exception(
            "Could not commit %s notification for user %s", parsed_type.value, recipient_id
        )
        return None

    try:
        dispatch_notification(saved)
    except Exception:  # noqa: BLE001 - realtime delivery never fails the write
        logger.exception("Realtime delivery of notification %s failed", saved.id)
    return saved.id


__all__ = ["create_notification"]
