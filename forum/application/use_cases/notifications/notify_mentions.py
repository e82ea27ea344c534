"""Use case fanning out mention notifications."""

from __future__ import annotations

from collections.abc import Iterable
import logging
from typing import Any

from sqlalchemy.orm import Session

from forum.domain.entities import NotificationType
from forum.infrastructure.repositories import UserRepository
from forum.utils import coerce_positive_int, normalize_text

from .create_notification import create_notification
from .mentions import extract_handles

logger = logging.getLogger(__name__)

DEFAULT_ACTOR_LABEL = "Someone"
DEFAULT_CONTEXT_LABEL = "a post"


def notify_mentions(
    session: Session,
    *,
    text: str | None,
    actor_user_id: Any,
    actor_name: str | None,
    entity_type: str | None,
    entity_id: Any,
    thread_id: Any = None,
    exclude_user_ids: Iterable[Any] = (),
    context_label: str | None = DEFAULT_CONTEXT_LABEL,
) -> list[int]:
    """Notify every user mentioned in ``text`` and return who was notified.

    Handles are resolved with a single lookup. The actor never notifies
    themselves and users in ``exclude_user_ids`` are skipped (for example the
    author of a quoted reply who already gets a response notification). Only
    users whose notification was actually stored appear in the result.
    """

    handles = extract_handles(text)
    if not handles:
        return []

    mentioned_users = UserRepository(session).list_by_handles(handles)
    excluded = {
        user_id
        for user_id in (coerce_positive_int(value) for value in exclude_user_ids or ())
        if user_id is not None
    }
    actor_id = coerce_positive_int(actor_user_id)
    actor_label = normalize_text(actor_name) or DEFAULT_ACTOR_LABEL
    context = normalize_text(context_label) or DEFAULT_CONTEXT_LABEL
    message = f"{actor_label} mentioned you in {context}"

    notified: list[int] = []
    for user in mentioned_users:
        if user.id is None or user.id == actor_id or user.id in excluded:
            continue
        notification_id = create_notification(
            session,
            user_id=user.id,
            notification_type=NotificationType.MENTION,
            message=message,
            actor_user_id=actor_id,
            entity_type=entity_type,
            entity_id=entity_id,
            thread_id=thread_id,
        )
        if notification_id is not None:
            notified.append(user.id)

    logger.debug(
        "Mention fan-out for %s %s: %d handle(s), %d notified",
        entity_type,
        entity_id,
        len(handles),
        len(notified),
    )
    return notified


__all__ = ["notify_mentions", "DEFAULT_ACTOR_LABEL", "DEFAULT_CONTEXT_LABEL"]
