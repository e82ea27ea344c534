"""Use case computing a user's unread notification badge."""

from typing import Any

from sqlalchemy.orm import Session

from forum.infrastructure.repositories import NotificationRepository
from forum.utils import coerce_positive_int


def count_unread(
    session: Session, user_id: Any, *, include_direct_messages: bool = False
) -> int:
    """Return how many notifications ``user_id`` has not read yet.

    Direct-message notifications have their own indicator and are left out
    unless ``include_direct_messages`` is set. An invalid ``user_id`` counts
    as zero.
    """

    normalized_id = coerce_positive_int(user_id)
    if normalized_id is None:
        return 0
    return NotificationRepository(session).count_unread(
        normalized_id, include_direct_messages=bool(include_direct_messages)
    )


__all__ = ["count_unread"]
