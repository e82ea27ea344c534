"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session

from forum.domain.entities import Notification, NotificationType
from forum.infrastructure.models import NotificationModel
from forum.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)


class NotificationRepository:
    """Provide persistence operations for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, notification_id: int) -> Notification | None:
        model = self.session.get(NotificationModel, notification_id)
        return self._to_entity(model) if model else None

    def list_for_user(
        self,
        user_id: int,
        *,
        unread_only: bool = False,
        limit: int | None = 50,
    ) -> Sequence[Notification]:
        query = self.session.query(NotificationModel).filter(
            NotificationModel.user_id == user_id
        )
        if unread_only:
            query = query.filter(NotificationModel.read_at.is_(None))
        query = query.order_by(
            NotificationModel.created_at.desc(), NotificationModel.id.desc()
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def count_unread(self, user_id: int, *, include_direct_messages: bool = False) -> int:
        query = (
            self.session.query(func.count(NotificationModel.id))
            .filter(NotificationModel.user_id == user_id)
            .filter(NotificationModel.read_at.is_(None))
        )
        if not include_direct_messages:
            query = query.filter(
                NotificationModel.type != NotificationType.DIRECT_MESSAGE.value
            )
        return int(query.scalar() or 0)

    def create(self, notification: Notification, *, commit: bool = True) -> Notification:
        """Insert ``notification``; with ``commit=False`` the row is only flushed."""

        model = NotificationModel(
            user_id=notification.user_id,
            actor_user_id=notification.actor_user_id,
            type=NotificationType(notification.type).value,
            entity_type=notification.entity_type,
            entity_id=notification.entity_id,
            thread_id=notification.thread_id,
            message=notification.message,
            created_at=(
                ensure_app_naive_datetime(notification.created_at)
                or ensure_app_naive_datetime(now_in_app_timezone())
            ),
            read_at=ensure_app_naive_datetime(notification.read_at),
        )
        self.session.add(model)
        if commit:
            self.session.commit()
        else:
            self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    def mark_as_read(self, notification_id: int, *, user_id: int) -> Notification | None:
        """Stamp ``read_at`` on one of the user's notifications.

        Notifications that were already read keep their original timestamp.
        Returns ``None`` when the notification does not belong to the user.
        """

        self.session.query(NotificationModel).filter(
            NotificationModel.id == notification_id,
            NotificationModel.user_id == user_id,
            NotificationModel.read_at.is_(None),
        ).update(
            {NotificationModel.read_at: ensure_app_naive_datetime(now_in_app_timezone())},
            synchronize_session=False,
        )
        self.session.commit()
        model = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.id == notification_id,
                NotificationModel.user_id == user_id,
            )
            .first()
        )
        return self._to_entity(model) if model else None

    def mark_all_as_read(self, user_id: int) -> int:
        updated = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.user_id == user_id,
                NotificationModel.read_at.is_(None),
            )
            .update(
                {
                    NotificationModel.read_at: ensure_app_naive_datetime(
                        now_in_app_timezone()
                    )
                },
                synchronize_session=False,
            )
        )
        self.session.commit()
        return int(updated or 0)

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            user_id=model.user_id,
            type=NotificationType(model.type),
            message=model.message,
            actor_user_id=model.actor_user_id,
            entity_type=model.entity_type,
            entity_id=model.entity_id,
            thread_id=model.thread_id,
            created_at=ensure_app_timezone(model.created_at),
            read_at=ensure_app_timezone(model.read_at),
        )


__all__ = ["NotificationRepository"]
