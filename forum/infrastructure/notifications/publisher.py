"""Utility helpers to push notifications to websocket subscribers."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from anyio import from_thread

from forum.domain.entities import Notification

from .manager import NotificationConnectionManager, notification_manager

logger = logging.getLogger(__name__)

# Strong references to in-flight deliveries; the loop only keeps weak ones.
_pending_deliveries: set[asyncio.Task[int]] = set()


class NotificationPublisher:
    """Serialize notifications and schedule their delivery."""

    def __init__(self, manager: NotificationConnectionManager) -> None:
        self._manager = manager

    def dispatch(self, notification: Notification) -> None:
        """Schedule ``notification`` to be delivered to its user.

        Delivery is best effort and never waits for the sockets. From an AnyIO
        worker thread (sync endpoints) the task is handed to the event loop;
        with no loop and no worker thread there is nobody listening, so the
        push is skipped.
        """

        message = {"type": "notification", "data": self._serialize(notification)}
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            try:
                from_thread.run_sync(self._schedule, notification.user_id, message)
            except RuntimeError:
                logger.debug(
                    "No event loop available; skipping realtime delivery of notification %s",
                    notification.id,
                )
        else:
            self._schedule(notification.user_id, message)

    def _schedule(self, user_id: int, message: dict[str, Any]) -> None:
        task = asyncio.get_running_loop().create_task(
            self._manager.send_to_user(user_id, message)
        )
        _pending_deliveries.add(task)
        task.add_done_callback(_pending_deliveries.discard)

    @staticmethod
    def _serialize(notification: Notification) -> dict[str, Any]:
        return {
            "id": notification.id,
            "user_id": notification.user_id,
            "actor_user_id": notification.actor_user_id,
            "type": notification.type.value,
            "entity_type": notification.entity_type,
            "entity_id": notification.entity_id,
            "thread_id": notification.thread_id,
            "message": notification.message,
            "created_at": notification.created_at.isoformat()
            if notification.created_at
            else None,
            "read_at": notification.read_at.isoformat() if notification.read_at else None,
        }


notification_publisher = NotificationPublisher(notification_manager)


def dispatch_notification(notification: Notification) -> None:
    """Public helper that delegates to the shared publisher instance."""

    notification_publisher.dispatch(notification)


def serialize_notification(notification: Notification) -> dict[str, Any]:
    """Return the websocket payload representation for ``notification``."""

    return NotificationPublisher._serialize(notification)


__all__ = [
    "NotificationPublisher",
    "notification_publisher",
    "dispatch_notification",
    "serialize_notification",
]
