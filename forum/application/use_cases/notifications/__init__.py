"""Public helpers for emitting and reading notifications."""

from .create_notification import create_notification
from .inbox import list_notifications, mark_all_notifications_read, mark_notification_read
from .mentions import extract_handles
from .notify_mentions import notify_mentions
from .unread import count_unread

__all__ = [
    "count_unread",
    "create_notification",
    "extract_handles",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
    "notify_mentions",
]
