"""Repository implementations for infrastructure layer."""

from .content_report_repository import ContentReportRepository
from .content_target_repository import ContentTargetRepository
from .notification_repository import NotificationRepository
from .user_repository import UserRepository

__all__ = [
    "ContentReportRepository",
    "ContentTargetRepository",
    "NotificationRepository",
    "UserRepository",
]
