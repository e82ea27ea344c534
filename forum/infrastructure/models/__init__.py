"""ORM models used by the application infrastructure."""

from .content_report import ContentReportModel
from .notification import NotificationModel
from .thread import ThreadModel, ThreadResponseModel
from .user import UserModel

__all__ = [
    "ContentReportModel",
    "NotificationModel",
    "ThreadModel",
    "ThreadResponseModel",
    "UserModel",
]
