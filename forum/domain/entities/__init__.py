"""Domain entities exposed by the application."""

from .notification import (
    NOTIFICATION_MESSAGE_MAX_LENGTH,
    Notification,
    NotificationInbox,
    NotificationType,
)
from .report import (
    REPORT_DETAILS_MAX_LENGTH,
    REPORT_MODERATOR_NOTE_MAX_LENGTH,
    REPORT_REASON_MAX_LENGTH,
    REPORT_SNAPSHOT_MAX_LENGTH,
    REPORT_STATUS_FILTER_ALL,
    Report,
    ReportEntityType,
    ReportListing,
    ReportStatus,
    ReportSummary,
    ReportTarget,
)
from .user import ROLE_ADMIN, ROLE_MEMBER, ROLE_MODERATOR, User

__all__ = [
    "NOTIFICATION_MESSAGE_MAX_LENGTH",
    "Notification",
    "NotificationInbox",
    "NotificationType",
    "REPORT_DETAILS_MAX_LENGTH",
    "REPORT_MODERATOR_NOTE_MAX_LENGTH",
    "REPORT_REASON_MAX_LENGTH",
    "REPORT_SNAPSHOT_MAX_LENGTH",
    "REPORT_STATUS_FILTER_ALL",
    "Report",
    "ReportEntityType",
    "ReportListing",
    "ReportStatus",
    "ReportSummary",
    "ReportTarget",
    "ROLE_ADMIN",
    "ROLE_MEMBER",
    "ROLE_MODERATOR",
    "User",
]
