from .notification import (
    MarkAllReadResponse,
    NotificationListResponse,
    NotificationRead,
    NotificationResponse,
    UnreadCountResponse,
)
from .report import (
    ReportCreate,
    ReportListResponse,
    ReportRead,
    ReportResponse,
    ReportReviewRequest,
    ReportSummaryRead,
)

__all__ = [
    "MarkAllReadResponse",
    "NotificationListResponse",
    "NotificationRead",
    "NotificationResponse",
    "UnreadCountResponse",
    "ReportCreate",
    "ReportListResponse",
    "ReportRead",
    "ReportResponse",
    "ReportReviewRequest",
    "ReportSummaryRead",
]
