"""Aggregate application use cases."""

from .notifications import count_unread, create_notification, extract_handles, notify_mentions
from .reports import create_report, list_reports, review_report

__all__ = [
    "count_unread",
    "create_notification",
    "create_report",
    "extract_handles",
    "list_reports",
    "notify_mentions",
    "review_report",
]
