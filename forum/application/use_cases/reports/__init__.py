"""Use cases for filing and moderating content reports."""

from .create_report import create_report
from .get_report import get_report
from .list_reports import list_reports
from .review_report import review_report

__all__ = [
    "create_report",
    "get_report",
    "list_reports",
    "review_report",
]
