"""Use case for fetching a single report."""

from typing import Any

from sqlalchemy.orm import Session

from forum.domain.entities import Report
from forum.domain.exceptions import NotFoundError, ValidationError
from forum.infrastructure.repositories import ContentReportRepository
from forum.utils import coerce_positive_int


def get_report(session: Session, report_id: Any) -> Report:
    """Return the report identified by ``report_id`` or raise ``NotFoundError``."""

    normalized_id = coerce_positive_int(report_id)
    if normalized_id is None:
        raise ValidationError("Invalid report id")
    report = ContentReportRepository(session).get(normalized_id)
    if report is None:
        raise NotFoundError("Report not found")
    return report


__all__ = ["get_report"]
