"""Use case for filing a content report."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.orm import Session

from forum.domain.entities import (
    REPORT_DETAILS_MAX_LENGTH,
    REPORT_REASON_MAX_LENGTH,
    Report,
    ReportEntityType,
    ReportStatus,
)
from forum.domain.exceptions import NotFoundError, ValidationError
from forum.infrastructure.repositories import ContentReportRepository, ContentTargetRepository
from forum.utils import coerce_positive_int, normalize_text, now_in_app_timezone

from .validators import ensure_max_length, parse_entity_type

logger = logging.getLogger(__name__)


def create_report(
    session: Session,
    *,
    reporter_user_id: int,
    entity_type: Any,
    entity_id: Any,
    reason: Any,
    details: Any = None,
) -> Report:
    """File a report from ``reporter_user_id`` against a thread, response or user.

    Input is validated before the store is touched. The target must exist;
    its parent thread and a short display snapshot are stored with the report
    and never recomputed.

    Raises ``ValidationError`` for malformed input, ``NotFoundError`` when the
    target does not exist and ``ConflictError`` when the reporter already has
    an open report for the same target.
    """

    parsed_type = parse_entity_type(entity_type)
    target_id = coerce_positive_int(entity_id)
    if target_id is None:
        raise ValidationError("Invalid report target")

    reason_text = normalize_text(reason)
    if not reason_text:
        raise ValidationError("Report reason is required")
    ensure_max_length(reason_text, limit=REPORT_REASON_MAX_LENGTH, label="Report reason")
    details_text = ensure_max_length(
        normalize_text(details), limit=REPORT_DETAILS_MAX_LENGTH, label="Report details"
    )
    if parsed_type is ReportEntityType.USER and target_id == reporter_user_id:
        raise ValidationError("You cannot report your own profile")

    target = ContentTargetRepository(session).resolve(parsed_type, target_id)
    if not target.exists:
        raise NotFoundError("Reported content could not be found")

    report = ContentReportRepository(session).create(
        Report(
            id=None,
            reporter_user_id=reporter_user_id,
            entity_type=parsed_type,
            entity_id=target_id,
            reason=reason_text,
            status=ReportStatus.OPEN,
            thread_id=target.thread_id,
            target_snapshot=target.snapshot,
            details=details_text or None,
            created_at=now_in_app_timezone(),
        )
    )
    logger.info(
        "User %s reported %s %s (report %s)",
        reporter_user_id,
        parsed_type.value,
        target_id,
        report.id,
    )
    return report


__all__ = ["create_report"]
