"""Use case for moderator review of a report."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.orm import Session

from forum.domain.entities import REPORT_MODERATOR_NOTE_MAX_LENGTH, Report, ReportStatus
from forum.domain.exceptions import NotFoundError, ValidationError
from forum.infrastructure.repositories import ContentReportRepository
from forum.utils import coerce_positive_int, normalize_text, now_in_app_timezone

from .validators import ensure_max_length, parse_review_status

logger = logging.getLogger(__name__)


def review_report(
    session: Session,
    *,
    report_id: Any,
    status: Any,
    moderator_id: int,
    moderator_note: Any = None,
) -> Report:
    """Move a report to ``status`` on behalf of ``moderator_id``.

    Reopening erases the reviewer, review time and note. Resolving or
    dismissing stamps the moderator, the current time and the note, replacing
    whatever review was recorded before. Each transition is a single-row
    update; concurrent reviews of the same report are last-write-wins.

    Raises ``ValidationError`` for malformed input, ``NotFoundError`` for an
    unknown report and ``ConflictError`` when reopening would give the
    reporter two open reports for the same target.
    """

    normalized_id = coerce_positive_int(report_id)
    if normalized_id is None:
        raise ValidationError("Invalid report id")
    target_status = parse_review_status(status)
    note = ensure_max_length(
        normalize_text(moderator_note),
        limit=REPORT_MODERATOR_NOTE_MAX_LENGTH,
        label="Moderator note",
    )

    repository = ContentReportRepository(session)
    if target_status is ReportStatus.OPEN:
        updated = repository.reopen(normalized_id)
    else:
        updated = repository.close(
            normalized_id,
            status=target_status,
            reviewed_by_user_id=moderator_id,
            reviewed_at=now_in_app_timezone(),
            moderator_note=note or None,
        )
    if not updated:
        raise NotFoundError("Report not found")

    report = repository.get(normalized_id)
    if report is None:
        raise NotFoundError("Report not found")
    logger.info(
        "Moderator %s set report %s to %s", moderator_id, normalized_id, target_status.value
    )
    return report


__all__ = ["review_report"]
