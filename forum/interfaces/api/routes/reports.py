"""Routes for filing content reports and working the moderation queue."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from forum.application.use_cases.reports import (
    create_report as create_report_uc,
    list_reports as list_reports_uc,
    review_report as review_report_uc,
)
from forum.domain.entities import Report, User
from forum.domain.exceptions import ForumError
from forum.infrastructure.database import get_db
from forum.interfaces.api.dependencies import get_current_active_user, require_moderator
from forum.interfaces.api.routes_helpers import http_error_for
from forum.interfaces.api.schemas import (
    ReportCreate,
    ReportListResponse,
    ReportRead,
    ReportResponse,
    ReportReviewRequest,
)

router = APIRouter(prefix="/reports", tags=["reports"])
logger = logging.getLogger(__name__)


def _to_read_model(report: Report) -> ReportRead:
    return ReportRead.model_validate(report)


def _internal_error(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


@router.post("/", response_model=ReportResponse, status_code=status.HTTP_201_CREATED)
def submit_report(
    report_in: ReportCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> ReportResponse:
    """File a report against a thread, a response or a user profile."""

    try:
        report = create_report_uc(
            db,
            reporter_user_id=current_user.id,
            entity_type=report_in.entity_type,
            entity_id=report_in.entity_id,
            reason=report_in.reason,
            details=report_in.details,
        )
    except ForumError as exc:
        raise http_error_for(exc) from exc
    except SQLAlchemyError as exc:
        logger.exception("Could not submit report for user %s", current_user.id)
        raise _internal_error("Could not submit report") from exc
    return ReportResponse(report=_to_read_model(report))


@router.get("/", response_model=ReportListResponse)
def list_reports(
    status_filter: str = Query("open", alias="status"),
    entity_type: str | None = Query(None),
    limit: str | None = Query(None),
    db: Session = Depends(get_db),
    _: User = Depends(require_moderator),
) -> ReportListResponse:
    """Return the moderation queue together with global counts by status."""

    try:
        listing = list_reports_uc(
            db, status=status_filter, entity_type=entity_type, limit=limit
        )
    except ForumError as exc:
        raise http_error_for(exc) from exc
    except SQLAlchemyError as exc:
        logger.exception("Could not load reports")
        raise _internal_error("Could not load reports") from exc
    return ReportListResponse.model_validate(listing)


@router.post("/{report_id}/review", response_model=ReportResponse)
def review_report(
    report_id: int,
    review_in: ReportReviewRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_moderator),
) -> ReportResponse:
    """Resolve, dismiss or reopen a report."""

    try:
        report = review_report_uc(
            db,
            report_id=report_id,
            status=review_in.status,
            moderator_id=current_user.id,
            moderator_note=review_in.moderator_note,
        )
    except ForumError as exc:
        raise http_error_for(exc) from exc
    except SQLAlchemyError as exc:
        logger.exception("Could not review report %s", report_id)
        raise _internal_error("Could not review report") from exc
    return ReportResponse(report=_to_read_model(report))


__all__ = ["router"]
