"""Persistence layer for content reports."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import and_, case, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Query, Session, aliased

from forum.domain.entities import Report, ReportEntityType, ReportStatus, ReportSummary
from forum.domain.exceptions import ConflictError
from forum.infrastructure.models import (
    ContentReportModel,
    ThreadModel,
    ThreadResponseModel,
    UserModel,
)
from forum.utils import ensure_app_naive_datetime, ensure_app_timezone, now_in_app_timezone


class ContentReportRepository:
    """Provide persistence operations for :class:`Report` entities.

    Reads join the reporter, reviewer and live target rows so callers get the
    display fields alongside the stored report.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, report: Report) -> Report:
        """Insert ``report`` and return it with its display fields.

        Raises :class:`ConflictError` when the reporter already has an open
        report against the same target.
        """

        model = ContentReportModel(
            reporter_user_id=report.reporter_user_id,
            entity_type=ReportEntityType(report.entity_type).value,
            entity_id=report.entity_id,
            thread_id=report.thread_id,
            target_snapshot=report.target_snapshot,
            reason=report.reason,
            details=report.details,
            status=ReportStatus(report.status).value,
            created_at=(
                ensure_app_naive_datetime(report.created_at)
                or ensure_app_naive_datetime(now_in_app_timezone())
            ),
        )
        self.session.add(model)
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            self._raise_if_duplicate_open(exc)
            raise
        created = self.get(model.id)
        if created is None:  # pragma: no cover - row was just inserted
            msg = f"Report with id {model.id} vanished after insert"
            raise RuntimeError(msg)
        return created

    def get(self, report_id: int) -> Report | None:
        row = self._display_query().filter(ContentReportModel.id == report_id).first()
        return self._row_to_entity(row) if row else None

    def list(
        self,
        *,
        status: ReportStatus | None = None,
        entity_type: ReportEntityType | None = None,
        limit: int = 120,
    ) -> Sequence[Report]:
        """Return reports with open ones first, newest first within each group."""

        query = self._display_query()
        if status is not None:
            query = query.filter(ContentReportModel.status == status.value)
        if entity_type is not None:
            query = query.filter(ContentReportModel.entity_type == entity_type.value)
        query = query.order_by(
            case((ContentReportModel.status == ReportStatus.OPEN.value, 0), else_=1),
            ContentReportModel.created_at.desc(),
            ContentReportModel.id.desc(),
        ).limit(limit)
        return [self._row_to_entity(row) for row in query.all()]

    def summarize(self) -> ReportSummary:
        """Count every report by status, ignoring any list filter."""

        rows = (
            self.session.query(ContentReportModel.status, func.count(ContentReportModel.id))
            .group_by(ContentReportModel.status)
            .all()
        )
        summary = ReportSummary()
        for status, count in rows:
            count = int(count or 0)
            if status in {member.value for member in ReportStatus}:
                setattr(summary, status, count)
            summary.total += count
        return summary

    def reopen(self, report_id: int) -> bool:
        """Move a report back to ``open`` and erase its review trail.

        Raises :class:`ConflictError` when the reporter has filed another open
        report against the same target in the meantime.
        """

        return self._update(
            report_id,
            {
                ContentReportModel.status: ReportStatus.OPEN.value,
                ContentReportModel.reviewed_by_user_id: None,
                ContentReportModel.reviewed_at: None,
                ContentReportModel.moderator_note: None,
            },
        )

    def close(
        self,
        report_id: int,
        *,
        status: ReportStatus,
        reviewed_by_user_id: int,
        reviewed_at: datetime,
        moderator_note: str | None,
    ) -> bool:
        """Resolve or dismiss a report, replacing any previous review trail."""

        return self._update(
            report_id,
            {
                ContentReportModel.status: status.value,
                ContentReportModel.reviewed_by_user_id: reviewed_by_user_id,
                ContentReportModel.reviewed_at: ensure_app_naive_datetime(reviewed_at),
                ContentReportModel.moderator_note: moderator_note,
            },
        )

    def _update(self, report_id: int, values: dict) -> bool:
        try:
            updated = (
                self.session.query(ContentReportModel)
                .filter(ContentReportModel.id == report_id)
                .update(values, synchronize_session=False)
            )
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            self._raise_if_duplicate_open(exc)
            raise
        return bool(updated)

    @staticmethod
    def _raise_if_duplicate_open(exc: IntegrityError) -> None:
        if "unique" in str(exc.orig).lower():
            raise ConflictError(
                "The reporter already has an open report for this content"
            ) from exc

    def _display_query(self) -> Query:
        reporter = aliased(UserModel)
        reviewer = aliased(UserModel)
        target_user = aliased(UserModel)
        return (
            self.session.query(
                ContentReportModel,
                reporter.name.label("reporter_name"),
                reporter.handle.label("reporter_handle"),
                reviewer.name.label("reviewed_by_name"),
                ThreadModel.title.label("thread_title"),
                ThreadResponseModel.body.label("response_body"),
                target_user.name.label("target_user_name"),
                target_user.handle.label("target_user_handle"),
            )
            .outerjoin(reporter, reporter.id == ContentReportModel.reporter_user_id)
            .outerjoin(reviewer, reviewer.id == ContentReportModel.reviewed_by_user_id)
            .outerjoin(ThreadModel, ThreadModel.id == ContentReportModel.thread_id)
            .outerjoin(
                ThreadResponseModel,
                and_(
                    ContentReportModel.entity_type == ReportEntityType.RESPONSE.value,
                    ThreadResponseModel.id == ContentReportModel.entity_id,
                ),
            )
            .outerjoin(
                target_user,
                and_(
                    ContentReportModel.entity_type == ReportEntityType.USER.value,
                    target_user.id == ContentReportModel.entity_id,
                ),
            )
        )

    @staticmethod
    def _row_to_entity(row) -> Report:
        (
            model,
            reporter_name,
            reporter_handle,
            reviewed_by_name,
            thread_title,
            response_body,
            target_user_name,
            target_user_handle,
        ) = row
        return Report(
            id=model.id,
            reporter_user_id=model.reporter_user_id,
            entity_type=ReportEntityType(model.entity_type),
            entity_id=model.entity_id,
            reason=model.reason,
            status=ReportStatus(model.status),
            thread_id=model.thread_id,
            target_snapshot=model.target_snapshot,
            details=model.details,
            moderator_note=model.moderator_note,
            created_at=ensure_app_timezone(model.created_at),
            reviewed_at=ensure_app_timezone(model.reviewed_at),
            reviewed_by_user_id=model.reviewed_by_user_id,
            reporter_name=reporter_name,
            reporter_handle=reporter_handle,
            reviewed_by_name=reviewed_by_name,
            thread_title=thread_title,
            response_body=response_body,
            target_user_name=target_user_name,
            target_user_handle=target_user_handle,
        )


__all__ = ["ContentReportRepository"]
