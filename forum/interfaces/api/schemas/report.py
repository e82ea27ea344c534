"""Pydantic models for the report endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from forum.domain.entities import ReportEntityType, ReportStatus


class ReportCreate(BaseModel):
    """Payload submitted by a member reporting content.

    Fields are validated by the use case so every malformed value is answered
    with the same 400 error shape.
    """

    entity_type: str | None = Field(default=None, description="thread, response or user")
    entity_id: int | str | None = Field(
        default=None, description="Identifier of the reported item"
    )
    reason: str | None = Field(default=None, description="Short reason, 140 characters max")
    details: str | None = Field(default=None, description="Optional details, 1000 characters max")


class ReportReviewRequest(BaseModel):
    status: str | None = Field(default=None, description="open, resolved or dismissed")
    moderator_note: str | None = Field(default=None, description="500 characters max")


class ReportRead(BaseModel):
    """Report as shown in the moderation queue."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    reporter_user_id: int
    reporter_name: str | None = None
    reporter_handle: str | None = None
    entity_type: ReportEntityType
    entity_id: int
    thread_id: int | None = None
    target_snapshot: str | None = None
    reason: str
    details: str | None = None
    status: ReportStatus
    moderator_note: str | None = None
    created_at: datetime
    reviewed_at: datetime | None = None
    reviewed_by_user_id: int | None = None
    reviewed_by_name: str | None = None
    thread_title: str | None = None
    response_body: str | None = None
    target_user_name: str | None = None
    target_user_handle: str | None = None


class ReportSummaryRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    open: int
    resolved: int
    dismissed: int
    total: int


class ReportResponse(BaseModel):
    report: ReportRead


class ReportListResponse(BaseModel):
    """Filtered page of reports with the global summary."""

    model_config = ConfigDict(from_attributes=True)

    reports: list[ReportRead]
    summary: ReportSummaryRead


__all__ = [
    "ReportCreate",
    "ReportListResponse",
    "ReportRead",
    "ReportResponse",
    "ReportReviewRequest",
    "ReportSummaryRead",
]
