"""Domain entities describing content reports and their review trail."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

REPORT_REASON_MAX_LENGTH = 140
REPORT_DETAILS_MAX_LENGTH = 1000
REPORT_MODERATOR_NOTE_MAX_LENGTH = 500
REPORT_SNAPSHOT_MAX_LENGTH = 280


class ReportEntityType(str, Enum):
    """Kinds of content that can be reported."""

    THREAD = "thread"
    RESPONSE = "response"
    USER = "user"


class ReportStatus(str, Enum):
    """Review states of a report.

    Every state can move to every other one; ``open`` is the initial state.
    """

    OPEN = "open"
    RESOLVED = "resolved"
    DISMISSED = "dismissed"


REPORT_STATUS_FILTER_ALL = "all"


@dataclass(frozen=True)
class ReportTarget:
    """Outcome of looking up the content a report points at."""

    exists: bool
    thread_id: int | None = None
    snapshot: str | None = None


@dataclass
class Report:
    """A member's complaint about a thread, response or user profile.

    ``thread_id`` and ``target_snapshot`` are captured when the report is
    filed and are never recomputed. The remaining display fields are joined
    from live rows when the report is read and may be ``None`` once the
    target has been deleted.
    """

    id: int | None
    reporter_user_id: int
    entity_type: ReportEntityType
    entity_id: int
    reason: str
    status: ReportStatus = ReportStatus.OPEN
    thread_id: int | None = None
    target_snapshot: str | None = None
    details: str | None = None
    moderator_note: str | None = None
    created_at: datetime | None = None
    reviewed_at: datetime | None = None
    reviewed_by_user_id: int | None = None
    reporter_name: str | None = None
    reporter_handle: str | None = None
    reviewed_by_name: str | None = None
    thread_title: str | None = None
    response_body: str | None = None
    target_user_name: str | None = None
    target_user_handle: str | None = None


@dataclass
class ReportSummary:
    """Global report counts by status, independent of any list filter."""

    open: int = 0
    resolved: int = 0
    dismissed: int = 0
    total: int = 0


@dataclass
class ReportListing:
    """A filtered page of reports plus the global summary."""

    reports: list[Report] = field(default_factory=list)
    summary: ReportSummary = field(default_factory=ReportSummary)


__all__ = [
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
]
