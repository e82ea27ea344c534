"""Use case for the moderation queue."""

from typing import Any

from sqlalchemy.orm import Session

from forum.domain.entities import ReportListing
from forum.infrastructure.repositories import ContentReportRepository

from .validators import clamp_list_limit, parse_entity_type_filter, parse_status_filter


def list_reports(
    session: Session,
    *,
    status: Any = "open",
    entity_type: Any = None,
    limit: Any = None,
) -> ReportListing:
    """Return a page of reports and the global counts by status.

    ``status`` accepts ``open`` (default), ``resolved``, ``dismissed`` or
    ``all``. Open reports always come first, then newest first. The summary
    counts every report regardless of the filters and the page size.
    """

    status_filter = parse_status_filter(status)
    entity_type_filter = parse_entity_type_filter(entity_type)
    page_size = clamp_list_limit(limit)

    repository = ContentReportRepository(session)
    reports = repository.list(
        status=status_filter, entity_type=entity_type_filter, limit=page_size
    )
    return ReportListing(reports=list(reports), summary=repository.summarize())


__all__ = ["list_reports"]
