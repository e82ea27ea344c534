"""SQLAlchemy model for content reports filed by members."""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, Text, text

from forum.infrastructure.database import Base
from forum.utils import now_in_app_naive_datetime

_OPEN_ONLY = text("status = 'open'")


class ContentReportModel(Base):
    """Database representation of a report and its latest review."""

    __tablename__ = "content_reports"

    id = Column(Integer, primary_key=True, index=True)
    reporter_user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    entity_type = Column(String(20), nullable=False)
    entity_id = Column(Integer, nullable=False)
    thread_id = Column(Integer, nullable=True, index=True)
    target_snapshot = Column(String(280), nullable=True)
    reason = Column(String(140), nullable=False)
    details = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default="open", index=True)
    moderator_note = Column(String(500), nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    reviewed_at = Column(DateTime, nullable=True)
    reviewed_by_user_id = Column(
        Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )

    __table_args__ = (
        # One open report per reporter and target; closed reports do not count.
        # Needs a filtered index, see SUPPORTED_BACKENDS in database.py.
        Index(
            "uq_content_reports_open_target",
            "reporter_user_id",
            "entity_type",
            "entity_id",
            unique=True,
            sqlite_where=_OPEN_ONLY,
            postgresql_where=_OPEN_ONLY,
            mssql_where=_OPEN_ONLY,
        ),
    )


__all__ = ["ContentReportModel"]
