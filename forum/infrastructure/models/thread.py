"""SQLAlchemy models for threads and their responses.

Both tables are owned by the thread service; this package only reads them to
validate report targets.
"""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text

from forum.infrastructure.database import Base
from forum.utils import now_in_app_naive_datetime


class ThreadModel(Base):
    """Database representation of a discussion thread."""

    __tablename__ = "threads"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


class ThreadResponseModel(Base):
    """Database representation of a reply posted in a thread."""

    __tablename__ = "thread_responses"

    id = Column(Integer, primary_key=True, index=True)
    thread_id = Column(
        Integer, ForeignKey("threads.id", ondelete="CASCADE"), nullable=False, index=True
    )
    body = Column(Text, nullable=False)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


__all__ = ["ThreadModel", "ThreadResponseModel"]
