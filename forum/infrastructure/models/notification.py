"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String

from forum.infrastructure.database import Base
from forum.utils import now_in_app_naive_datetime


class NotificationModel(Base):
    """Database representation for user notifications."""

    __tablename__ = "notifications"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    actor_user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    type = Column(String(32), nullable=False)
    entity_type = Column(String(32), nullable=True)
    entity_id = Column(Integer, nullable=True)
    thread_id = Column(Integer, nullable=True)
    message = Column(String(280), nullable=False)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    read_at = Column(DateTime(), nullable=True)

    __table_args__ = (Index("ix_notifications_user_unread", "user_id", "read_at"),)


__all__ = ["NotificationModel"]
