"""SQLAlchemy model for the users table."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String

from forum.infrastructure.database import Base
from forum.utils import now_in_app_naive_datetime


class UserModel(Base):
    """Database representation of a forum member."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(80), nullable=False)
    handle = Column(String(20), nullable=False, unique=True, index=True)
    role = Column(String(20), nullable=False, default="member")
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


__all__ = ["UserModel"]
