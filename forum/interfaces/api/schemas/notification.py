"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from forum.domain.entities import NotificationType


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    actor_user_id: int | None = None
    type: NotificationType
    entity_type: str | None = None
    entity_id: int | None = None
    thread_id: int | None = None
    message: str
    created_at: datetime
    read_at: datetime | None = None


class NotificationListResponse(BaseModel):
    notifications: list[NotificationRead]
    unread_count: int


class NotificationResponse(BaseModel):
    notification: NotificationRead


class UnreadCountResponse(BaseModel):
    unread_count: int


class MarkAllReadResponse(BaseModel):
    """Number of notifications that switched from unread to read."""

    updated: int


__all__ = [
    "MarkAllReadResponse",
    "NotificationListResponse",
    "NotificationRead",
    "NotificationResponse",
    "UnreadCountResponse",
]
