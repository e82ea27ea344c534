"""Endpoints and websocket handler for user notifications."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, WebSocket, WebSocketDisconnect, status
from sqlalchemy.orm import Session

from forum.application.use_cases.notifications import (
    count_unread as count_unread_uc,
    list_notifications as list_notifications_uc,
    mark_all_notifications_read as mark_all_notifications_read_uc,
    mark_notification_read as mark_notification_read_uc,
)
from forum.domain.entities import Notification, User
from forum.domain.exceptions import ForumError
from forum.infrastructure.database import SessionLocal, get_db
from forum.infrastructure.notifications import notification_manager, serialize_notification
from forum.infrastructure.repositories import NotificationRepository
from forum.interfaces.api.dependencies import get_current_active_user, resolve_current_user
from forum.interfaces.api.routes_helpers import http_error_for
from forum.interfaces.api.schemas import (
    MarkAllReadResponse,
    NotificationListResponse,
    NotificationRead,
    NotificationResponse,
    UnreadCountResponse,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead.model_validate(notification)


@router.get("/", response_model=NotificationListResponse)
def list_notifications(
    unread: bool = Query(False, description="Only return unread notifications"),
    limit: int = Query(50),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationListResponse:
    """Return the most recent notifications for the authenticated user."""

    inbox = list_notifications_uc(db, current_user.id, unread_only=unread, limit=limit)
    return NotificationListResponse(
        notifications=[_notification_to_schema(n) for n in inbox.notifications],
        unread_count=inbox.unread_count,
    )


@router.get("/unread-count", response_model=UnreadCountResponse)
def read_unread_count(
    include_direct_messages: bool = Query(False),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> UnreadCountResponse:
    """Return the unread badge count for the authenticated user."""

    return UnreadCountResponse(
        unread_count=count_unread_uc(
            db, current_user.id, include_direct_messages=include_direct_messages
        )
    )


@router.post("/read-all", response_model=MarkAllReadResponse)
def mark_all_read(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> MarkAllReadResponse:
    return MarkAllReadResponse(updated=mark_all_notifications_read_uc(db, current_user.id))


@router.post("/{notification_id}/read", response_model=NotificationResponse)
def mark_read(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationResponse:
    """Mark one of the authenticated user's notifications as read."""

    try:
        notification = mark_notification_read_uc(
            db, user_id=current_user.id, notification_id=notification_id
        )
    except ForumError as exc:
        raise http_error_for(exc) from exc
    return NotificationResponse(notification=_notification_to_schema(notification))


@router.websocket("/ws")
async def notifications_websocket(websocket: WebSocket) -> None:
    """Websocket endpoint that streams notifications to the authenticated user."""

    token = websocket.query_params.get("token")
    if not token:
        await websocket.close(code=1008)
        return

    session = SessionLocal()
    try:
        user = resolve_current_user(token, session)
        if not user.is_active:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Inactive user")
        pending_notifications = NotificationRepository(session).list_for_user(
            user.id, unread_only=True
        )
    except HTTPException:
        await websocket.close(code=1008)
        return
    finally:
        session.close()

    try:
        await notification_manager.connect(
            user.id,
            websocket,
            backlog=[serialize_notification(n) for n in pending_notifications],
        )
        while True:
            try:
                message = await websocket.receive_json()
            except ValueError:
                continue
            if isinstance(message, dict) and message.get("type") == "ping":
                await websocket.send_json({"type": "pong"})
    except WebSocketDisconnect:
        notification_manager.disconnect(user.id, websocket)
    except Exception:
        notification_manager.disconnect(user.id, websocket)
        raise


__all__ = ["router"]
