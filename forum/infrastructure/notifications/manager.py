"""Registry of open notification websockets, keyed by recipient user id."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
import logging
from typing import Any

from fastapi import WebSocket

logger = logging.getLogger(__name__)


class NotificationConnectionManager:
    """Track each user's sockets and push notification payloads to them.

    A user may have several tabs open; every registered socket receives every
    push. Sockets that fail a send are dropped from the registry.
    """

    def __init__(self) -> None:
        self._sockets: defaultdict[int, set[WebSocket]] = defaultdict(set)

    async def connect(
        self,
        user_id: int,
        websocket: WebSocket,
        *,
        backlog: Iterable[dict[str, Any]] = (),
    ) -> None:
        """Accept ``websocket`` for ``user_id`` and replay unread notifications.

        ``backlog`` holds serialized notifications the user has not read yet;
        when non-empty they are sent as a single ``init`` frame before the
        socket starts receiving live pushes.
        """

        await websocket.accept()
        pending = list(backlog)
        if pending:
            await websocket.send_json({"type": "init", "data": pending})
        self._sockets[user_id].add(websocket)

    def disconnect(self, user_id: int, websocket: WebSocket) -> None:
        sockets = self._sockets.get(user_id)
        if sockets is None:
            return
        sockets.discard(websocket)
        if not sockets:
            del self._sockets[user_id]

    def connection_count(self, user_id: int) -> int:
        return len(self._sockets.get(user_id, ()))

    async def send_to_user(self, user_id: int, message: dict[str, Any]) -> int:
        """Push ``message`` to every socket of ``user_id``.

        Returns the number of sockets that accepted the frame.
        """

        delivered = 0
        for websocket in list(self._sockets.get(user_id, ())):
            try:
                await websocket.send_json(message)
            except Exception:  # noqa: BLE001 - one dead tab must not block the rest
                logger.debug("Dropping notification socket for user %s", user_id)
                self.disconnect(user_id, websocket)
            else:
                delivered += 1
        return delivered


notification_manager = NotificationConnectionManager()


__all__ = ["NotificationConnectionManager", "notification_manager"]
