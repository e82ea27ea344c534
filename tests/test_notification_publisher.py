"""Tests for realtime notification delivery."""

import asyncio
from datetime import datetime, timezone
import importlib

import anyio
import anyio.to_thread

from forum.domain.entities import Notification, NotificationType
from forum.infrastructure.notifications import (
    NotificationConnectionManager,
    NotificationPublisher,
    serialize_notification,
)

publisher_module = importlib.import_module("forum.infrastructure.notifications.publisher")


class FakeWebSocket:
    def __init__(self, *, broken: bool = False) -> None:
        self.accepted = False
        self.sent: list[dict] = []
        self.broken = broken

    async def accept(self) -> None:
        self.accepted = True

    async def send_json(self, message: dict) -> None:
        if self.broken:
            raise RuntimeError("connection reset")
        self.sent.append(message)


def _notification() -> Notification:
    return Notification(
        id=7,
        user_id=3,
        type=NotificationType.MENTION,
        message="Alice mentioned you in a post",
        actor_user_id=1,
        entity_type="thread",
        entity_id=9,
        thread_id=9,
        created_at=datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
    )


def test_dispatch_inside_event_loop_reaches_open_sockets() -> None:
    manager = NotificationConnectionManager()
    publisher = NotificationPublisher(manager)
    healthy = FakeWebSocket()
    broken = FakeWebSocket(broken=True)

    async def scenario() -> None:
        await manager.connect(3, healthy)
        await manager.connect(3, broken)
        publisher.dispatch(_notification())
        await asyncio.sleep(0)
        await asyncio.sleep(0)

    asyncio.run(scenario())

    assert healthy.accepted
    assert healthy.sent == [
        {
            "type": "notification",
            "data": {
                "id": 7,
                "user_id": 3,
                "actor_user_id": 1,
                "type": "mention",
                "entity_type": "thread",
                "entity_id": 9,
                "thread_id": 9,
                "message": "Alice mentioned you in a post",
                "created_at": "2024-05-01T12:00:00+00:00",
                "read_at": None,
            },
        }
    ]
    assert manager.connection_count(3) == 1


def test_dispatch_without_event_loop_is_skipped() -> None:
    manager = NotificationConnectionManager()
    publisher = NotificationPublisher(manager)

    publisher.dispatch(_notification())

    assert manager.connection_count(3) == 0


def test_disconnect_forgets_user_without_sockets() -> None:
    manager = NotificationConnectionManager()
    socket = FakeWebSocket()

    asyncio.run(manager.connect(5, socket))
    manager.disconnect(5, socket)
    manager.disconnect(5, socket)

    assert manager.connection_count(5) == 0


def test_pending_delivery_is_held_until_it_finishes() -> None:
    manager = NotificationConnectionManager()
    publisher = NotificationPublisher(manager)
    socket = FakeWebSocket()
    held: list[int] = []

    async def scenario() -> None:
        await manager.connect(3, socket)
        publisher.dispatch(_notification())
        held.append(len(publisher_module._pending_deliveries))
        for _ in range(3):
            await asyncio.sleep(0)
        held.append(len(publisher_module._pending_deliveries))

    asyncio.run(scenario())

    assert held == [1, 0]
    assert [frame["data"]["id"] for frame in socket.sent] == [7]


def test_dispatch_from_worker_thread_is_handed_to_the_loop() -> None:
    manager = NotificationConnectionManager()
    publisher = NotificationPublisher(manager)
    socket = FakeWebSocket()

    async def scenario() -> None:
        await manager.connect(3, socket)
        await anyio.to_thread.run_sync(publisher.dispatch, _notification())
        for _ in range(3):
            await anyio.sleep(0)

    anyio.run(scenario)

    assert [frame["type"] for frame in socket.sent] == ["notification"]


def test_connect_replays_backlog_before_live_pushes() -> None:
    manager = NotificationConnectionManager()
    socket = FakeWebSocket()
    backlog = [serialize_notification(_notification())]

    async def scenario() -> int:
        await manager.connect(3, socket, backlog=backlog)
        return await manager.send_to_user(3, {"type": "notification", "data": {"id": 8}})

    delivered = asyncio.run(scenario())

    assert delivered == 1
    assert [frame["type"] for frame in socket.sent] == ["init", "notification"]
    assert socket.sent[0]["data"][0]["message"] == "Alice mentioned you in a post"


def test_connect_without_backlog_sends_nothing() -> None:
    manager = NotificationConnectionManager()
    socket = FakeWebSocket()

    asyncio.run(manager.connect(3, socket))

    assert socket.accepted
    assert socket.sent == []
    assert manager.connection_count(3) == 1
