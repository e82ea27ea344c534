"""Integration tests for the notification endpoints."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

from forum.application.use_cases.notifications import create_notification, notify_mentions


@pytest.fixture()
def client():
    from main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client


def test_inbox_and_unread_badge(client, session, make_user, auth_headers) -> None:
    alice_id = make_user("alice", name="Alice")
    bob_id = make_user("bob")
    notify_mentions(
        session,
        text="@bob have a look",
        actor_user_id=alice_id,
        actor_name="Alice",
        entity_type="thread",
        entity_id=1,
        thread_id=1,
    )
    create_notification(
        session, user_id=bob_id, notification_type="direct_message", message="New message"
    )
    headers = auth_headers(bob_id)

    inbox = client.get("/notifications/", headers=headers)
    assert inbox.status_code == 200
    data = inbox.json()
    assert [n["type"] for n in data["notifications"]] == ["direct_message", "mention"]
    assert data["notifications"][1]["message"] == "Alice mentioned you in a post"
    assert data["unread_count"] == 1

    assert client.get("/notifications/unread-count", headers=headers).json() == {"unread_count": 1}
    assert client.get(
        "/notifications/unread-count",
        params={"include_direct_messages": "true"},
        headers=headers,
    ).json() == {"unread_count": 2}


def test_mark_read_endpoints(client, session, make_user, auth_headers) -> None:
    bob_id = make_user("bob")
    eve_id = make_user("eve")
    first = create_notification(session, user_id=bob_id, notification_type="follow", message="a")
    create_notification(session, user_id=bob_id, notification_type="mention", message="b")

    assert (
        client.post(f"/notifications/{first}/read", headers=auth_headers(eve_id)).status_code
        == 404
    )

    marked = client.post(f"/notifications/{first}/read", headers=auth_headers(bob_id))
    assert marked.status_code == 200
    assert marked.json()["notification"]["read_at"] is not None

    read_all = client.post("/notifications/read-all", headers=auth_headers(bob_id))
    assert read_all.json() == {"updated": 1}

    unread = client.get(
        "/notifications/", params={"unread": "true"}, headers=auth_headers(bob_id)
    ).json()
    assert unread == {"notifications": [], "unread_count": 0}


def test_websocket_sends_pending_notifications(client, session, make_user, auth_headers) -> None:
    bob_id = make_user("bob")
    create_notification(session, user_id=bob_id, notification_type="mention", message="hello")
    token = auth_headers(bob_id)["Authorization"].split(" ", 1)[1]

    with client.websocket_connect(f"/notifications/ws?token={token}") as websocket:
        init = websocket.receive_json()
        assert init["type"] == "init"
        assert [item["message"] for item in init["data"]] == ["hello"]
        websocket.send_json({"type": "ping"})
        assert websocket.receive_json() == {"type": "pong"}
