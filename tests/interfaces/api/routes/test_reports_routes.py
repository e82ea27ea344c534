"""Integration tests for the report endpoints."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient


@pytest.fixture()
def client():
    from main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture()
def people(make_user) -> dict[str, int]:
    return {
        "member": make_user("rita", name="Rita"),
        "moderator": make_user("mo", name="Mo", role="moderator"),
        "admin": make_user("ada", name="Ada", role="admin"),
    }


def test_report_lifecycle_over_http(client, people, make_thread, auth_headers) -> None:
    thread_id = make_thread("Buy cheap watches")
    member = auth_headers(people["member"])
    moderator = auth_headers(people["moderator"])

    created = client.post(
        "/reports/",
        json={"entity_type": "thread", "entity_id": thread_id, "reason": "Spam"},
        headers=member,
    )
    assert created.status_code == 201
    report = created.json()["report"]
    assert report["status"] == "open"
    assert report["thread_id"] == thread_id
    assert report["thread_title"] == "Buy cheap watches"
    assert report["reporter_handle"] == "rita"

    duplicate = client.post(
        "/reports/",
        json={"entity_type": "thread", "entity_id": thread_id, "reason": "Spam again"},
        headers=member,
    )
    assert duplicate.status_code == 409

    resolved = client.post(
        f"/reports/{report['id']}/review",
        json={"status": "resolved", "moderator_note": "Links removed"},
        headers=moderator,
    )
    assert resolved.status_code == 200
    body = resolved.json()["report"]
    assert body["status"] == "resolved"
    assert body["moderator_note"] == "Links removed"
    assert body["reviewed_by_user_id"] == people["moderator"]
    assert body["reviewed_by_name"] == "Mo"
    assert body["reviewed_at"] is not None

    reopened = client.post(
        f"/reports/{report['id']}/review", json={"status": "open"}, headers=moderator
    )
    assert reopened.status_code == 200
    body = reopened.json()["report"]
    assert body["moderator_note"] is None
    assert body["reviewed_at"] is None
    assert body["reviewed_by_user_id"] is None


@pytest.mark.parametrize(
    ("payload", "expected_status"),
    [
        ({"entity_type": "comment", "entity_id": 1, "reason": "Spam"}, 400),
        ({"entity_type": "thread", "entity_id": "abc", "reason": "Spam"}, 400),
        ({"entity_type": "thread", "entity_id": 1}, 400),
        ({"entity_type": "thread", "entity_id": 999, "reason": "Spam"}, 404),
    ],
)
def test_report_submission_errors(client, people, auth_headers, payload, expected_status) -> None:
    response = client.post("/reports/", json=payload, headers=auth_headers(people["member"]))

    assert response.status_code == expected_status
    assert response.json()["detail"]


def test_self_report_is_rejected(client, people, auth_headers) -> None:
    response = client.post(
        "/reports/",
        json={"entity_type": "user", "entity_id": people["member"], "reason": "Me"},
        headers=auth_headers(people["member"]),
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "You cannot report your own profile"


def test_moderation_routes_require_moderator(client, people, auth_headers) -> None:
    member = auth_headers(people["member"])

    assert client.get("/reports/", headers=member).status_code == 403
    assert (
        client.post("/reports/1/review", json={"status": "resolved"}, headers=member).status_code
        == 403
    )


def test_routes_require_a_valid_token(client) -> None:
    assert client.get("/reports/").status_code == 401
    assert (
        client.get("/reports/", headers={"Authorization": "Bearer not-a-token"}).status_code
        == 401
    )


def test_listing_returns_global_summary(client, people, make_thread, auth_headers) -> None:
    member = auth_headers(people["member"])
    admin = auth_headers(people["admin"])
    report_ids = []
    for title in ("one", "two", "three"):
        response = client.post(
            "/reports/",
            json={"entity_type": "thread", "entity_id": make_thread(title), "reason": "Spam"},
            headers=member,
        )
        report_ids.append(response.json()["report"]["id"])
    client.post(f"/reports/{report_ids[0]}/review", json={"status": "dismissed"}, headers=admin)

    listing = client.get("/reports/", params={"status": "all", "limit": 2}, headers=admin)

    assert listing.status_code == 200
    data = listing.json()
    assert [report["id"] for report in data["reports"]] == [report_ids[2], report_ids[1]]
    assert data["summary"] == {"open": 2, "resolved": 0, "dismissed": 1, "total": 3}

    dismissed = client.get("/reports/", params={"status": "dismissed"}, headers=admin).json()
    assert [report["id"] for report in dismissed["reports"]] == [report_ids[0]]
    assert dismissed["summary"]["total"] == 3


@pytest.mark.parametrize("limit", ["ten", "2.5", ""])
def test_listing_with_non_integer_limit_uses_default_page(
    client, people, make_thread, auth_headers, limit
) -> None:
    member = auth_headers(people["member"])
    moderator = auth_headers(people["moderator"])
    for title in ("one", "two", "three"):
        client.post(
            "/reports/",
            json={"entity_type": "thread", "entity_id": make_thread(title), "reason": "Spam"},
            headers=member,
        )

    listing = client.get("/reports/", params={"limit": limit}, headers=moderator)

    assert listing.status_code == 200
    assert len(listing.json()["reports"]) == 3


def test_listing_rejects_bad_filters(client, people, auth_headers) -> None:
    moderator = auth_headers(people["moderator"])

    assert client.get("/reports/", params={"status": "pending"}, headers=moderator).status_code == 400
    assert (
        client.get("/reports/", params={"entity_type": "comment"}, headers=moderator).status_code
        == 400
    )


def test_review_errors(client, people, auth_headers) -> None:
    moderator = auth_headers(people["moderator"])

    assert (
        client.post("/reports/42/review", json={"status": "resolved"}, headers=moderator).status_code
        == 404
    )
    assert (
        client.post("/reports/42/review", json={"status": "closed"}, headers=moderator).status_code
        == 400
    )
