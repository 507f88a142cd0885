"""
# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# Created Date: Thu Oct 16 2025
# SPDX-License-Identifier: MIT
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from volunteer_hub.crud import crud_event
from volunteer_hub.db import models
from volunteer_hub.schemas import schemas
from tests.test_helpers import create_event, create_volunteer

EVENT_PAYLOAD = {
    "name": "Food Drive",
    "description": "Sorting donations at the community pantry.",
    "location": "Austin, TX",
    "skills": ["cooking"],
    "urgency": "High",
    "date": "2025-07-02",
}


@pytest.fixture(name="event_id")
def event_id_fixture(client: TestClient, admin_headers):
    response = client.post("/api/v1/events/", json=EVENT_PAYLOAD, headers=admin_headers)
    assert response.status_code == 201
    return response.json()["id"]


def test_create_event(client: TestClient, admin_headers):
    response = client.post("/api/v1/events/", json=EVENT_PAYLOAD, headers=admin_headers)

    assert response.status_code == 201
    body = response.json()
    assert body["name"] == "Food Drive"
    assert body["urgency"] == "high"
    assert body["skills"] == ["cooking"]


def test_create_event_requires_admin(client: TestClient, volunteer_and_headers):
    _, headers = volunteer_and_headers

    response = client.post("/api/v1/events/", json=EVENT_PAYLOAD, headers=headers)

    assert response.status_code == 403
    assert response.json()["detail"] == "unauthorized"


def test_create_event_rejects_unknown_skill(client: TestClient, admin_headers):
    payload = dict(EVENT_PAYLOAD, skills=["juggling"])

    response = client.post("/api/v1/events/", json=payload, headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["code"] == "invalid_skill"


def test_create_event_rejects_bad_date_and_urgency(client: TestClient, admin_headers):
    response = client.post("/api/v1/events/", json=dict(EVENT_PAYLOAD, date="soon"), headers=admin_headers)
    assert response.json()["code"] == "invalid_date"

    response = client.post("/api/v1/events/", json=dict(EVENT_PAYLOAD, urgency="urgent"), headers=admin_headers)
    assert response.status_code == 422


def test_read_events(client: TestClient, admin_headers, event_id):
    response = client.get("/api/v1/events/", headers=admin_headers)

    assert response.status_code == 200
    assert [e["id"] for e in response.json()] == [event_id]


def test_volunteer_can_read_single_event(client: TestClient, volunteer_and_headers, event_id):
    _, headers = volunteer_and_headers

    response = client.get(f"/api/v1/events/{event_id}", headers=headers)

    assert response.status_code == 200
    assert response.json()["location"] == "Austin, TX"


def test_read_missing_event(client: TestClient, admin_headers):
    response = client.get("/api/v1/events/missing", headers=admin_headers)
    assert response.status_code == 404
    assert response.json()["success"] is False
    assert response.json()["code"] == "event_not_found"


def test_delete_event_hides_it(client: TestClient, admin_headers, event_id):
    response = client.delete(f"/api/v1/events/{event_id}", headers=admin_headers)
    assert response.status_code == 204

    assert client.get(f"/api/v1/events/{event_id}", headers=admin_headers).status_code == 404
    assert client.get("/api/v1/events/", headers=admin_headers).json() == []
    response = client.delete(f"/api/v1/events/{event_id}", headers=admin_headers)
    assert response.status_code == 404
    assert response.json()["code"] == "event_not_found"


def test_check_matches(client: TestClient, admin_headers, volunteer_and_headers, event_id):
    volunteer, _ = volunteer_and_headers

    response = client.get(f"/api/v1/events/{event_id}/matches", headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == [
        {
            "volunteer_id": volunteer.id,
            "name": "Auth Test Volunteer",
            "skills": ["cooking"],
            "location": "Austin, TX",
        }
    ]


def test_check_matches_for_missing_event(client: TestClient, admin_headers):
    response = client.get("/api/v1/events/missing/matches", headers=admin_headers)

    assert response.status_code == 404
    assert response.json()["code"] == "event_not_found"


def test_assignment_flow(
    client: TestClient, db_session: Session, admin_headers, volunteer_and_headers, event_id, mock_email_service
):
    """
    Match, assign, and confirm the volunteer sees the event, the history
    entry and the notification.
    """
    volunteer, headers = volunteer_and_headers

    response = client.post(
        f"/api/v1/events/{event_id}/assign", json={"volunteer_id": volunteer.id}, headers=admin_headers
    )
    assert response.status_code == 200
    assert response.json() == {
        "success": True, "event_id": event_id, "volunteer_id": volunteer.id, "status": "Assigned"
    }

    assert client.get(f"/api/v1/events/{event_id}/matches", headers=admin_headers).json() == []

    events = client.get("/api/v1/profile/events", headers=headers).json()
    assert [e["id"] for e in events] == [event_id]

    history = client.get("/api/v1/history", headers=headers).json()
    assert len(history) == 1
    assert history[0]["event_name"] == "Food Drive"
    assert history[0]["status"] == "Assigned"

    notifications = client.get("/api/v1/notifications", headers=headers).json()
    assert notifications[0]["header"] == "New Event Assignment"
    assert notifications[0]["is_unread"] is True
    mock_email_service.send_notification_email.assert_called_once()

    response = client.post(f"/api/v1/notifications/{notifications[0]['id']}/read", headers=headers)
    assert response.status_code == 200
    assert response.json()["is_unread"] is False


def test_assigning_twice_returns_conflict(client: TestClient, admin_headers, volunteer_and_headers, event_id):
    volunteer, _ = volunteer_and_headers
    url = f"/api/v1/events/{event_id}/assign"
    assert client.post(url, json={"volunteer_id": volunteer.id}, headers=admin_headers).status_code == 200

    response = client.post(url, json={"volunteer_id": volunteer.id}, headers=admin_headers)

    assert response.status_code == 409
    assert response.json()["success"] is False
    assert response.json()["code"] == "already_assigned"


def test_assign_errors(client: TestClient, admin_headers, event_id):
    url = f"/api/v1/events/{event_id}/assign"

    response = client.post(url, json={}, headers=admin_headers)
    assert response.status_code == 400
    assert response.json()["code"] == "missing_volunteer"

    response = client.post(url, json={"volunteer_id": "ghost"}, headers=admin_headers)
    assert response.status_code == 404
    assert response.json()["code"] == "volunteer_not_found"

    response = client.post("/api/v1/events/ghost/assign", json={"volunteer_id": "ghost"}, headers=admin_headers)
    assert response.json()["code"] == "event_not_found"


def test_assign_requires_admin(client: TestClient, volunteer_and_headers, event_id):
    volunteer, headers = volunteer_and_headers

    response = client.post(
        f"/api/v1/events/{event_id}/assign", json={"volunteer_id": volunteer.id}, headers=headers
    )

    assert response.status_code == 403


def test_update_event_notifies_assigned_volunteers(
    client: TestClient, db_session: Session, admin_headers, volunteer_and_headers, event_id
):
    volunteer, _ = volunteer_and_headers
    bystander = create_volunteer(db_session, "bystander@example.com", city="Austin", state="TX")
    client.post(f"/api/v1/events/{event_id}/assign", json={"volunteer_id": volunteer.id}, headers=admin_headers)

    payload = dict(EVENT_PAYLOAD, location="Round Rock, TX", skills=["cooking", "transport"])
    response = client.put(f"/api/v1/events/{event_id}", json=payload, headers=admin_headers)

    assert response.status_code == 200
    assert sorted(response.json()["skills"]) == ["cooking", "transport"]
    headers = [
        n.header for n in db_session.query(models.Notification).filter_by(user_id=volunteer.id).all()
    ]
    assert "Event Updated" in headers
    assert db_session.query(models.Notification).filter_by(user_id=bystander.id).count() == 0


def test_update_missing_event(client: TestClient, admin_headers):
    response = client.put("/api/v1/events/missing", json=EVENT_PAYLOAD, headers=admin_headers)
    assert response.status_code == 404
    assert response.json()["code"] == "event_not_found"


def test_mark_missing_notification_read(client: TestClient, volunteer_and_headers):
    _, headers = volunteer_and_headers

    response = client.post("/api/v1/notifications/missing/read", headers=headers)

    assert response.status_code == 404
    assert response.json()["success"] is False
    assert response.json()["code"] == "notification_not_found"


def test_update_event_survives_a_failed_notification(db_session: Session):
    first = create_volunteer(db_session, "first@example.com", city="Austin", state="TX")
    second = create_volunteer(db_session, "second@example.com", city="Austin", state="TX")
    event = create_event(db_session)
    for volunteer in (first, second):
        db_session.add(models.EventAssignment(event_id=event.id, user_id=volunteer.id))
    db_session.commit()
    notification_service = MagicMock()
    notification_service.notify.side_effect = [OperationalError("INSERT", {}, Exception("locked")), None]

    updated = crud_event.update_event(
        db_session, event.id, schemas.EventCreate(**dict(EVENT_PAYLOAD, name="Food Drive II")), notification_service
    )

    assert updated.name == "Food Drive II"
    assert notification_service.notify.call_count == 2
    assert crud_event.get_event(db_session, event.id).name == "Food Drive II"
