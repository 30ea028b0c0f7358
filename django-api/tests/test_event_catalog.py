"""Integration tests for the events API.

These exercise handlers, services and the Django store end to end.
Run with: pytest tests/test_event_catalog.py -v
"""

from datetime import datetime, timedelta, timezone as dt_timezone

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from events import models


@pytest.fixture
def teams() -> tuple[models.Team, models.Team]:
    dragons = models.Team.objects.create(
        name="Dragons", region="EU", founded_date=datetime(2015, 1, 1, tzinfo=dt_timezone.utc)
    )
    phoenix = models.Team.objects.create(
        name="Phoenix", region="EU", founded_date=datetime(2016, 1, 1, tzinfo=dt_timezone.utc)
    )
    for first, last, team in [
        ("Alice", "Anderson", dragons),
        ("Bob", "Brown", dragons),
        ("Charlie", "Clark", phoenix),
        ("Dave", "Dixon", phoenix),
    ]:
        models.Player.objects.create(
            first_name=first,
            last_name=last,
            email=f"{first.lower()}@example.com",
            age=25,
            position="Attacker",
            team=team,
        )
    return dragons, phoenix


def create_event(name: str = "Summer Cup", days_ahead: int = 5, **fields) -> models.Event:
    return models.Event.objects.create(
        name=name,
        description="Opening match",
        event_date=timezone.now() + timedelta(days=days_ahead),
        **fields,
    )


@pytest.mark.django_db
class TestEventList:
    """Tests for GET/POST /api/events"""

    def test_list_events(self, api_client: APIClient):
        create_event("Later", days_ahead=9)
        create_event("Sooner", days_ahead=2)

        response = api_client.get("/api/events")

        assert response.status_code == 200
        assert [e["name"] for e in response.json()] == ["Sooner", "Later"]

    def test_list_events_empty_catalog(self, api_client: APIClient):
        response = api_client.get("/api/events")

        assert response.status_code == 200
        assert response.json() == []

    def test_create_event_with_teams(self, api_client: APIClient, teams):
        dragons, phoenix = teams
        payload = {
            "name": "Finals",
            "description": "Final match",
            "event_date": "2030-07-01T20:00:00Z",
            "team_a_id": dragons.pk,
            "team_b_id": phoenix.pk,
            "city": "Paris",
        }

        response = api_client.post("/api/events", payload, format="json")

        assert response.status_code == 201
        body = response.json()
        assert body["id"] is not None
        assert body["active"] is True
        assert body["canceled"] is False
        assert body["team_a"]["name"] == "Dragons"
        assert len(body["team_b"]["players"]) == 2
        assert models.Event.objects.filter(name="Finals").exists()

    def test_create_event_missing_name(self, api_client: APIClient):
        payload = {"description": "D", "event_date": "2030-07-01T20:00:00Z"}

        response = api_client.post("/api/events", payload, format="json")

        assert response.status_code == 400
        assert response.json() == {
            "error": "VALIDATION_FAILED",
            "message": "Event name is required",
        }

    def test_create_event_one_team(self, api_client: APIClient, teams):
        payload = {
            "name": "Friendly",
            "description": "D",
            "event_date": "2030-07-01T20:00:00Z",
            "team_a_id": teams[0].pk,
        }

        response = api_client.post("/api/events", payload, format="json")

        assert response.status_code == 400
        assert response.json()["message"] == "Both teamA and teamB are required"

    def test_create_event_duplicate_name(self, api_client: APIClient):
        create_event("Finals")
        payload = {"name": "Finals", "description": "D", "event_date": "2030-07-01T20:00:00Z"}

        response = api_client.post("/api/events", payload, format="json")

        assert response.status_code == 409
        assert response.json()["message"] == "Event name already exists: Finals"

    def test_create_event_name_too_long(self, api_client: APIClient):
        payload = {"name": "x" * 101, "description": "D", "event_date": "2030-07-01T20:00:00Z"}

        response = api_client.post("/api/events", payload, format="json")

        assert response.status_code == 400
        assert "name" in response.json()

    def test_create_event_unknown_team(self, api_client: APIClient):
        payload = {
            "name": "Finals",
            "description": "D",
            "event_date": "2030-07-01T20:00:00Z",
            "team_a_id": 998,
            "team_b_id": 999,
        }

        response = api_client.post("/api/events", payload, format="json")

        assert response.status_code == 404
        assert response.json()["message"] == "Team not found with ID: 998"


@pytest.mark.django_db
class TestEventDetail:
    """Tests for GET/PUT/DELETE /api/events/{id}"""

    def test_get_event_returns_details(self, api_client: APIClient):
        event = create_event(city="Lyon")

        response = api_client.get(f"/api/events/{event.pk}")

        assert response.status_code == 200
        assert response.json()["city"] == "Lyon"

    def test_get_event_not_found(self, api_client: APIClient):
        response = api_client.get("/api/events/424242")

        assert response.status_code == 404
        assert response.json()["message"] == "Event not found with ID: 424242"

    def test_get_event_zero_id(self, api_client: APIClient):
        response = api_client.get("/api/events/0")

        assert response.status_code == 400
        assert response.json()["message"] == "Event ID must be positive"

    def test_update_event_replaces_fields(self, api_client: APIClient):
        event = create_event(city="Lyon")
        payload = {"name": "Renamed", "description": "New", "event_date": "2030-01-01T12:00:00Z"}

        response = api_client.put(f"/api/events/{event.pk}", payload, format="json")

        assert response.status_code == 200
        event.refresh_from_db()
        assert event.name == "Renamed"
        assert event.city is None

    def test_update_event_not_found(self, api_client: APIClient):
        payload = {"name": "Renamed", "description": "New", "event_date": "2030-01-01T12:00:00Z"}

        response = api_client.put("/api/events/424242", payload, format="json")

        assert response.status_code == 404

    def test_update_missing_event_reports_event_before_teams(self, api_client: APIClient):
        payload = {
            "name": "Renamed",
            "description": "New",
            "event_date": "2030-01-01T12:00:00Z",
            "team_a_id": 999,
            "team_b_id": 998,
        }

        response = api_client.put("/api/events/424242", payload, format="json")

        assert response.status_code == 404
        assert response.json()["message"] == "Event not found with ID: 424242"

    def test_update_existing_event_with_unknown_team(self, api_client: APIClient, teams):
        event = create_event()
        payload = {
            "name": "Renamed",
            "description": "New",
            "event_date": "2030-01-01T12:00:00Z",
            "team_a_id": teams[0].pk,
            "team_b_id": 999,
        }

        response = api_client.put(f"/api/events/{event.pk}", payload, format="json")

        assert response.status_code == 404
        assert response.json()["message"] == "Team not found with ID: 999"

    def test_delete_event(self, api_client: APIClient):
        event = create_event()

        response = api_client.delete(f"/api/events/{event.pk}")

        assert response.status_code == 204
        assert not models.Event.objects.filter(pk=event.pk).exists()

    def test_delete_event_not_found(self, api_client: APIClient):
        response = api_client.delete("/api/events/424242")

        assert response.status_code == 404


@pytest.mark.django_db
class TestEventLifecycle:
    """Tests for cancellation, teaser and search endpoints"""

    def test_cancel_event(self, api_client: APIClient):
        event = create_event(days_ahead=3)

        response = api_client.post(f"/api/events/{event.pk}/cancel")

        assert response.status_code == 200
        event.refresh_from_db()
        assert event.canceled is True
        assert event.is_active is True

    def test_cancel_event_too_late(self, api_client: APIClient):
        event = models.Event.objects.create(
            name="Tonight",
            description="D",
            event_date=timezone.now() + timedelta(hours=2),
        )

        response = api_client.post(f"/api/events/{event.pk}/cancel")

        assert response.status_code == 400
        assert response.json()["error"] == "CANCELLATION_WINDOW"
        event.refresh_from_db()
        assert event.canceled is False

    def test_teaser(self, api_client: APIClient, teams):
        dragons, phoenix = teams
        event = models.Event.objects.create(
            name="Finals",
            description="D",
            event_date=datetime(2030, 7, 1, 20, 0, tzinfo=dt_timezone.utc),
            team_a=dragons,
            team_b=phoenix,
            city="Paris",
        )

        response = api_client.get(f"/api/events/{event.pk}/teaser")

        assert response.status_code == 200
        assert response.json()["teaser"] == (
            "Dragons vs Phoenix – 2030-07-01T20:00 at Paris. "
            "Players: Alice Anderson, Bob Brown vs Charlie Clark, Dave Dixon"
        )

    def test_search_upcoming_and_past(self, api_client: APIClient):
        create_event("Future", days_ahead=3)
        create_event("History", days_ahead=-3)

        upcoming = api_client.get("/api/events/search/upcoming").json()
        past = api_client.get("/api/events/search/past").json()

        assert [e["name"] for e in upcoming] == ["Future"]
        assert [e["name"] for e in past] == ["History"]

    def test_search_active(self, api_client: APIClient):
        create_event("Live")
        create_event("Archived", is_active=False)

        response = api_client.get("/api/events/search/active")

        assert [e["name"] for e in response.json()] == ["Live"]

    def test_search_today(self, api_client: APIClient):
        now = timezone.localtime(timezone.now())
        models.Event.objects.create(
            name="Noon match",
            description="D",
            event_date=now.replace(hour=12, minute=0, second=0, microsecond=0),
        )
        create_event("Next week", days_ahead=7)

        response = api_client.get("/api/events/search/today")

        assert [e["name"] for e in response.json()] == ["Noon match"]
