"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone

import pytest
from rest_framework.test import APIClient

from events.domain import Event, Player, Team
from events.services import FixedClock

FIXED_NOW = datetime(2025, 6, 19, 10, 0, tzinfo=timezone.utc)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(FIXED_NOW)


@pytest.fixture
def dragons() -> Team:
    return Team(
        id=1,
        name="Dragons",
        region="EU",
        founded_date=datetime(2015, 1, 1, tzinfo=timezone.utc),
        players=(
            Player("Alice", "Anderson", "alice@example.com", 25, "Attacker"),
            Player("Bob", "Brown", "bob@example.com", 28, "Defender"),
        ),
    )


@pytest.fixture
def phoenix() -> Team:
    return Team(
        id=2,
        name="Phoenix",
        region="EU",
        founded_date=datetime(2016, 1, 1, tzinfo=timezone.utc),
        players=(
            Player("Charlie", "Clark", "charlie@example.com", 27, "Midfielder"),
            Player("Dave", "Dixon", "dave@example.com", 30, "Goalkeeper"),
        ),
    )


@pytest.fixture
def sample_event() -> Event:
    return Event(
        id=1,
        name="Summer Cup",
        description="Opening match",
        event_date=datetime(2025, 7, 1, 20, 0, tzinfo=timezone.utc),
    )
