"""Unit tests for domain primitives and errors.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from dataclasses import FrozenInstanceError
from datetime import datetime, timezone

import pytest

from events.domain import Event, Player, Record, Team
from events.domain.errors import (
    CancellationWindowError,
    ConflictError,
    DomainError,
    ErrorCode,
    EventNotFoundError,
    InvalidEventIdError,
    TeamInUseError,
)


class TestRecord:
    """Tests for Record value object."""

    def test_record_defaults_to_no_games(self):
        record = Record()
        assert record.games_played == 0
        assert record.win_rate == 0.0

    def test_record_rejects_negative_wins(self):
        with pytest.raises(ValueError, match="Wins cannot be negative"):
            Record(wins=-1)

    def test_record_rejects_negative_losses(self):
        with pytest.raises(ValueError, match="Losses cannot be negative"):
            Record(losses=-1)

    def test_win_rate_is_rounded_percentage(self):
        assert Record(wins=2, losses=1).win_rate == 66.67
        assert Record(wins=5, losses=0).win_rate == 100.0

    def test_record_str_format(self):
        assert str(Record(wins=7, losses=3)) == "7-3"


class TestEntities:
    def test_event_defaults(self):
        event = Event(name="Cup", description="D", event_date=datetime(2025, 1, 1))
        assert event.id is None
        assert event.active is True
        assert event.canceled is False
        assert event.team_a is None and event.team_b is None

    def test_event_is_immutable(self):
        event = Event(name="Cup", description="D", event_date=datetime(2025, 1, 1))
        with pytest.raises(FrozenInstanceError):
            event.active = False

    def test_player_full_name(self):
        player = Player("Alice", "Anderson", "alice@example.com", 25, "Attacker")
        assert player.full_name == "Alice Anderson"

    def test_team_win_rate_comes_from_record(self):
        team = Team(
            name="Dragons",
            region="EU",
            founded_date=datetime(2015, 1, 1, tzinfo=timezone.utc),
            record=Record(wins=1, losses=3),
        )
        assert team.win_rate == 25.0
        assert team.players == ()


class TestErrors:
    def test_not_found_message_and_code(self):
        error = EventNotFoundError(12)
        assert error.message == "Event not found with ID: 12"
        assert error.code is ErrorCode.NOT_FOUND
        assert error.resource_id == 12
        assert str(error) == "NOT_FOUND: Event not found with ID: 12"

    def test_invalid_id_message(self):
        assert InvalidEventIdError().message == "Event ID must be positive"

    def test_cancellation_window_message(self):
        assert CancellationWindowError().message == (
            "You can't cancel an event less than 24 hours before it starts."
        )
        assert "48 hours" in CancellationWindowError(48).message

    def test_domain_errors_are_exceptions(self):
        with pytest.raises(DomainError):
            raise EventNotFoundError(1)

    def test_team_in_use_is_a_conflict(self):
        error = TeamInUseError(3)
        assert isinstance(error, ConflictError)
        assert error.code is ErrorCode.CONFLICT
        assert error.team_id == 3
        assert str(error) == "CONFLICT: Team is still scheduled in an event: 3"
