"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores) and a clock
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from dataclasses import replace
from datetime import datetime, time, timedelta

from events.domain.errors import (
    CancellationWindowError,
    DuplicateEventNameError,
    EventNotFoundError,
    EventValidationError,
    InvalidEventIdError,
)
from events.domain.models import Event, Team
from events.services.clock import Clock, SystemClock
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)

DEFAULT_ARCHIVE_AFTER = timedelta(days=30)
DEFAULT_CANCELLATION_NOTICE = timedelta(hours=24)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class EventService:
    """Service for the event lifecycle: CRUD, archival, cancellation, teasers."""

    def __init__(
        self,
        store: EventStore,
        clock: Clock | None = None,
        archive_after: timedelta = DEFAULT_ARCHIVE_AFTER,
        cancellation_notice: timedelta = DEFAULT_CANCELLATION_NOTICE,
    ) -> None:
        self._store = store
        self._clock = clock or SystemClock()
        self._archive_after = archive_after
        self._cancellation_notice = cancellation_notice

    def validate_event(self, event: Event | None) -> None:
        """Check the event against the business rules, first failure wins.

        Raises:
            EventValidationError: On the first violated rule.
        """
        if event is None:
            raise EventValidationError("Event cannot be null")
        if _is_blank(event.name):
            raise EventValidationError("Event name is required", field="name")
        if _is_blank(event.description):
            raise EventValidationError(
                "Event description is required", field="description"
            )
        if event.event_date is None:
            raise EventValidationError("Event date is required", field="event_date")
        if (event.team_a is None) != (event.team_b is None):
            raise EventValidationError(
                "Both teamA and teamB are required", field="teams"
            )

    def get_all_events(self) -> list[Event]:
        return self._store.find_all()

    def get_event(self, event_id: int | None) -> Event | None:
        """Return an event by ID, or None if the store has no such event.

        Raises:
            InvalidEventIdError: If event_id is missing or not positive.
        """
        self._check_id(event_id)
        return self._store.find_by_id(event_id)

    def create_event(self, event: Event) -> Event:
        """Validate and persist a new event.

        Raises:
            EventValidationError: If the event breaks a validation rule.
            DuplicateEventNameError: If another event already uses the name.
        """
        self.validate_event(event)

        # Fast path only; the unique index on name is the real guarantee.
        if self._store.exists_by_name(event.name):
            logger.warning("Rejected duplicate event name %r", event.name)
            raise DuplicateEventNameError(event.name)

        saved = self._store.save(event)
        logger.info("Created event %s (%s)", saved.name, saved.id)
        return saved

    def update_event(self, event_id: int, event_data: Event) -> Event:
        """Replace every mutable field of an existing event.

        Raises:
            EventNotFoundError: If the event does not exist.
            EventValidationError: If the new data breaks a validation rule.
        """
        existing = self._store.find_by_id(event_id)
        if existing is None:
            raise EventNotFoundError(event_id)

        self.validate_event(event_data)

        updated = replace(
            existing,
            name=event_data.name,
            description=event_data.description,
            event_date=event_data.event_date,
            active=event_data.active,
            team_a=event_data.team_a,
            team_b=event_data.team_b,
            city=event_data.city,
        )
        saved = self._store.save(updated)
        logger.info("Updated event %s (%s)", saved.name, saved.id)
        return saved

    def delete_event(self, event_id: int) -> None:
        """Permanently remove an event.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        if not self._store.exists_by_id(event_id):
            raise EventNotFoundError(event_id)
        self._store.delete_by_id(event_id)
        logger.info("Deleted event %s", event_id)

    def get_upcoming_events(self) -> list[Event]:
        return self._store.find_by_event_date_after(self._clock.now())

    def get_past_events(self) -> list[Event]:
        return self._store.find_by_event_date_before(self._clock.now())

    def get_active_events(self) -> list[Event]:
        return self._store.find_by_active_true()

    def get_todays_events(self) -> list[Event]:
        """Return events between 00:00:00 and 23:59:59 of the current day."""
        now = self._clock.now()
        start_of_day = datetime.combine(now.date(), time.min, tzinfo=now.tzinfo)
        end_of_day = datetime.combine(now.date(), time(23, 59, 59), tzinfo=now.tzinfo)
        return self._store.find_by_event_date_between(start_of_day, end_of_day)

    def archive_old_events(self) -> None:
        """Deactivate every active event older than the retention threshold."""
        cutoff = self._clock.now() - self._archive_after
        stale = self._store.find_by_event_date_before_and_active_true(cutoff)
        for event in stale:
            self._store.save(replace(event, active=False))
        if stale:
            logger.info("Archived %d event(s) dated before %s", len(stale), cutoff)

    def cancel_event(self, event_id: int | None) -> Event:
        """Mark an event as canceled if it is far enough in the future.

        Raises:
            InvalidEventIdError: If event_id is missing or not positive.
            EventNotFoundError: If the event does not exist.
            CancellationWindowError: If the event starts too soon.
        """
        self._check_id(event_id)
        event = self._store.find_by_id(event_id)
        if event is None:
            raise EventNotFoundError(event_id)

        if event.event_date - self._clock.now() < self._cancellation_notice:
            logger.warning("Refused late cancellation of event %s", event_id)
            raise CancellationWindowError(
                int(self._cancellation_notice.total_seconds() // 3600)
            )

        saved = self._store.save(replace(event, canceled=True))
        logger.info("Canceled event %s (%s)", saved.name, saved.id)
        return saved

    def generate_teaser(self, event: Event) -> str:
        """Build the one-line preview shown for an event.

        The " at {city}" part is left out when the event has no city.

        Raises:
            EventValidationError: If either team is missing.
        """
        if event.team_a is None or event.team_b is None:
            raise EventValidationError(
                "Both teamA and teamB are required", field="teams"
            )
        venue = "" if _is_blank(event.city) else f" at {event.city}"
        return (
            f"{event.team_a.name} vs {event.team_b.name} – "
            f"{event.event_date:%Y-%m-%dT%H:%M}{venue}. "
            f"Players: {_roster(event.team_a)} vs {_roster(event.team_b)}"
        )

    def _check_id(self, event_id: int | None) -> None:
        if event_id is None or event_id <= 0:
            raise InvalidEventIdError()


def _roster(team: Team) -> str:
    return ", ".join(player.full_name for player in team.players)
