"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal

from events.domain import Event, Player, Team


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def find_all(self) -> list[Event]:
        """Return all events ordered by event_date ascending."""
        ...

    @abstractmethod
    def find_by_id(self, event_id: int) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def save(self, event: Event) -> Event:
        """Insert or update an event and return the persisted copy.

        An event without an id is inserted and comes back with one.
        """
        ...

    @abstractmethod
    def exists_by_name(self, name: str) -> bool:
        ...

    @abstractmethod
    def exists_by_id(self, event_id: int) -> bool:
        ...

    @abstractmethod
    def delete_by_id(self, event_id: int) -> None:
        ...

    @abstractmethod
    def find_by_event_date_after(self, moment: datetime) -> list[Event]:
        """Return events strictly after moment."""
        ...

    @abstractmethod
    def find_by_event_date_before(self, moment: datetime) -> list[Event]:
        """Return events strictly before moment."""
        ...

    @abstractmethod
    def find_by_active_true(self) -> list[Event]:
        ...

    @abstractmethod
    def find_by_event_date_before_and_active_true(
        self, moment: datetime
    ) -> list[Event]:
        """Return active events strictly before moment."""
        ...

    @abstractmethod
    def find_by_event_date_between(
        self, start: datetime, end: datetime
    ) -> list[Event]:
        """Return events with start <= event_date <= end."""
        ...


class TeamStore(ABC):
    """Interface for team persistence operations."""

    @abstractmethod
    def find_all(self) -> list[Team]:
        """Return all teams ordered by name."""
        ...

    @abstractmethod
    def find_by_id(self, team_id: int) -> Team | None:
        """Return a team with its roster, or None if not found."""
        ...

    @abstractmethod
    def save(self, team: Team) -> Team:
        ...

    @abstractmethod
    def exists_by_name(self, name: str) -> bool:
        ...

    @abstractmethod
    def exists_by_id(self, team_id: int) -> bool:
        ...

    @abstractmethod
    def delete_by_id(self, team_id: int) -> None:
        ...

    @abstractmethod
    def find_by_region(self, region: str) -> list[Team]:
        ...

    @abstractmethod
    def find_by_active_true(self) -> list[Team]:
        ...

    @abstractmethod
    def count(self) -> int:
        ...

    @abstractmethod
    def is_referenced_by_event(self, team_id: int) -> bool:
        """Return True if any event has this team on either side."""
        ...


class PlayerStore(ABC):
    """Interface for player persistence operations."""

    @abstractmethod
    def find_all(self) -> list[Player]:
        ...

    @abstractmethod
    def find_by_id(self, player_id: int) -> Player | None:
        ...

    @abstractmethod
    def find_by_email(self, email: str) -> Player | None:
        ...

    @abstractmethod
    def save(self, player: Player) -> Player:
        ...

    @abstractmethod
    def exists_by_id(self, player_id: int) -> bool:
        ...

    @abstractmethod
    def exists_by_email(self, email: str) -> bool:
        ...

    @abstractmethod
    def exists_by_jersey_number_and_team(
        self, jersey_number: int, team_id: int
    ) -> bool:
        ...

    @abstractmethod
    def delete_by_id(self, player_id: int) -> None:
        ...

    @abstractmethod
    def find_by_team(self, team_id: int) -> list[Player]:
        ...

    @abstractmethod
    def find_by_position(self, position: str) -> list[Player]:
        ...

    @abstractmethod
    def find_by_age_between(self, min_age: int, max_age: int) -> list[Player]:
        """Return players with min_age <= age <= max_age."""
        ...

    @abstractmethod
    def find_by_active(self, active: bool) -> list[Player]:
        ...

    @abstractmethod
    def count_by_active(self, active: bool) -> int:
        ...

    @abstractmethod
    def count_by_team(self, team_id: int) -> int:
        ...

    @abstractmethod
    def find_by_full_name_containing(self, full_name: str) -> list[Player]:
        """Return players whose "first last" name contains full_name, ignoring case."""
        ...

    @abstractmethod
    def find_by_salary_above(self, min_salary: Decimal) -> list[Player]:
        """Return players paid strictly more than min_salary, highest first."""
        ...
