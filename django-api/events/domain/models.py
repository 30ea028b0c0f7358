"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).

Services never mutate these; state transitions go through
dataclasses.replace() and the result is handed to a store.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from events.domain.value_objects import Record


@dataclass(frozen=True)
class Player:
    """Domain representation of a Player."""

    first_name: str | None
    last_name: str | None
    email: str | None
    age: int | None
    position: str | None
    team_id: int | None = None
    jersey_number: int | None = None
    salary: Decimal | None = None
    active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None
    id: int | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class Team:
    """Domain representation of a Team and its roster."""

    name: str | None
    region: str | None
    founded_date: datetime | None
    record: Record = field(default_factory=Record)
    active: bool = True
    description: str | None = None
    contact_email: str | None = None
    phone_number: str | None = None
    budget: Decimal | None = None
    players: tuple[Player, ...] = ()
    id: int | None = None

    @property
    def win_rate(self) -> float:
        return self.record.win_rate


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event between two teams."""

    name: str | None
    description: str | None
    event_date: datetime | None
    team_a: Team | None = None
    team_b: Team | None = None
    city: str | None = None
    active: bool = True
    canceled: bool = False
    id: int | None = None
