"""Django ORM implementations of the stores.

Each store queries the ORM and converts rows to domain models, so
nothing above this layer ever sees a Django model instance.
"""

from datetime import datetime
from decimal import Decimal

from django.db.models import Q, QuerySet, Value
from django.db.models.functions import Concat

from events import models
from events.domain import Event, Player, Record, Team
from events.stores.interfaces import EventStore, PlayerStore, TeamStore


def _to_player(row: models.Player) -> Player:
    return Player(
        id=row.pk,
        first_name=row.first_name,
        last_name=row.last_name,
        email=row.email,
        age=row.age,
        position=row.position,
        team_id=row.team_id,
        jersey_number=row.jersey_number,
        salary=row.salary,
        active=row.active,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _to_team(row: models.Team) -> Team:
    return Team(
        id=row.pk,
        name=row.name,
        region=row.region,
        founded_date=row.founded_date,
        record=Record(wins=row.wins, losses=row.losses),
        active=row.is_active,
        description=row.description,
        contact_email=row.contact_email,
        phone_number=row.phone_number,
        budget=row.budget,
        players=tuple(_to_player(p) for p in row.players.all()),
    )


def _to_event(row: models.Event) -> Event:
    return Event(
        id=row.pk,
        name=row.name,
        description=row.description,
        event_date=row.event_date,
        team_a=_to_team(row.team_a) if row.team_a is not None else None,
        team_b=_to_team(row.team_b) if row.team_b is not None else None,
        city=row.city,
        active=row.is_active,
        canceled=row.canceled,
    )


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def _queryset(self) -> QuerySet:
        return models.Event.objects.select_related("team_a", "team_b").prefetch_related(
            "team_a__players", "team_b__players"
        )

    def _list(self, queryset: QuerySet) -> list[Event]:
        return [_to_event(row) for row in queryset]

    def find_all(self) -> list[Event]:
        return self._list(self._queryset())

    def find_by_id(self, event_id: int) -> Event | None:
        row = self._queryset().filter(pk=event_id).first()
        return _to_event(row) if row is not None else None

    def save(self, event: Event) -> Event:
        if event.id is None:
            row = models.Event()
        else:
            row = models.Event.objects.get(pk=event.id)
        row.name = event.name
        row.description = event.description
        row.event_date = event.event_date
        row.is_active = event.active
        row.canceled = event.canceled
        row.team_a_id = event.team_a.id if event.team_a is not None else None
        row.team_b_id = event.team_b.id if event.team_b is not None else None
        row.city = event.city
        row.save()
        return self.find_by_id(row.pk)

    def exists_by_name(self, name: str) -> bool:
        return models.Event.objects.filter(name=name).exists()

    def exists_by_id(self, event_id: int) -> bool:
        return models.Event.objects.filter(pk=event_id).exists()

    def delete_by_id(self, event_id: int) -> None:
        models.Event.objects.filter(pk=event_id).delete()

    def find_by_event_date_after(self, moment: datetime) -> list[Event]:
        return self._list(self._queryset().filter(event_date__gt=moment))

    def find_by_event_date_before(self, moment: datetime) -> list[Event]:
        return self._list(self._queryset().filter(event_date__lt=moment))

    def find_by_active_true(self) -> list[Event]:
        return self._list(self._queryset().filter(is_active=True))

    def find_by_event_date_before_and_active_true(
        self, moment: datetime
    ) -> list[Event]:
        return self._list(
            self._queryset().filter(event_date__lt=moment, is_active=True)
        )

    def find_by_event_date_between(
        self, start: datetime, end: datetime
    ) -> list[Event]:
        return self._list(self._queryset().filter(event_date__range=(start, end)))


class DjangoTeamStore(TeamStore):
    """Relational team store using Django ORM."""

    def _queryset(self) -> QuerySet:
        return models.Team.objects.prefetch_related("players")

    def find_all(self) -> list[Team]:
        return [_to_team(row) for row in self._queryset()]

    def find_by_id(self, team_id: int) -> Team | None:
        row = self._queryset().filter(pk=team_id).first()
        return _to_team(row) if row is not None else None

    def save(self, team: Team) -> Team:
        # The roster is owned by Player.team; saving a team never touches it.
        if team.id is None:
            row = models.Team()
        else:
            row = models.Team.objects.get(pk=team.id)
        row.name = team.name
        row.region = team.region
        row.founded_date = team.founded_date
        row.wins = team.record.wins
        row.losses = team.record.losses
        row.is_active = team.active
        row.description = team.description
        row.contact_email = team.contact_email
        row.phone_number = team.phone_number
        row.budget = team.budget
        row.save()
        return self.find_by_id(row.pk)

    def exists_by_name(self, name: str) -> bool:
        return models.Team.objects.filter(name=name).exists()

    def exists_by_id(self, team_id: int) -> bool:
        return models.Team.objects.filter(pk=team_id).exists()

    def delete_by_id(self, team_id: int) -> None:
        models.Team.objects.filter(pk=team_id).delete()

    def find_by_region(self, region: str) -> list[Team]:
        return [_to_team(row) for row in self._queryset().filter(region=region)]

    def find_by_active_true(self) -> list[Team]:
        return [_to_team(row) for row in self._queryset().filter(is_active=True)]

    def count(self) -> int:
        return models.Team.objects.count()

    def is_referenced_by_event(self, team_id: int) -> bool:
        return models.Event.objects.filter(
            Q(team_a_id=team_id) | Q(team_b_id=team_id)
        ).exists()


class DjangoPlayerStore(PlayerStore):
    """Relational player store using Django ORM."""

    def find_all(self) -> list[Player]:
        return [_to_player(row) for row in models.Player.objects.all()]

    def find_by_id(self, player_id: int) -> Player | None:
        row = models.Player.objects.filter(pk=player_id).first()
        return _to_player(row) if row is not None else None

    def find_by_email(self, email: str) -> Player | None:
        row = models.Player.objects.filter(email=email).first()
        return _to_player(row) if row is not None else None

    def save(self, player: Player) -> Player:
        if player.id is None:
            row = models.Player()
        else:
            row = models.Player.objects.get(pk=player.id)
        row.first_name = player.first_name
        row.last_name = player.last_name
        row.email = player.email
        row.age = player.age
        row.position = player.position
        row.team_id = player.team_id
        row.jersey_number = player.jersey_number
        row.salary = player.salary
        row.active = player.active
        if player.created_at is not None:
            row.created_at = player.created_at
        row.updated_at = player.updated_at
        row.save()
        return _to_player(row)

    def exists_by_id(self, player_id: int) -> bool:
        return models.Player.objects.filter(pk=player_id).exists()

    def exists_by_email(self, email: str) -> bool:
        return models.Player.objects.filter(email=email).exists()

    def exists_by_jersey_number_and_team(
        self, jersey_number: int, team_id: int
    ) -> bool:
        return models.Player.objects.filter(
            jersey_number=jersey_number, team_id=team_id
        ).exists()

    def delete_by_id(self, player_id: int) -> None:
        models.Player.objects.filter(pk=player_id).delete()

    def find_by_team(self, team_id: int) -> list[Player]:
        return [_to_player(row) for row in models.Player.objects.filter(team_id=team_id)]

    def find_by_position(self, position: str) -> list[Player]:
        return [
            _to_player(row) for row in models.Player.objects.filter(position=position)
        ]

    def find_by_age_between(self, min_age: int, max_age: int) -> list[Player]:
        return [
            _to_player(row)
            for row in models.Player.objects.filter(age__range=(min_age, max_age))
        ]

    def find_by_active(self, active: bool) -> list[Player]:
        return [_to_player(row) for row in models.Player.objects.filter(active=active)]

    def count_by_active(self, active: bool) -> int:
        return models.Player.objects.filter(active=active).count()

    def count_by_team(self, team_id: int) -> int:
        return models.Player.objects.filter(team_id=team_id).count()

    def find_by_full_name_containing(self, full_name: str) -> list[Player]:
        rows = models.Player.objects.annotate(
            full_name=Concat("first_name", Value(" "), "last_name")
        ).filter(full_name__icontains=full_name)
        return [_to_player(row) for row in rows]

    def find_by_salary_above(self, min_salary: Decimal) -> list[Player]:
        rows = models.Player.objects.filter(salary__gt=min_salary).order_by("-salary")
        return [_to_player(row) for row in rows]
