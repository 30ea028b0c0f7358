"""Player service.

Emails are stored lower-cased, and a jersey number is unique inside
a team. Timestamps come from the injected clock.
"""

import logging
from dataclasses import replace
from decimal import Decimal

from events.domain.errors import DuplicateError, InvalidIdError, NotFoundError, ValidationError
from events.domain.models import Player
from events.services.clock import Clock, SystemClock
from events.stores.interfaces import PlayerStore

logger = logging.getLogger(__name__)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class PlayerService:
    """Service for player management."""

    def __init__(self, store: PlayerStore, clock: Clock | None = None) -> None:
        self._store = store
        self._clock = clock or SystemClock()

    def validate_player(self, player: Player | None) -> None:
        """Check the player against the business rules, first failure wins.

        Raises:
            ValidationError: On the first violated rule.
        """
        if player is None:
            raise ValidationError("Player cannot be null")
        if _is_blank(player.first_name):
            raise ValidationError("First name is required", field="first_name")
        if _is_blank(player.last_name):
            raise ValidationError("Last name is required", field="last_name")
        if _is_blank(player.email):
            raise ValidationError("Email is required", field="email")
        if player.age is None or not 0 <= player.age <= 150:
            raise ValidationError("Age must be between 0 and 150", field="age")
        if _is_blank(player.position):
            raise ValidationError("Position is required", field="position")
        if player.salary is not None and player.salary < 0:
            raise ValidationError("Salary cannot be negative", field="salary")
        if player.jersey_number is not None and not 1 <= player.jersey_number <= 99:
            raise ValidationError(
                "Jersey number must be between 1 and 99", field="jersey_number"
            )

    def create_player(self, player: Player) -> Player:
        self.validate_player(player)
        email = player.email.strip().lower()

        if self._store.exists_by_email(email):
            raise DuplicateError(f"Player with email {email} already exists")
        if self._jersey_taken(player):
            raise DuplicateError(
                f"Jersey number {player.jersey_number} is already taken "
                f"in team {player.team_id}"
            )

        now = self._clock.now()
        saved = self._store.save(
            replace(player, email=email, created_at=now, updated_at=now)
        )
        logger.info("Created player %s (%s)", saved.full_name, saved.id)
        return saved

    def get_all_players(self) -> list[Player]:
        return self._store.find_all()

    def get_player(self, player_id: int | None) -> Player | None:
        self._check_id(player_id)
        return self._store.find_by_id(player_id)

    def get_player_by_email(self, email: str | None) -> Player | None:
        if _is_blank(email):
            raise ValidationError("Email cannot be null or empty", field="email")
        return self._store.find_by_email(email.strip().lower())

    def update_player(self, player_id: int | None, player_data: Player) -> Player:
        """Replace every mutable field of an existing player."""
        existing = self._get_existing(player_id)
        self.validate_player(player_data)
        email = player_data.email.strip().lower()

        if email != existing.email and self._store.exists_by_email(email):
            raise DuplicateError(f"Player with email {email} already exists")
        moved = (
            player_data.team_id != existing.team_id
            or player_data.jersey_number != existing.jersey_number
        )
        if moved and self._jersey_taken(player_data):
            raise DuplicateError(
                f"Jersey number {player_data.jersey_number} is already taken "
                f"in team {player_data.team_id}"
            )

        saved = self._store.save(
            replace(
                existing,
                first_name=player_data.first_name,
                last_name=player_data.last_name,
                email=email,
                age=player_data.age,
                position=player_data.position,
                team_id=player_data.team_id,
                jersey_number=player_data.jersey_number,
                salary=player_data.salary,
                active=player_data.active,
                updated_at=self._clock.now(),
            )
        )
        logger.info("Updated player %s (%s)", saved.full_name, saved.id)
        return saved

    def delete_player(self, player_id: int | None) -> None:
        self._check_id(player_id)
        if not self._store.exists_by_id(player_id):
            raise NotFoundError("Player", player_id)
        self._store.delete_by_id(player_id)
        logger.info("Deleted player %s", player_id)

    def get_players_by_team(self, team_id: int | None) -> list[Player]:
        if team_id is None or team_id <= 0:
            raise InvalidIdError("Team")
        return self._store.find_by_team(team_id)

    def get_players_by_position(self, position: str | None) -> list[Player]:
        if _is_blank(position):
            raise ValidationError("Position cannot be null or empty", field="position")
        return self._store.find_by_position(position.strip())

    def get_players_by_age_range(
        self, min_age: int | None, max_age: int | None
    ) -> list[Player]:
        if min_age is None or max_age is None:
            raise ValidationError("Age range bounds cannot be null")
        if min_age < 0 or max_age < 0:
            raise ValidationError("Age values must be non-negative")
        if min_age > max_age:
            raise ValidationError("Minimum age cannot be greater than maximum age")
        return self._store.find_by_age_between(min_age, max_age)

    def get_active_players(self) -> list[Player]:
        return self._store.find_by_active(True)

    def get_inactive_players(self) -> list[Player]:
        return self._store.find_by_active(False)

    def deactivate_player(self, player_id: int | None) -> Player:
        return self._set_active(player_id, False)

    def activate_player(self, player_id: int | None) -> Player:
        return self._set_active(player_id, True)

    def count_active_players(self) -> int:
        return self._store.count_by_active(True)

    def count_players_by_team(self, team_id: int | None) -> int:
        if team_id is None or team_id <= 0:
            raise InvalidIdError("Team")
        return self._store.count_by_team(team_id)

    def find_players_by_full_name(self, full_name: str | None) -> list[Player]:
        """Case-insensitive substring search over "first last"."""
        if _is_blank(full_name):
            raise ValidationError("Full name cannot be null or empty", field="full_name")
        return self._store.find_by_full_name_containing(full_name.strip())

    def get_players_with_salary_above(self, min_salary: Decimal | None) -> list[Player]:
        if min_salary is None or min_salary < 0:
            raise ValidationError(
                "Minimum salary must be non-negative", field="min_salary"
            )
        return self._store.find_by_salary_above(min_salary)

    def calculate_average_age_by_team(self, team_id: int | None) -> float:
        players = self.get_players_by_team(team_id)
        if not players:
            return 0.0
        return round(sum(p.age for p in players) / len(players), 2)

    def _set_active(self, player_id: int | None, active: bool) -> Player:
        player = self._get_existing(player_id)
        saved = self._store.save(
            replace(player, active=active, updated_at=self._clock.now())
        )
        logger.info(
            "%s player %s", "Activated" if active else "Deactivated", saved.id
        )
        return saved

    def _get_existing(self, player_id: int | None) -> Player:
        self._check_id(player_id)
        player = self._store.find_by_id(player_id)
        if player is None:
            raise NotFoundError("Player", player_id)
        return player

    def _jersey_taken(self, player: Player) -> bool:
        if player.team_id is None or player.jersey_number is None:
            return False
        return self._store.exists_by_jersey_number_and_team(
            player.jersey_number, player.team_id
        )

    def _check_id(self, player_id: int | None) -> None:
        if player_id is None or player_id <= 0:
            raise InvalidIdError("Player")
