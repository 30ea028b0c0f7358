"""Team service."""

import logging
from dataclasses import replace

from events.domain.errors import (
    DuplicateError,
    InvalidIdError,
    NotFoundError,
    TeamInUseError,
    ValidationError,
)
from events.domain.models import Team
from events.stores.interfaces import TeamStore

logger = logging.getLogger(__name__)


class TeamService:
    """Service for team management."""

    def __init__(self, store: TeamStore) -> None:
        self._store = store

    def validate_team(self, team: Team | None) -> None:
        if team is None:
            raise ValidationError("Team cannot be null")
        if team.name is None or not team.name.strip():
            raise ValidationError("Team name is required", field="name")
        if team.region is None or not team.region.strip():
            raise ValidationError("Team region is required", field="region")
        if team.founded_date is None:
            raise ValidationError("Founded date is required", field="founded_date")

    def get_all_teams(self) -> list[Team]:
        return self._store.find_all()

    def get_team(self, team_id: int | None) -> Team | None:
        if team_id is None or team_id <= 0:
            raise InvalidIdError("Team")
        return self._store.find_by_id(team_id)

    def create_team(self, team: Team) -> Team:
        self.validate_team(team)
        if self._store.exists_by_name(team.name):
            raise DuplicateError(f"Team name already exists: {team.name}")

        saved = self._store.save(team)
        logger.info("Created team %s (%s)", saved.name, saved.id)
        return saved

    def update_team(self, team_id: int, team_data: Team) -> Team:
        """Replace name, region, founded date and contact details of a team."""
        existing = self._store.find_by_id(team_id)
        if existing is None:
            raise NotFoundError("Team", team_id)

        self.validate_team(team_data)
        if team_data.name != existing.name and self._store.exists_by_name(team_data.name):
            raise DuplicateError(f"Team name already exists: {team_data.name}")

        saved = self._store.save(
            replace(
                existing,
                name=team_data.name,
                region=team_data.region,
                founded_date=team_data.founded_date,
                contact_email=team_data.contact_email,
                phone_number=team_data.phone_number,
                budget=team_data.budget,
            )
        )
        logger.info("Updated team %s (%s)", saved.name, saved.id)
        return saved

    def delete_team(self, team_id: int) -> None:
        if not self._store.exists_by_id(team_id):
            raise NotFoundError("Team", team_id)
        # An event must keep both of its teams or none.
        if self._store.is_referenced_by_event(team_id):
            logger.warning("Refused to delete team %s still used by an event", team_id)
            raise TeamInUseError(team_id)
        self._store.delete_by_id(team_id)
        logger.info("Deleted team %s", team_id)

    def get_teams_by_region(self, region: str) -> list[Team]:
        return self._store.find_by_region(region)

    def get_active_teams(self) -> list[Team]:
        return self._store.find_by_active_true()

    def count_teams(self) -> int:
        return self._store.count()
