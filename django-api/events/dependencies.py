"""Wiring of services to their Django-backed stores and settings."""

from datetime import timedelta

from django.conf import settings

from events.services import EventService, PlayerService, TeamService
from events.stores.django_store import DjangoEventStore, DjangoPlayerStore, DjangoTeamStore


def event_service() -> EventService:
    config = settings.MATCHDAY
    return EventService(
        DjangoEventStore(),
        archive_after=timedelta(days=config["ARCHIVE_AFTER_DAYS"]),
        cancellation_notice=timedelta(hours=config["CANCELLATION_NOTICE_HOURS"]),
    )


def team_service() -> TeamService:
    return TeamService(DjangoTeamStore())


def player_service() -> PlayerService:
    return PlayerService(DjangoPlayerStore())
