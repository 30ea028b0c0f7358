from events.services.clock import Clock, FixedClock, SystemClock
from events.services.event_service import EventService
from events.services.player_service import PlayerService
from events.services.team_service import TeamService

__all__ = [
    "Clock",
    "SystemClock",
    "FixedClock",
    "EventService",
    "TeamService",
    "PlayerService",
]
