from events.domain.models import Event, Player, Team
from events.domain.value_objects import Record

__all__ = [
    "Event",
    "Team",
    "Player",
    "Record",
]
