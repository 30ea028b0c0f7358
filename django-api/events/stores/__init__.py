from events.stores.interfaces import EventStore, PlayerStore, TeamStore

__all__ = [
    "EventStore",
    "TeamStore",
    "PlayerStore",
]
