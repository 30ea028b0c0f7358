from events.handlers.views import (
    EventCancelView,
    EventDetailView,
    EventListView,
    EventSearchView,
    EventTeaserView,
    PlayerActivationView,
    PlayerAverageAgeView,
    PlayerCountView,
    PlayerDetailView,
    PlayerHealthView,
    PlayerListView,
    PlayerSearchView,
    TeamDetailView,
    TeamListView,
    TeamSearchView,
)

__all__ = [
    "EventListView",
    "EventDetailView",
    "EventCancelView",
    "EventTeaserView",
    "EventSearchView",
    "TeamListView",
    "TeamDetailView",
    "TeamSearchView",
    "PlayerListView",
    "PlayerDetailView",
    "PlayerActivationView",
    "PlayerSearchView",
    "PlayerCountView",
    "PlayerAverageAgeView",
    "PlayerHealthView",
]
