from django.urls import path

from events.handlers import (
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

event_patterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<int:event_id>", EventDetailView.as_view(), name="event-detail"),
    path("events/<int:event_id>/cancel", EventCancelView.as_view(), name="event-cancel"),
    path("events/<int:event_id>/teaser", EventTeaserView.as_view(), name="event-teaser"),
] + [
    path(
        f"events/search/{scope}",
        EventSearchView.as_view(),
        {"scope": scope},
        name=f"event-search-{scope}",
    )
    for scope in ("upcoming", "past", "active", "today")
]

team_patterns = [
    path("teams", TeamListView.as_view(), name="team-list"),
    path("teams/<int:team_id>", TeamDetailView.as_view(), name="team-detail"),
    path("teams/search/active", TeamSearchView.as_view(), name="team-search-active"),
    path(
        "teams/search/region/<str:region>",
        TeamSearchView.as_view(),
        name="team-search-region",
    ),
]

player_patterns = [
    path("players", PlayerListView.as_view(), name="player-list"),
    path("players/<int:player_id>", PlayerDetailView.as_view(), name="player-detail"),
    path(
        "players/<int:player_id>/activate",
        PlayerActivationView.as_view(active=True),
        name="player-activate",
    ),
    path(
        "players/<int:player_id>/deactivate",
        PlayerActivationView.as_view(active=False),
        name="player-deactivate",
    ),
    path(
        "players/search/team/<int:team_id>",
        PlayerSearchView.as_view(),
        {"scope": "team"},
        name="player-search-team",
    ),
    path(
        "players/search/position/<str:position>",
        PlayerSearchView.as_view(),
        {"scope": "position"},
        name="player-search-position",
    ),
    path(
        "players/count/active", PlayerCountView.as_view(), name="player-count-active"
    ),
    path(
        "players/count/team/<int:team_id>",
        PlayerCountView.as_view(),
        name="player-count-team",
    ),
    path(
        "players/stats/team/<int:team_id>/average-age",
        PlayerAverageAgeView.as_view(),
        name="player-stats-average-age",
    ),
    path("players/health", PlayerHealthView.as_view(), name="player-health"),
] + [
    path(
        f"players/search/{scope}",
        PlayerSearchView.as_view(),
        {"scope": scope},
        name=f"player-search-{scope}",
    )
    for scope in ("active", "inactive", "age", "name", "salary")
]

urlpatterns = event_patterns + team_patterns + player_patterns
