"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging
from decimal import Decimal, InvalidOperation

from django.utils import timezone
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.dependencies import event_service, player_service, team_service
from events.domain import Team
from events.domain.errors import (
    DomainError,
    ErrorCode,
    EventNotFoundError,
    NotFoundError,
    ValidationError,
)
from events.handlers.serializers import EventSerializer, PlayerSerializer, TeamSerializer

logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.DUPLICATE: status.HTTP_409_CONFLICT,
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.CANCELLATION_WINDOW: status.HTTP_400_BAD_REQUEST,
}


def error_response(error: DomainError) -> Response:
    """Translate a domain error to its HTTP response."""
    return Response(
        {"error": error.code.value, "message": error.message},
        status=STATUS_BY_CODE.get(error.code, status.HTTP_400_BAD_REQUEST),
    )


def resolve_team(team_id: int | None) -> Team | None:
    if team_id is None:
        return None
    team = team_service().get_team(team_id)
    if team is None:
        raise NotFoundError("Team", team_id)
    return team


class DomainAPIView(APIView):
    """APIView that answers domain errors with their mapped status."""

    def handle_exception(self, exc: Exception) -> Response:
        if isinstance(exc, DomainError):
            logger.debug("Domain error on %s: %s", self.request.path, exc)
            return error_response(exc)
        return super().handle_exception(exc)


class EventListView(DomainAPIView):
    """Handler for GET/POST /api/events"""

    def get(self, request: Request) -> Response:
        events = event_service().get_all_events()
        return Response(EventSerializer(events, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = EventSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = serializer.to_event(
            resolve_team(serializer.validated_data.get("team_a_id")),
            resolve_team(serializer.validated_data.get("team_b_id")),
        )
        created = event_service().create_event(event)
        return Response(EventSerializer(created).data, status=status.HTTP_201_CREATED)


class EventDetailView(DomainAPIView):
    """Handler for GET/PUT/DELETE /api/events/{event_id}"""

    def get(self, request: Request, event_id: int) -> Response:
        event = event_service().get_event(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        return Response(EventSerializer(event).data)

    def put(self, request: Request, event_id: int) -> Response:
        service = event_service()
        if service.get_event(event_id) is None:
            raise EventNotFoundError(event_id)
        serializer = EventSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = serializer.to_event(
            resolve_team(serializer.validated_data.get("team_a_id")),
            resolve_team(serializer.validated_data.get("team_b_id")),
        )
        updated = service.update_event(event_id, event)
        return Response(EventSerializer(updated).data)

    def delete(self, request: Request, event_id: int) -> Response:
        event_service().delete_event(event_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class EventCancelView(DomainAPIView):
    """Handler for POST /api/events/{event_id}/cancel"""

    def post(self, request: Request, event_id: int) -> Response:
        canceled = event_service().cancel_event(event_id)
        return Response(EventSerializer(canceled).data)


class EventTeaserView(DomainAPIView):
    """Handler for GET /api/events/{event_id}/teaser"""

    def get(self, request: Request, event_id: int) -> Response:
        service = event_service()
        event = service.get_event(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        return Response({"id": event.id, "teaser": service.generate_teaser(event)})


class EventSearchView(DomainAPIView):
    """Handler for GET /api/events/search/{scope}"""

    def get(self, request: Request, scope: str) -> Response:
        service = event_service()
        queries = {
            "upcoming": service.get_upcoming_events,
            "past": service.get_past_events,
            "active": service.get_active_events,
            "today": service.get_todays_events,
        }
        return Response(EventSerializer(queries[scope](), many=True).data)


class TeamListView(DomainAPIView):
    """Handler for GET/POST /api/teams"""

    def get(self, request: Request) -> Response:
        return Response(TeamSerializer(team_service().get_all_teams(), many=True).data)

    def post(self, request: Request) -> Response:
        serializer = TeamSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        created = team_service().create_team(serializer.to_team())
        return Response(TeamSerializer(created).data, status=status.HTTP_201_CREATED)


class TeamDetailView(DomainAPIView):
    """Handler for GET/PUT/DELETE /api/teams/{team_id}"""

    def get(self, request: Request, team_id: int) -> Response:
        return Response(TeamSerializer(resolve_team(team_id)).data)

    def put(self, request: Request, team_id: int) -> Response:
        serializer = TeamSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        updated = team_service().update_team(team_id, serializer.to_team())
        return Response(TeamSerializer(updated).data)

    def delete(self, request: Request, team_id: int) -> Response:
        team_service().delete_team(team_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class TeamSearchView(DomainAPIView):
    """Handler for GET /api/teams/search/active and /api/teams/search/region/{region}"""

    def get(self, request: Request, region: str | None = None) -> Response:
        service = team_service()
        if region is None:
            teams = service.get_active_teams()
        else:
            teams = service.get_teams_by_region(region)
        return Response(TeamSerializer(teams, many=True).data)


class PlayerListView(DomainAPIView):
    """Handler for GET/POST /api/players"""

    def get(self, request: Request) -> Response:
        players = player_service().get_all_players()
        return Response(PlayerSerializer(players, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = PlayerSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        resolve_team(serializer.validated_data.get("team_id"))
        created = player_service().create_player(serializer.to_player())
        return Response(PlayerSerializer(created).data, status=status.HTTP_201_CREATED)


class PlayerDetailView(DomainAPIView):
    """Handler for GET/PUT/DELETE /api/players/{player_id}"""

    def get(self, request: Request, player_id: int) -> Response:
        player = player_service().get_player(player_id)
        if player is None:
            raise NotFoundError("Player", player_id)
        return Response(PlayerSerializer(player).data)

    def put(self, request: Request, player_id: int) -> Response:
        serializer = PlayerSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        resolve_team(serializer.validated_data.get("team_id"))
        updated = player_service().update_player(player_id, serializer.to_player())
        return Response(PlayerSerializer(updated).data)

    def delete(self, request: Request, player_id: int) -> Response:
        player_service().delete_player(player_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class PlayerActivationView(DomainAPIView):
    """Handler for PATCH /api/players/{player_id}/activate and /deactivate"""

    active = True

    def patch(self, request: Request, player_id: int) -> Response:
        service = player_service()
        if self.active:
            player = service.activate_player(player_id)
        else:
            player = service.deactivate_player(player_id)
        return Response(PlayerSerializer(player).data)


class PlayerSearchView(DomainAPIView):
    """Handler for GET /api/players/search/{scope}"""

    def get(
        self,
        request: Request,
        scope: str,
        team_id: int | None = None,
        position: str | None = None,
    ) -> Response:
        service = player_service()
        if scope == "active":
            players = service.get_active_players()
        elif scope == "inactive":
            players = service.get_inactive_players()
        elif scope == "team":
            players = service.get_players_by_team(team_id)
        elif scope == "position":
            players = service.get_players_by_position(position)
        elif scope == "name":
            players = service.find_players_by_full_name(
                request.query_params.get("full_name")
            )
        elif scope == "salary":
            players = service.get_players_with_salary_above(
                _decimal_param(request, "min_salary")
            )
        else:
            players = service.get_players_by_age_range(
                _int_param(request, "min_age"), _int_param(request, "max_age")
            )
        return Response(PlayerSerializer(players, many=True).data)


class PlayerCountView(DomainAPIView):
    """Handler for GET /api/players/count/active and /api/players/count/team/{team_id}"""

    def get(self, request: Request, team_id: int | None = None) -> Response:
        service = player_service()
        if team_id is None:
            return Response({"active_player_count": service.count_active_players()})
        return Response(
            {"team_id": team_id, "player_count": service.count_players_by_team(team_id)}
        )


class PlayerAverageAgeView(DomainAPIView):
    """Handler for GET /api/players/stats/team/{team_id}/average-age"""

    def get(self, request: Request, team_id: int) -> Response:
        average_age = player_service().calculate_average_age_by_team(team_id)
        return Response({"team_id": team_id, "average_age": average_age})


class PlayerHealthView(DomainAPIView):
    """Handler for GET /api/players/health"""

    def get(self, request: Request) -> Response:
        service = player_service()
        return Response(
            {
                "status": "UP",
                "service": "PlayerService",
                "total_players": len(service.get_all_players()),
                "active_players": service.count_active_players(),
                "timestamp": timezone.now().isoformat(),
            }
        )


def _int_param(request: Request, name: str) -> int | None:
    raw = request.query_params.get(name)
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"{name} must be an integer", field=name) from None


def _decimal_param(request: Request, name: str) -> Decimal | None:
    raw = request.query_params.get(name)
    if raw is None:
        return None
    try:
        value = Decimal(raw)
    except InvalidOperation:
        raise ValidationError(f"{name} must be a number", field=name) from None
    if not value.is_finite():
        raise ValidationError(f"{name} must be a number", field=name)
    return value
