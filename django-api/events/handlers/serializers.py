"""Serializers for transforming domain models to and from API payloads.

Format rules (lengths, ranges, types) are checked here. Business rules
stay in the services, so required-ness of event fields is left to
EventService and its messages.
"""

from rest_framework import serializers

from events.domain import Event, Player, Record, Team


class PlayerSerializer(serializers.Serializer):
    """Serializer for Player domain model."""

    id = serializers.IntegerField(read_only=True)
    first_name = serializers.CharField(min_length=2, max_length=50)
    last_name = serializers.CharField(min_length=2, max_length=50)
    full_name = serializers.CharField(read_only=True)
    email = serializers.EmailField(max_length=100)
    age = serializers.IntegerField(min_value=0, max_value=150)
    position = serializers.CharField(min_length=2, max_length=30)
    team_id = serializers.IntegerField(required=False, allow_null=True, min_value=1)
    jersey_number = serializers.IntegerField(
        required=False, allow_null=True, min_value=1, max_value=99
    )
    salary = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=0, required=False, allow_null=True
    )
    active = serializers.BooleanField(default=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)

    def to_player(self) -> Player:
        data = self.validated_data
        return Player(
            first_name=data["first_name"],
            last_name=data["last_name"],
            email=data["email"],
            age=data["age"],
            position=data["position"],
            team_id=data.get("team_id"),
            jersey_number=data.get("jersey_number"),
            salary=data.get("salary"),
            active=data["active"],
        )


class TeamSerializer(serializers.Serializer):
    """Serializer for Team domain model, roster included."""

    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(min_length=2, max_length=50)
    region = serializers.CharField(max_length=10)
    founded_date = serializers.DateTimeField()
    wins = serializers.IntegerField(source="record.wins", min_value=0, default=0)
    losses = serializers.IntegerField(source="record.losses", min_value=0, default=0)
    win_rate = serializers.FloatField(read_only=True)
    active = serializers.BooleanField(default=True)
    description = serializers.CharField(
        max_length=500, required=False, allow_null=True, allow_blank=True
    )
    contact_email = serializers.EmailField(
        max_length=100, required=False, allow_null=True, allow_blank=True
    )
    phone_number = serializers.CharField(
        max_length=20, required=False, allow_null=True, allow_blank=True
    )
    budget = serializers.DecimalField(
        max_digits=14, decimal_places=2, min_value=0, required=False, allow_null=True
    )
    players = PlayerSerializer(many=True, read_only=True)

    def to_team(self) -> Team:
        data = self.validated_data
        return Team(
            name=data["name"],
            region=data["region"],
            founded_date=data["founded_date"],
            record=Record(**data.get("record", {})),
            active=data["active"],
            description=data.get("description") or None,
            contact_email=data.get("contact_email") or None,
            phone_number=data.get("phone_number") or None,
            budget=data.get("budget"),
        )


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model.

    Teams are written by id (team_a_id, team_b_id) and read back
    as full teams with rosters.
    """

    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(
        min_length=2, max_length=100, required=False, allow_null=True, allow_blank=True
    )
    description = serializers.CharField(
        max_length=500, required=False, allow_null=True, allow_blank=True
    )
    event_date = serializers.DateTimeField(required=False, allow_null=True)
    city = serializers.CharField(
        max_length=100, required=False, allow_null=True, allow_blank=True
    )
    active = serializers.BooleanField(default=True)
    canceled = serializers.BooleanField(read_only=True)
    team_a_id = serializers.IntegerField(
        write_only=True, required=False, allow_null=True, min_value=1
    )
    team_b_id = serializers.IntegerField(
        write_only=True, required=False, allow_null=True, min_value=1
    )
    team_a = TeamSerializer(read_only=True)
    team_b = TeamSerializer(read_only=True)

    def to_event(self, team_a: Team | None, team_b: Team | None) -> Event:
        data = self.validated_data
        return Event(
            name=data.get("name"),
            description=data.get("description"),
            event_date=data.get("event_date"),
            team_a=team_a,
            team_b=team_b,
            city=data.get("city") or None,
            active=data["active"],
        )
