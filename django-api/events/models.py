"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.db import models
from django.utils import timezone


class Team(models.Model):
    """Persistence model for teams."""

    name = models.CharField(max_length=50, unique=True)
    region = models.CharField(max_length=10)
    founded_date = models.DateTimeField()
    wins = models.PositiveIntegerField(default=0)
    losses = models.PositiveIntegerField(default=0)
    is_active = models.BooleanField(default=True)
    description = models.CharField(max_length=500, blank=True, null=True)
    contact_email = models.EmailField(max_length=100, blank=True, null=True)
    phone_number = models.CharField(max_length=20, blank=True, null=True)
    budget = models.DecimalField(max_digits=14, decimal_places=2, blank=True, null=True)

    class Meta:
        ordering = ["name"]
        indexes = [
            models.Index(fields=["region"]),
        ]

    def __str__(self) -> str:
        return self.name


class Player(models.Model):
    """Persistence model for players."""

    first_name = models.CharField(max_length=50)
    last_name = models.CharField(max_length=50)
    email = models.EmailField(max_length=100, unique=True)
    age = models.PositiveIntegerField()
    position = models.CharField(max_length=30)
    team = models.ForeignKey(
        Team,
        on_delete=models.SET_NULL,
        related_name="players",
        blank=True,
        null=True,
    )
    jersey_number = models.PositiveSmallIntegerField(blank=True, null=True)
    salary = models.DecimalField(max_digits=12, decimal_places=2, blank=True, null=True)
    active = models.BooleanField(default=True)
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(blank=True, null=True)

    class Meta:
        ordering = ["last_name", "first_name"]
        indexes = [
            models.Index(fields=["team", "jersey_number"]),
            models.Index(fields=["position"]),
        ]

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Event(models.Model):
    """Persistence model for events."""

    name = models.CharField(max_length=100, unique=True)
    description = models.CharField(max_length=500)
    event_date = models.DateTimeField()
    is_active = models.BooleanField(default=True)
    canceled = models.BooleanField(default=False)
    team_a = models.ForeignKey(
        Team,
        on_delete=models.PROTECT,
        related_name="home_events",
        blank=True,
        null=True,
    )
    team_b = models.ForeignKey(
        Team,
        on_delete=models.PROTECT,
        related_name="away_events",
        blank=True,
        null=True,
    )
    city = models.CharField(max_length=100, blank=True, null=True)

    class Meta:
        ordering = ["event_date"]
        indexes = [
            models.Index(fields=["event_date"]),
            models.Index(fields=["is_active", "event_date"]),
        ]

    def __str__(self) -> str:
        return self.name
