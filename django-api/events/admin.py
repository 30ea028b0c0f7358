from django.contrib import admin

from events.models import Event, Player, Team


class PlayerInline(admin.TabularInline):
    model = Player
    extra = 1
    fields = ["first_name", "last_name", "position", "jersey_number", "active"]


@admin.register(Team)
class TeamAdmin(admin.ModelAdmin):
    list_display = ["name", "region", "wins", "losses", "contact_email", "is_active"]
    list_filter = ["region", "is_active"]
    search_fields = ["name"]
    inlines = [PlayerInline]


@admin.register(Player)
class PlayerAdmin(admin.ModelAdmin):
    list_display = ["first_name", "last_name", "email", "position", "team", "active"]
    list_filter = ["team", "position", "active"]
    search_fields = ["first_name", "last_name", "email"]


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["name", "event_date", "team_a", "team_b", "city", "is_active", "canceled"]
    list_filter = ["is_active", "canceled"]
    search_fields = ["name", "city"]
