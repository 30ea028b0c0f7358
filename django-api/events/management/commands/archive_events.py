"""Deactivate events older than the configured retention threshold.

Meant to run from cron or a scheduler, e.g. once a day:

    python manage.py archive_events
"""

from django.core.management.base import BaseCommand

from events.dependencies import event_service


class Command(BaseCommand):
    help = "Archive (deactivate) events older than MATCHDAY_ARCHIVE_AFTER_DAYS."

    def handle(self, *args, **options):
        event_service().archive_old_events()
        self.stdout.write(self.style.SUCCESS("Archived stale events"))
