"""Tests for management commands.

Run with: pytest tests/test_commands.py -v
"""

from datetime import timedelta
from io import StringIO

import pytest
from django.core.management import call_command
from django.utils import timezone

from events import models


@pytest.mark.django_db
class TestArchiveEvents:
    """Tests for manage.py archive_events"""

    def test_archives_only_stale_events(self):
        now = timezone.now()
        stale = models.Event.objects.create(
            name="Old", description="D", event_date=now - timedelta(days=40)
        )
        recent = models.Event.objects.create(
            name="Recent", description="D", event_date=now - timedelta(days=10)
        )
        out = StringIO()

        call_command("archive_events", stdout=out)

        stale.refresh_from_db()
        recent.refresh_from_db()
        assert stale.is_active is False
        assert recent.is_active is True
        assert "Archived" in out.getvalue()

    def test_threshold_follows_settings(self, settings):
        settings.MATCHDAY = {"ARCHIVE_AFTER_DAYS": 5, "CANCELLATION_NOTICE_HOURS": 24}
        event = models.Event.objects.create(
            name="Last week", description="D", event_date=timezone.now() - timedelta(days=7)
        )

        call_command("archive_events", stdout=StringIO())

        event.refresh_from_db()
        assert event.is_active is False
