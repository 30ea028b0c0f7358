"""WSGI entry point for the matchday API."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "matchday.settings")

application = get_wsgi_application()
