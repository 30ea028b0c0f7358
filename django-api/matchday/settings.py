"""Django settings for the matchday API.

Every deploy-specific value comes from the environment:

    DJANGO_SECRET_KEY, DJANGO_DEBUG, DJANGO_ALLOWED_HOSTS
    MATCHDAY_DB_ENGINE, MATCHDAY_DB_NAME, MATCHDAY_DB_USER,
    MATCHDAY_DB_PASSWORD, MATCHDAY_DB_HOST, MATCHDAY_DB_PORT
    MATCHDAY_LOG_LEVEL
    MATCHDAY_ARCHIVE_AFTER_DAYS, MATCHDAY_CANCELLATION_NOTICE_HOURS
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "dev-only-insecure-key")
DEBUG = os.environ.get("DJANGO_DEBUG", "false").lower() in ("1", "true", "yes")
ALLOWED_HOSTS = [
    host.strip()
    for host in os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",")
    if host.strip()
]

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "rest_framework",
    "events.apps.EventsConfig",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
]

ROOT_URLCONF = "matchday.urls"
WSGI_APPLICATION = "matchday.wsgi.application"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

DATABASES = {
    "default": {
        "ENGINE": os.environ.get("MATCHDAY_DB_ENGINE", "django.db.backends.sqlite3"),
        "NAME": os.environ.get("MATCHDAY_DB_NAME", str(BASE_DIR / "db.sqlite3")),
        "USER": os.environ.get("MATCHDAY_DB_USER", ""),
        "PASSWORD": os.environ.get("MATCHDAY_DB_PASSWORD", ""),
        "HOST": os.environ.get("MATCHDAY_DB_HOST", ""),
        "PORT": os.environ.get("MATCHDAY_DB_PORT", ""),
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": ["rest_framework.parsers.JSONParser"],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "UNAUTHENTICATED_USER": None,
    "TEST_REQUEST_DEFAULT_FORMAT": "json",
}

MATCHDAY = {
    "ARCHIVE_AFTER_DAYS": int(os.environ.get("MATCHDAY_ARCHIVE_AFTER_DAYS", "30")),
    "CANCELLATION_NOTICE_HOURS": int(
        os.environ.get("MATCHDAY_CANCELLATION_NOTICE_HOURS", "24")
    ),
}

LOG_LEVEL = os.environ.get("MATCHDAY_LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "console": {
            "format": "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "console",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "events": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
            "propagate": False,
        },
        "django.request": {
            "handlers": ["console"],
            "level": "ERROR",
            "propagate": False,
        },
    },
}
