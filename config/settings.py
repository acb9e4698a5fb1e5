"""Django settings for the room booking service.

Values come from environment variables with development defaults. Booking
rules live in ROOM_BOOKING and are read by bookings.conf.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def _get_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_optional_int(value: str | None, default: int | None) -> int | None:
    if value is None:
        return default
    if value.strip().lower() in {"", "none", "off"}:
        return None
    return int(value)


# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "replace-me-in-production")

DEBUG = _get_bool(os.environ.get("DJANGO_DEBUG"), default=False)

ALLOWED_HOSTS: list[str] = os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    # Third-party apps
    "rest_framework",
    # Domain apps
    "bookings",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "config.urls"

WSGI_APPLICATION = "config.wsgi.application"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.environ.get("DB_NAME", BASE_DIR / "db.sqlite3"),
    }
}

LANGUAGE_CODE = "en-us"

TIME_ZONE = os.environ.get("DJANGO_TIME_ZONE", "America/Vancouver")

USE_I18N = True

# Booking rules work on local wall-clock days and hours.
USE_TZ = False

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": ["rest_framework.parsers.JSONParser"],
    "TEST_REQUEST_DEFAULT_FORMAT": "json",
    "DATETIME_FORMAT": "%Y-%m-%dT%H:%M:%S",
}

ROOM_BOOKING = {
    "OPENING_HOUR": int(os.environ.get("ROOM_BOOKING_OPENING_HOUR", "8")),
    "CLOSING_HOUR": int(os.environ.get("ROOM_BOOKING_CLOSING_HOUR", "22")),
    "CHECK_IN_OPENS_MINUTES": int(os.environ.get("ROOM_BOOKING_CHECK_IN_OPENS_MINUTES", "10")),
    "CHECK_IN_GRACE_MINUTES": int(os.environ.get("ROOM_BOOKING_CHECK_IN_GRACE_MINUTES", "10")),
    "PENALTY_FREE_CANCELLATION_HOURS": float(
        os.environ.get("ROOM_BOOKING_PENALTY_FREE_CANCELLATION_HOURS", "3")
    ),
    "STRIKE_BOOKING_THRESHOLD": int(os.environ.get("ROOM_BOOKING_STRIKE_BOOKING_THRESHOLD", "3")),
    "STRIKE_CEILING": int(os.environ.get("ROOM_BOOKING_STRIKE_CEILING", "5")),
    # "on_demand" reduces on every request, "once_per_day" at most once per calendar day.
    "STRIKE_REDUCTION_MODE": os.environ.get("ROOM_BOOKING_STRIKE_REDUCTION_MODE", "on_demand"),
    "BOOKING_HORIZON_DAYS": _get_optional_int(os.environ.get("ROOM_BOOKING_HORIZON_DAYS"), 28),
    # Lets GET /api/bookings take ?as_of= for previews. Mutating endpoints ignore it.
    "ALLOW_CLIENT_AS_OF": _get_bool(os.environ.get("ROOM_BOOKING_ALLOW_CLIENT_AS_OF"), default=False),
    "USER": {
        "id": os.environ.get("ROOM_BOOKING_USER_ID", "user-1"),
        "name": os.environ.get("ROOM_BOOKING_USER_NAME", "Demo Student"),
        "email": os.environ.get("ROOM_BOOKING_USER_EMAIL", "student@example.edu"),
    },
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{asctime} {levelname} {name} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": os.environ.get("DJANGO_LOG_LEVEL", "WARNING"),
    },
    "loggers": {
        "bookings": {
            "handlers": ["console"],
            "level": os.environ.get("ROOM_BOOKING_LOG_LEVEL", "INFO"),
            "propagate": False,
        },
    },
}
