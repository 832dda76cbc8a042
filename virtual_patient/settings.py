"""
virtual_patient/settings.py
===========================
Django settings for the Virtual Patient examination simulator.

Values are read from the environment; a ``.env`` file at the project
root is loaded first when present.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR: Path = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / ".env")


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_list(name: str, default: str = "") -> list[str]:
    raw: str = os.environ.get(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


# ─────────────────────────────────────────────────────────────────────
# Core
# ─────────────────────────────────────────────────────────────────────

SECRET_KEY: str = os.environ.get(
    "DJANGO_SECRET_KEY",
    "django-insecure-virtual-patient-dev-key",
)
DEBUG: bool = _env_bool("DJANGO_DEBUG", default=True)
ALLOWED_HOSTS: list[str] = _env_list("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver")

# "development" exposes exception messages in 500 responses
APP_ENV: str = os.environ.get("APP_ENV", "production")

INSTALLED_APPS: list[str] = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    # third party
    "corsheaders",
    "rest_framework",
    "django_filters",
    # local
    "cases",
    "student_sessions",
    "media_generation",
    "api",
]

MIDDLEWARE: list[str] = [
    "django.middleware.security.SecurityMiddleware",
    "corsheaders.middleware.CorsMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF: str = "virtual_patient.urls"
WSGI_APPLICATION: str = "virtual_patient.wsgi.application"

TEMPLATES: list[dict] = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

# ─────────────────────────────────────────────────────────────────────
# Database
# ─────────────────────────────────────────────────────────────────────

DATABASES: dict = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.environ.get("DATABASE_PATH", str(BASE_DIR / "db.sqlite3")),
    }
}

DEFAULT_AUTO_FIELD: str = "django.db.models.BigAutoField"

# ─────────────────────────────────────────────────────────────────────
# I18N / time
# ─────────────────────────────────────────────────────────────────────

LANGUAGE_CODE: str = "en-us"
TIME_ZONE: str = "UTC"
USE_I18N: bool = True
USE_TZ: bool = True

# ─────────────────────────────────────────────────────────────────────
# Static & media files
# ─────────────────────────────────────────────────────────────────────

STATIC_URL: str = "static/"
STATIC_ROOT: Path = BASE_DIR / "staticfiles"

# generated images/videos and seeded audio clips live under MEDIA_ROOT
MEDIA_URL: str = "/media/"
MEDIA_ROOT: Path = Path(os.environ.get("MEDIA_ROOT", str(BASE_DIR / "media")))

# ─────────────────────────────────────────────────────────────────────
# Django REST Framework
# ─────────────────────────────────────────────────────────────────────

REST_FRAMEWORK: dict = {
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
        "rest_framework.parsers.FormParser",
    ],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "UNAUTHENTICATED_USER": None,
    "DEFAULT_FILTER_BACKENDS": [
        "django_filters.rest_framework.DjangoFilterBackend",
    ],
    "EXCEPTION_HANDLER": "api.exceptions.envelope_exception_handler",
}

# ─────────────────────────────────────────────────────────────────────
# CORS (the SPA is served from a different origin in development)
# ─────────────────────────────────────────────────────────────────────

CORS_ALLOWED_ORIGINS: list[str] = _env_list(
    "CORS_ALLOWED_ORIGINS",
    "http://localhost:5173,http://localhost:3000",
)

# ─────────────────────────────────────────────────────────────────────
# Media generation (Replicate)
# ─────────────────────────────────────────────────────────────────────

REPLICATE_API_TOKEN: str = os.environ.get("REPLICATE_API_TOKEN", "")
MEDIA_DOWNLOAD_TIMEOUT: int = int(os.environ.get("MEDIA_DOWNLOAD_TIMEOUT", "60"))

# ─────────────────────────────────────────────────────────────────────
# Logging
# ─────────────────────────────────────────────────────────────────────

LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()

LOGGING: dict = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
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
        "level": LOG_LEVEL,
    },
    "loggers": {
        "django.request": {
            "handlers": ["console"],
            "level": "WARNING",
            "propagate": False,
        },
    },
}
