"""
media_generation/apps.py
========================
Django app configuration for generated media assets.
"""

from django.apps import AppConfig


class MediaGenerationConfig(AppConfig):
    """Configuration for the ``media_generation`` application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "media_generation"
    verbose_name = "Media Generation"
