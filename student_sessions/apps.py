"""
student_sessions/apps.py
========================
Django app configuration for student examination sessions.
"""

from django.apps import AppConfig


class StudentSessionsConfig(AppConfig):
    """Configuration for the ``student_sessions`` application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "student_sessions"
    verbose_name = "Student Sessions"
