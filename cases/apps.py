"""
cases/apps.py
=============
Django app configuration for the patient case bank.
"""

from django.apps import AppConfig


class CasesConfig(AppConfig):
    """Configuration for the ``cases`` application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "cases"
    verbose_name = "Patient Cases"
