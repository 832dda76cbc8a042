"""
media_generation/admin.py
=========================
Django admin configuration for generated media records.
"""

from django.contrib import admin

from .models import GeneratedMediaModel


@admin.register(GeneratedMediaModel)
class GeneratedMediaModelAdmin(admin.ModelAdmin):
    """Admin view for :class:`GeneratedMediaModel`."""

    list_display: list[str] = [
        "media_kind",
        "media_type",
        "local_path",
        "created_at",
    ]
    list_filter: list[str] = ["media_kind", "created_at"]
    search_fields: list[str] = ["media_type", "prompt", "local_path"]
    readonly_fields: list[str] = ["created_at"]
    list_per_page: int = 25
