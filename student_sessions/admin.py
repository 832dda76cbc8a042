"""
student_sessions/admin.py
=========================
Django admin configuration for student session models.
"""

from django.contrib import admin

from .models import PerformedManeuverModel, StudentSessionModel


class PerformedManeuverInline(admin.TabularInline):
    """Read-only list of maneuvers in timestamp order."""

    model = PerformedManeuverModel
    extra = 0
    can_delete = False
    readonly_fields: list[str] = ["finding", "input_method", "raw_input", "timestamp"]

    def has_add_permission(self, request, obj=None) -> bool:
        return False


@admin.register(StudentSessionModel)
class StudentSessionModelAdmin(admin.ModelAdmin):
    """Admin view for :class:`StudentSessionModel`."""

    list_display: list[str] = [
        "id",
        "case",
        "start_time",
        "end_time",
        "overall_score",
    ]
    list_filter: list[str] = ["case", "start_time"]
    search_fields: list[str] = ["case__title", "submitted_diagnosis"]
    readonly_fields: list[str] = [
        "start_time",
        "end_time",
        "completeness",
        "efficiency",
        "diagnosis_accuracy",
        "overall_score",
        "feedback",
    ]
    inlines = [PerformedManeuverInline]
    list_per_page: int = 25
