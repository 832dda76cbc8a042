"""
cases/admin.py
==============
Django admin configuration for the case bank.

Customized CaseModelAdmin with:
    - Inline (read-only once saved) exam findings.
    - Key-finding selection via filter_horizontal, limited to the
      case's own findings.
"""

from django.contrib import admin
from django.utils.html import format_html

from .models import CaseModel, ExamFindingModel


# ─────────────────────────────────────────────────────────────────────
# Exam Finding Admin
# ─────────────────────────────────────────────────────────────────────


_FINDING_FIELDS: list[str] = [
    "case",
    "region",
    "maneuver",
    "target",
    "location",
    "description",
    "finding_type",
    "media_url",
    "is_abnormal",
]


@admin.register(ExamFindingModel)
class ExamFindingModelAdmin(admin.ModelAdmin):
    """Admin view for :class:`ExamFindingModel`.

    Findings are immutable once created, so an existing finding opens
    view-only: every field is read-only and no save buttons are shown.
    """

    list_display: list[str] = [
        "case",
        "region",
        "maneuver",
        "target",
        "location",
        "abnormal_badge",
    ]
    list_filter: list[str] = ["region", "maneuver", "finding_type", "is_abnormal"]
    search_fields: list[str] = ["description", "target", "location", "case__title"]
    list_per_page: int = 25

    def get_readonly_fields(self, request, obj=None):
        if obj is not None:
            return _FINDING_FIELDS + ["created_at"]
        return ["created_at"]

    def has_change_permission(self, request, obj=None) -> bool:
        # existing rows open view-only, without save buttons
        if obj is not None:
            return False
        return super().has_change_permission(request, obj)

    @admin.display(description="Abnormal")
    def abnormal_badge(self, obj: ExamFindingModel) -> str:
        """Render a coloured badge for the abnormal flag."""
        colour = "#ef4444" if obj.is_abnormal else "#10b981"
        label = "Abnormal" if obj.is_abnormal else "Normal"
        return format_html(
            '<span style="color:{}; font-weight:600;">{}</span>',
            colour,
            label,
        )


class ExamFindingInline(admin.TabularInline):
    """Tabular inline listing a case's findings."""

    model = ExamFindingModel
    extra = 0
    fields: list[str] = [
        "region",
        "maneuver",
        "target",
        "location",
        "finding_type",
        "is_abnormal",
    ]

    def get_readonly_fields(self, request, obj=None):
        if obj is not None:
            return self.fields
        return []

    def has_delete_permission(self, request, obj=None) -> bool:
        return False


# ─────────────────────────────────────────────────────────────────────
# Case Admin
# ─────────────────────────────────────────────────────────────────────


@admin.register(CaseModel)
class CaseModelAdmin(admin.ModelAdmin):
    """Admin view for :class:`CaseModel`."""

    list_display: list[str] = [
        "title",
        "age",
        "sex",
        "chief_complaint",
        "diagnosis",
        "key_finding_count",
        "created_at",
    ]
    list_filter: list[str] = ["sex", "created_at"]
    search_fields: list[str] = ["title", "chief_complaint", "diagnosis"]
    filter_horizontal: tuple[str, ...] = ("key_findings",)
    readonly_fields: list[str] = ["created_at", "updated_at"]
    inlines = [ExamFindingInline]
    list_per_page: int = 25

    fieldsets = (
        (
            "Presentation",
            {"fields": ("title", "age", "sex", "chief_complaint")},
        ),
        (
            "History",
            {
                "fields": (
                    "hpi",
                    "pmh",
                    "medications",
                    "allergies",
                    "social_history",
                    "family_history",
                ),
            },
        ),
        (
            "Vital Signs",
            {"fields": ("bp", "hr", "rr", "temp", "spo2")},
        ),
        (
            "Answer Key",
            {
                "fields": ("diagnosis", "key_findings"),
                "description": "Hidden from students until a diagnosis is submitted.",
            },
        ),
        (
            "Timestamps",
            {"fields": ("created_at", "updated_at")},
        ),
    )

    def formfield_for_manytomany(self, db_field, request, **kwargs):
        if db_field.name == "key_findings":
            case_id = request.resolver_match.kwargs.get("object_id")
            kwargs["queryset"] = ExamFindingModel.objects.filter(case_id=case_id)
        return super().formfield_for_manytomany(db_field, request, **kwargs)

    @admin.display(description="Key findings")
    def key_finding_count(self, obj: CaseModel) -> int:
        """Display the number of key findings."""
        return obj.key_findings.count()
