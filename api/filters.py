"""
api/filters.py
==============
django-filter filter sets for list endpoints.
"""

from __future__ import annotations

import django_filters

from student_sessions.models import StudentSessionModel


class StudentSessionFilter(django_filters.FilterSet):
    """Filters for the session history list.

    **Filters** (query params):
        - ``case``: case ID (e.g. ``?case=3``)
        - ``completed``: ``true`` for submitted sessions, ``false`` for open ones
    """

    completed = django_filters.BooleanFilter(
        field_name="end_time",
        lookup_expr="isnull",
        exclude=True,
    )

    class Meta:
        model = StudentSessionModel
        fields = ["case", "completed"]
