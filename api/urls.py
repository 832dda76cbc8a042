"""
api/urls.py
===========
URL configuration for the Virtual Patient API.

All endpoints are prefixed with ``/api/`` by the project-level router.
"""

from django.urls import path

from . import views

app_name = "api"

urlpatterns = [
    path("", views.api_index_view, name="index"),
    # cases
    path("cases/", views.CaseListAPIView.as_view(), name="case-list"),
    path("cases/<int:case_id>/", views.CaseDetailAPIView.as_view(), name="case-detail"),
    path("cases/<int:case_id>/examine/", views.ExamineAPIView.as_view(), name="case-examine"),
    path(
        "cases/<int:case_id>/parse-input/",
        views.ParseInputAPIView.as_view(),
        name="case-parse-input",
    ),
    # sessions
    path("sessions/", views.SessionListCreateAPIView.as_view(), name="session-list"),
    path(
        "sessions/<int:session_id>/maneuver/",
        views.RecordManeuverAPIView.as_view(),
        name="session-maneuver",
    ),
    path(
        "sessions/<int:session_id>/submit/",
        views.SubmitDiagnosisAPIView.as_view(),
        name="session-submit",
    ),
    path(
        "sessions/<int:session_id>/review/",
        views.SessionReviewAPIView.as_view(),
        name="session-review",
    ),
    # media generation
    path("media/status/", views.MediaStatusAPIView.as_view(), name="media-status"),
    path(
        "media/available-types/",
        views.MediaTypesAPIView.as_view(),
        name="media-available-types",
    ),
    path(
        "media/generate-image/",
        views.GenerateImageAPIView.as_view(),
        name="media-generate-image",
    ),
    path(
        "media/generate-custom-image/",
        views.GenerateCustomImageAPIView.as_view(),
        name="media-generate-custom-image",
    ),
    path(
        "media/generate-video/",
        views.GenerateVideoAPIView.as_view(),
        name="media-generate-video",
    ),
    path(
        "media/image-to-video/",
        views.ImageToVideoAPIView.as_view(),
        name="media-image-to-video",
    ),
]
