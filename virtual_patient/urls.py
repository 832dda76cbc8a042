"""
URL configuration for the virtual_patient project.

Routes:
    /health     → Liveness probe
    /api/       → REST API (api app)
    /media/     → Generated and seeded media (DEBUG only)
    /admin/     → Django Admin
    anything else → JSON 404 envelope
"""

from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import include, path, re_path

from api import views as api_views

urlpatterns = [
    # Django Admin
    path("admin/", admin.site.urls),
    # Liveness
    path("health", api_views.health_view, name="health"),
    # REST API (DRF)
    path("api/", include("api.urls", namespace="api")),
]

# Serve audio/image/video assets in development
urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)

# any other slash-terminated path gets the JSON 404, also when DEBUG is on
urlpatterns += [
    re_path(r"^(?!admin/|media/).*/$", api_views.not_found_view),
]

handler404 = "api.views.not_found_view"
handler500 = "api.views.server_error_view"
