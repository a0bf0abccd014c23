"""
URL configuration for ivoirestoreBackend project.

Everything lives under ``/api/``; unknown routes fall through to the JSON
404 handler.
"""

from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularRedocView, SpectacularSwaggerView

from marketplace.api.views.health_views import WelcomeView

urlpatterns = [
    path("", WelcomeView.as_view(), name="welcome"),
    # API Documentation
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    path("api/redoc/", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),
    # API endpoints
    path("api/auth/", include("authentication.urls")),
    path("api/", include("marketplace.urls")),
]

handler404 = "utils.exceptions.json_not_found"
handler500 = "utils.exceptions.json_server_error"
