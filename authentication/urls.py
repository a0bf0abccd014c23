from django.urls import re_path

from authentication.api.views import LoginAPIView, MeAPIView, RegisterAPIView

app_name = "authentication"

urlpatterns = [
    re_path(r"^register/?$", RegisterAPIView.as_view(), name="register"),
    re_path(r"^login/?$", LoginAPIView.as_view(), name="login"),
    re_path(r"^me/?$", MeAPIView.as_view(), name="me"),
]
