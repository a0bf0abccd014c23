from .auth_views import LoginAPIView, MeAPIView, RegisterAPIView


__all__ = [
    "LoginAPIView",
    "MeAPIView",
    "RegisterAPIView",
]
