from .auth_serializers import AdminSerializer, AuthResponseSerializer, LoginSerializer, RegisterSerializer

__all__ = [
    "AdminSerializer",
    "AuthResponseSerializer",
    "LoginSerializer",
    "RegisterSerializer",
]
