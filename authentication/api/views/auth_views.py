from drf_spectacular.utils import OpenApiExample, OpenApiResponse, extend_schema
from rest_framework import permissions, status
from rest_framework.views import APIView

from authentication.api.serializers import AdminSerializer, AuthResponseSerializer, LoginSerializer, RegisterSerializer
from authentication.domain.services.auth_service import AuthService
from authentication.jwt_authentication import OptionalAuthMixin
from authentication.permissions import IsAdminAuthenticated
from utils.exceptions import AuthError, ConflictError, ForbiddenError, raise_for_result
from utils.responses import envelope
from utils.throttling import AuthIPThrottle, GlobalIPThrottle

REGISTER_ERRORS = {
    "conflict": ConflictError,
    "forbidden": ForbiddenError,
}


# Dependency Injection Helper
def get_auth_service():
    """Factory to get an AuthService instance."""
    return AuthService()


def _auth_payload(result, http_status):
    return envelope(
        data=AdminSerializer(result.admin).data,
        message=result.message,
        http_status=http_status,
        token=result.token,
    )


_ADMIN_EXAMPLE = {
    "id": "123e4567-e89b-12d3-a456-426614174000",
    "name": "Awa Kone",
    "email": "awa@ivoirestore.com",
    "role": "admin",
    "capabilities": ["manage_catalog", "manage_orders", "upload_images", "view_stats"],
}


class RegisterAPIView(OptionalAuthMixin, APIView):
    permission_classes = [permissions.AllowAny]
    throttle_classes = [GlobalIPThrottle, AuthIPThrottle]
    optional_auth_methods = ("POST",)

    @extend_schema(
        operation_id="auth_register",
        summary="Register an admin account",
        description="""
        Create an admin account and return a bearer token.

        Anonymous callers always get the `admin` role. A `super_admin` can
        only be created by an authenticated super admin.

        **Rate Limiting:** 30 requests/hour per IP
        """,
        request=RegisterSerializer,
        responses={
            201: OpenApiResponse(
                response=AuthResponseSerializer,
                description="Account created",
                examples=[
                    OpenApiExample(
                        "Registered",
                        value={
                            "success": True,
                            "message": "Admin account created successfully.",
                            "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                            "data": _ADMIN_EXAMPLE,
                        },
                    )
                ],
            ),
            400: OpenApiResponse(description="Invalid data or email already registered"),
            403: OpenApiResponse(description="Role not allowed for this caller"),
        },
        tags=["Authentication"],
    )
    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = get_auth_service().register(caller=request.user, **serializer.validated_data)
        if not result.success:
            raise REGISTER_ERRORS.get(result.error_code, ConflictError)(result.error)

        return _auth_payload(result, status.HTTP_201_CREATED)


class LoginAPIView(APIView):
    authentication_classes = []
    permission_classes = [permissions.AllowAny]
    throttle_classes = [GlobalIPThrottle, AuthIPThrottle]

    @extend_schema(
        operation_id="auth_login",
        summary="Login with email and password",
        description="""
        Authenticate an admin and return a fresh bearer token.

        Unknown email and wrong password return the same 401 error.

        **Rate Limiting:** 30 requests/hour per IP
        """,
        request=LoginSerializer,
        responses={
            200: OpenApiResponse(
                response=AuthResponseSerializer,
                description="Login successful",
                examples=[
                    OpenApiExample(
                        "Successful Login",
                        value={
                            "success": True,
                            "message": "Login successful.",
                            "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                            "data": _ADMIN_EXAMPLE,
                        },
                    )
                ],
            ),
            401: OpenApiResponse(description="Invalid credentials"),
        },
        tags=["Authentication"],
    )
    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = get_auth_service().login(**serializer.validated_data)
        if not result.success:
            raise AuthError(result.error)

        return _auth_payload(result, status.HTTP_200_OK)


class MeAPIView(APIView):
    permission_classes = [IsAdminAuthenticated]

    @extend_schema(
        operation_id="auth_me",
        summary="Current admin profile",
        responses={200: AdminSerializer, 401: OpenApiResponse(description="Missing or invalid token")},
        tags=["Authentication"],
    )
    def get(self, request):
        return envelope(data=AdminSerializer(request.user).data)
