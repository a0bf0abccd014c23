"""
Bearer token authentication for admin accounts.

``AdminJWTAuthentication`` is the project default: a bad token fails the
request with 401. ``OptionalJWTAuthentication`` applies the same checks but
leaves the request anonymous on any failure; views opt into it per HTTP
method through ``OptionalAuthMixin``.
"""

import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from django.utils.translation import gettext_lazy as _
from rest_framework import exceptions
from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import InvalidToken, TokenError
from rest_framework_simplejwt.settings import api_settings

logger = logging.getLogger(__name__)


class AdminJWTAuthentication(JWTAuthentication):
    """Resolve the bearer token to an Admin loaded fresh from the database."""

    def get_user(self, validated_token):
        try:
            admin_id = validated_token[api_settings.USER_ID_CLAIM]
        except KeyError:
            raise InvalidToken(_("Token contained no recognizable user identification"))

        try:
            return self.user_model.objects.get(**{api_settings.USER_ID_FIELD: admin_id})
        except (self.user_model.DoesNotExist, DjangoValidationError, ValueError, TypeError):
            logger.warning(f"Token presented for missing admin {admin_id}")
            raise exceptions.AuthenticationFailed(
                _("Invalid token: the account no longer exists."), code="user_not_found"
            )


class OptionalJWTAuthentication(AdminJWTAuthentication):
    """Same checks as AdminJWTAuthentication; failures yield an anonymous request."""

    def authenticate(self, request):
        try:
            return super().authenticate(request)
        except (exceptions.AuthenticationFailed, InvalidToken, TokenError) as e:
            logger.debug(f"Optional authentication ignored a bad token: {e}")
            return None


class OptionalAuthMixin:
    """
    Use OptionalJWTAuthentication for the HTTP methods in ``optional_auth_methods``.

    Other methods keep the view's regular authentication classes.
    """

    optional_auth_methods = ()

    def initialize_request(self, request, *args, **kwargs):
        self._auth_method = request.method
        return super().initialize_request(request, *args, **kwargs)

    def get_authenticators(self):
        if getattr(self, "_auth_method", None) in self.optional_auth_methods:
            return [OptionalJWTAuthentication()]
        return super().get_authenticators()
