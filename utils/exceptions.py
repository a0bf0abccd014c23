"""
Error taxonomy and the centralized DRF exception handler.

Every error raised while serving an API request ends up in
``api_exception_handler``, which converts framework, ORM and token-layer
failures into one of the taxonomy classes below and renders the common
``{"success": false, "message": ..., "errors": [...]}`` envelope.
"""

import logging
import traceback

from django.conf import settings
from django.core.exceptions import ObjectDoesNotExist, RequestDataTooBig
from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import IntegrityError
from django.http import Http404, JsonResponse
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework_simplejwt.exceptions import InvalidToken, TokenError

logger = logging.getLogger(__name__)


class ValidationError(exceptions.APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid data."
    default_code = "validation_error"

    def __init__(self, detail=None, errors=None, code=None):
        super().__init__(detail, code)
        self.errors = errors or []


class NotFoundError(exceptions.APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Resource not found."
    default_code = "not_found"


class AuthError(exceptions.APIException):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Authentication required."
    default_code = "not_authenticated"


class ForbiddenError(exceptions.APIException):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "You do not have permission to perform this action."
    default_code = "permission_denied"


class ConflictError(exceptions.APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "A resource with this value already exists."
    default_code = "conflict"


class UploadError(exceptions.APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Upload failed."
    default_code = "upload_error"


class PayloadTooLargeError(exceptions.APIException):
    status_code = status.HTTP_413_REQUEST_ENTITY_TOO_LARGE
    default_detail = "Request body too large."
    default_code = "payload_too_large"


class InternalError(exceptions.APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal server error."
    default_code = "internal_error"


def flatten_errors(detail, prefix=None):
    """Turn DRF's nested ``ValidationError.detail`` into ``[{field, message}]``."""
    errors = []
    if isinstance(detail, dict):
        for key, value in detail.items():
            field = f"{prefix}.{key}" if prefix else str(key)
            errors.extend(flatten_errors(value, field))
    elif isinstance(detail, (list, tuple)):
        for item in detail:
            errors.extend(flatten_errors(item, prefix))
    else:
        errors.append({"field": prefix, "message": str(detail)})
    return errors


def _translate(exc):
    """Map storage-layer, token-layer and framework signals onto the taxonomy."""
    if isinstance(exc, (Http404, ObjectDoesNotExist)):
        return NotFoundError()
    if isinstance(exc, RequestDataTooBig):
        return PayloadTooLargeError()
    if isinstance(exc, DjangoPermissionDenied):
        return ForbiddenError(str(exc) or None)
    if isinstance(exc, IntegrityError):
        return ConflictError()
    if isinstance(exc, DjangoValidationError):
        errors = flatten_errors(exc.message_dict if hasattr(exc, "error_dict") else exc.messages)
        return ValidationError(errors=errors)
    if isinstance(exc, TokenError):
        return AuthError("Invalid or expired token.")
    if isinstance(exc, exceptions.ValidationError):
        return ValidationError(errors=flatten_errors(exc.detail))
    if isinstance(exc, (exceptions.NotAuthenticated, exceptions.AuthenticationFailed)):
        translated = AuthError("Invalid or expired token." if isinstance(exc, InvalidToken) else exc.detail)
        translated.status_code = exc.status_code
        translated.auth_header = getattr(exc, "auth_header", None)
        return translated
    if isinstance(exc, exceptions.PermissionDenied):
        return ForbiddenError(exc.detail)
    if isinstance(exc, exceptions.NotFound):
        return NotFoundError(exc.detail)
    return exc


def _message_for(exc):
    detail = exc.detail
    if isinstance(detail, dict):
        detail = detail.get("detail", exc.default_detail)
    if isinstance(detail, (list, tuple)):
        detail = detail[0] if detail else exc.default_detail
    return str(detail)


def api_exception_handler(exc, context):
    """REST_FRAMEWORK["EXCEPTION_HANDLER"] entry point."""
    request = context.get("request")
    where = f"{request.method} {request.get_full_path()}" if request is not None else "-"

    exc = _translate(exc)

    if isinstance(exc, exceptions.APIException):
        body = {"success": False, "message": _message_for(exc)}
        if isinstance(exc, ValidationError):
            body["message"] = "Invalid data." if exc.errors else body["message"]
            if exc.errors:
                body["errors"] = exc.errors

        headers = {}
        if getattr(exc, "auth_header", None):
            headers["WWW-Authenticate"] = exc.auth_header
        if isinstance(exc, exceptions.Throttled):
            body["message"] = "Too many requests from this IP address. Please try again later."
            if exc.wait is not None:
                headers["Retry-After"] = "%d" % exc.wait
                body["retry_after"] = int(exc.wait)

        if exc.status_code >= 500:
            logger.error(f"{body['message']} - {where}", exc_info=exc)
        else:
            logger.warning(f"{exc.status_code} {body['message']} - {where}")
        return Response(body, status=exc.status_code, headers=headers)

    # Anything unanticipated
    logger.error(f"Unhandled error: {exc} - {where}", exc_info=exc)
    body = {"success": False, "message": InternalError.default_detail}
    if settings.DEBUG:
        body["message"] = str(exc) or InternalError.default_detail
        body["stack"] = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return Response(body, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


def raise_for_result(result, status_map):
    """
    Raise the taxonomy error matching a failed ``ServiceResult``.

    Args:
        result: ServiceResult returned by a service call
        status_map: mapping of service error code -> exception class

    Returns:
        The result value when the result is ok
    """
    if result.ok:
        return result.value
    exc_class = status_map.get(result.error, InternalError)
    raise exc_class(result.error_detail)


def json_not_found(request, exception=None):
    """handler404: unknown routes answer in the API envelope."""
    return JsonResponse(
        {"success": False, "message": f"Route not found: {request.method} {request.path}"},
        status=status.HTTP_404_NOT_FOUND,
    )


def json_server_error(request):
    """handler500 for errors raised outside DRF views."""
    return JsonResponse(
        {"success": False, "message": InternalError.default_detail},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
