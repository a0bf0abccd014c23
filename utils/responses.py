from rest_framework import status
from rest_framework.response import Response


def envelope(data=None, message=None, http_status=status.HTTP_200_OK, **extra):
    """Build the ``{"success": true, ...}`` response every endpoint returns."""
    body = {"success": True}
    if message is not None:
        body["message"] = message
    body.update(extra)
    if data is not None:
        body["data"] = data
    return Response(body, status=http_status)


def page_envelope(page, data, message=None):
    """Envelope for a ``utils.pagination.paginate`` result with serialized rows."""
    return envelope(
        data=data,
        message=message,
        count=page["count"],
        total=page["total"],
        total_pages=page["total_pages"],
        current_page=page["current_page"],
    )
