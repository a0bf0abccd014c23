from django.conf import settings
from rest_framework.parsers import JSONParser

from .exceptions import PayloadTooLargeError
from .logging_utils import sanitize_payload


def _content_length(parser_context) -> int:
    request = (parser_context or {}).get("request")
    if request is None:
        return 0
    try:
        return int(request.META.get("CONTENT_LENGTH") or 0)
    except (TypeError, ValueError):
        return 0


class SanitizingJSONParser(JSONParser):
    """
    JSON parser that hands views a sanitized copy of the request body.

    Bodies larger than ``DATA_UPLOAD_MAX_MEMORY_SIZE`` are refused before
    they are read. Django usually raises ``RequestDataTooBig`` first; the
    exception handler maps both to 413.
    """

    def parse(self, stream, media_type=None, parser_context=None):
        limit = settings.DATA_UPLOAD_MAX_MEMORY_SIZE
        if limit is not None and _content_length(parser_context) > limit:
            raise PayloadTooLargeError()

        data = super().parse(stream, media_type=media_type, parser_context=parser_context)
        return sanitize_payload(data)
