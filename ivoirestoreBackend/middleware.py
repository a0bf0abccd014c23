"""Custom middleware helpers for the IvoireStore backend."""

from __future__ import annotations

import logging
import time
from typing import Callable

from utils.throttling import client_ip

logger = logging.getLogger("ivoirestore.requests")


class RequestLoggingMiddleware:
    """Log one line per request: method, path, status, duration and origin.

    5xx responses are logged at ERROR, 4xx at WARNING, everything else at INFO.
    """

    def __init__(self, get_response: Callable):
        self.get_response = get_response

    def __call__(self, request):
        started = time.monotonic()
        response = self.get_response(request)
        duration_ms = (time.monotonic() - started) * 1000

        origin = client_ip(request) or "-"
        line = f"{request.method} {request.get_full_path()} {response.status_code} {duration_ms:.1f}ms - {origin}"

        if response.status_code >= 500:
            logger.error(line)
        elif response.status_code >= 400:
            logger.warning(line)
        else:
            logger.info(line)
        return response
