"""
Fixed-window, per-IP request throttles.

DRF's ``SimpleRateThrottle`` keeps a sliding request history per client;
these throttles count requests in fixed windows instead, with one counter
per (scope, ip, window) in the Django cache. Rates accept a multiplier on
the period, e.g. ``"500/15m"`` or ``"30/h"``.
"""

import logging
import re

from rest_framework.throttling import BaseThrottle, SimpleRateThrottle

logger = logging.getLogger(__name__)

_PERIODS = {"s": 1, "m": 60, "h": 3600, "d": 86400}
_RATE_RE = re.compile(r"^(?P<num>\d+)/(?P<mult>\d*)(?P<unit>[smhd])")


def client_ip(request) -> str:
    """Caller address, honouring X-Forwarded-For only behind ``NUM_PROXIES`` proxies."""
    return BaseThrottle().get_ident(request)


class FixedWindowIPThrottle(SimpleRateThrottle):
    cache_format = "throttle_%(scope)s_%(ident)s"

    def parse_rate(self, rate):
        if rate is None:
            return (None, None)
        match = _RATE_RE.match(rate)
        if not match:
            raise ValueError(f"Invalid throttle rate: {rate!r}")
        multiplier = int(match.group("mult") or 1)
        return int(match.group("num")), multiplier * _PERIODS[match.group("unit")]

    def get_cache_key(self, request, view):
        return self.cache_format % {"scope": self.scope, "ident": self.get_ident(request)}

    def allow_request(self, request, view):
        if self.rate is None:
            return True

        self.key = self.get_cache_key(request, view)
        if self.key is None:
            return True

        self.now = self.timer()
        window_start = int(self.now // self.duration) * self.duration
        self.window_end = window_start + self.duration
        window_key = f"{self.key}_{window_start}"

        if self.cache.add(window_key, 1, self.duration):
            count = 1
        else:
            try:
                count = self.cache.incr(window_key)
            except ValueError:
                # Counter expired between add() and incr()
                self.cache.set(window_key, 1, self.duration)
                count = 1

        if count > self.num_requests:
            logger.warning(f"Rate limit exceeded: scope={self.scope} key={self.key} count={count}")
            return False
        return True

    def wait(self):
        return max(self.window_end - self.now, 0)


class GlobalIPThrottle(FixedWindowIPThrottle):
    """Every API request: 500 per 15 minutes per IP."""

    scope = "global"


class AuthIPThrottle(FixedWindowIPThrottle):
    """Login and registration: 30 per hour per IP."""

    scope = "auth"
