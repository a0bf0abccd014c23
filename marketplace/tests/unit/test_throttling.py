import pytest
from django.core.cache import cache
from rest_framework.test import APIRequestFactory

from utils.throttling import FixedWindowIPThrottle, client_ip


class TinyThrottle(FixedWindowIPThrottle):
    scope = "tiny"
    rate = "3/m"


def _request(ip="10.0.0.1", forwarded_for=None):
    extra = {"REMOTE_ADDR": ip}
    if forwarded_for:
        extra["HTTP_X_FORWARDED_FOR"] = forwarded_for
    return APIRequestFactory().get("/api/products", **extra)


@pytest.mark.unit
class TestFixedWindowIPThrottle:
    def setup_method(self):
        cache.clear()

    @pytest.mark.parametrize(
        "rate, expected",
        [("500/15m", (500, 900)), ("30/h", (30, 3600)), ("10/s", (10, 1)), ("5/2d", (5, 172800))],
    )
    def test_parse_rate(self, rate, expected):
        assert TinyThrottle().parse_rate(rate) == expected

    def test_parse_rate_rejects_garbage(self):
        with pytest.raises(ValueError):
            TinyThrottle().parse_rate("lots")

    def test_blocks_after_limit_within_window(self):
        throttle = TinyThrottle()
        throttle.timer = lambda: 1200.0
        request = _request()

        assert [throttle.allow_request(request, None) for _ in range(3)] == [True, True, True]
        assert throttle.allow_request(request, None) is False

    def test_counts_are_per_ip(self):
        throttle = TinyThrottle()
        throttle.timer = lambda: 1200.0
        for _ in range(3):
            throttle.allow_request(_request("10.0.0.1"), None)

        assert throttle.allow_request(_request("10.0.0.1"), None) is False
        assert throttle.allow_request(_request("10.0.0.2"), None) is True

    def test_forwarded_for_header_does_not_change_the_counter(self):
        throttle = TinyThrottle()
        throttle.timer = lambda: 1200.0
        for i in range(3):
            throttle.allow_request(_request("10.0.0.1", forwarded_for=f"1.2.3.{i}"), None)

        assert throttle.allow_request(_request("10.0.0.1", forwarded_for="1.2.3.99"), None) is False

    def test_new_window_resets_count(self):
        throttle = TinyThrottle()
        throttle.timer = lambda: 1200.0
        for _ in range(4):
            throttle.allow_request(_request(), None)

        throttle.timer = lambda: 1260.0
        assert throttle.allow_request(_request(), None) is True

    def test_wait_is_time_left_in_window(self):
        throttle = TinyThrottle()
        throttle.timer = lambda: 1230.0
        throttle.allow_request(_request(), None)
        # Window [1200, 1260)
        assert throttle.wait() == 30.0


@pytest.mark.unit
class TestClientIp:
    def test_uses_remote_addr(self):
        assert client_ip(_request("10.0.0.7")) == "10.0.0.7"

    def test_ignores_forwarded_for_without_trusted_proxies(self):
        assert client_ip(_request("10.0.0.7", forwarded_for="6.6.6.6")) == "10.0.0.7"
