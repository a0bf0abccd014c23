import io
import json
from types import SimpleNamespace

import pytest

from utils.exceptions import PayloadTooLargeError
from utils.logging_utils import clean_text, mask_value, sanitize_payload
from utils.parsers import SanitizingJSONParser


@pytest.mark.unit
class TestSanitizePayload:
    def test_trims_and_escapes_strings(self):
        assert sanitize_payload({"name": "  <b>Aya</b> "}) == {"name": "&lt;b&gt;Aya&lt;/b&gt;"}

    def test_drops_operator_keys(self):
        cleaned = sanitize_payload({"$where": "1", "a.b": 2, "ok": 3})
        assert cleaned == {"ok": 3}

    def test_recurses_into_nested_containers(self):
        cleaned = sanitize_payload({"images": [" x ", {"$gt": 1, "url": "<y>"}]})
        assert cleaned == {"images": ["x", {"url": "&lt;y&gt;"}]}

    def test_password_fields_untouched(self):
        cleaned = sanitize_payload({"password": "  <secret>  ", "email": " a@b.ci "})
        assert cleaned["password"] == "  <secret>  "
        assert cleaned["email"] == "a@b.ci"

    def test_does_not_mutate_input(self):
        payload = {"name": " x ", "$bad": 1, "nested": {"v": " y "}}
        snapshot = json.loads(json.dumps(payload))
        sanitize_payload(payload)
        assert payload == snapshot

    def test_non_string_scalars_pass_through(self):
        assert sanitize_payload({"rating": 5, "active": True, "price": None}) == {
            "rating": 5,
            "active": True,
            "price": None,
        }


@pytest.mark.unit
def test_clean_text():
    assert clean_text("  a<b>c ") == "a&lt;b&gt;c"


@pytest.mark.unit
@pytest.mark.parametrize(
    "value, expected",
    [
        ("jean@example.com", "je***@example.com"),
        ("short", "***"),
        ("a-very-long-token-value", "a-ve...alue"),
    ],
)
def test_mask_value(value, expected):
    assert mask_value(value) == expected


@pytest.mark.unit
def test_parser_returns_sanitized_copy():
    body = json.dumps({"name": " <i>Kofi</i> ", "$ne": 1}).encode()
    parsed = SanitizingJSONParser().parse(io.BytesIO(body), "application/json", {})
    assert parsed == {"name": "&lt;i&gt;Kofi&lt;/i&gt;"}


@pytest.mark.unit
def test_parser_refuses_oversized_body():
    context = {"request": SimpleNamespace(META={"CONTENT_LENGTH": str(20 * 1024)})}
    with pytest.raises(PayloadTooLargeError):
        SanitizingJSONParser().parse(io.BytesIO(b"{}"), "application/json", context)
