from typing import Any, Iterable

# Keys whose values are passed through untouched
UNSANITIZED_KEYS = frozenset({"password", "current_password", "new_password"})


def mask_value(value: str) -> str:
    if not isinstance(value, str):
        return value
    if "@" in value:  # email
        name, _, domain = value.partition("@")
        return (name[:2] + "***@" + domain) if name else "***@" + domain
    if len(value) > 12:
        return value[:4] + "..." + value[-4:]
    return "***"


def clean_text(value: str) -> str:
    """Trim and neutralise HTML tag delimiters."""
    return value.strip().replace("<", "&lt;").replace(">", "&gt;")


def _is_operator_key(key: Any) -> bool:
    return isinstance(key, str) and (key.startswith("$") or "." in key)


def sanitize_payload(payload: Any, skip_keys: Iterable[str] = UNSANITIZED_KEYS) -> Any:
    """
    Return a cleaned copy of a decoded request payload.

    Strings are trimmed and HTML-escaped, operator-looking keys
    (``$where``, ``a.b``) are dropped, containers are rebuilt. The input is
    never modified.
    """
    skip_keys = frozenset(skip_keys)
    if isinstance(payload, dict):
        cleaned = {}
        for key, value in payload.items():
            if _is_operator_key(key):
                continue
            cleaned[key] = value if key in skip_keys else sanitize_payload(value, skip_keys)
        return cleaned
    if isinstance(payload, list):
        return [sanitize_payload(item, skip_keys) for item in payload]
    if isinstance(payload, str):
        return clean_text(payload)
    return payload
