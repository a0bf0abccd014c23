import uuid
from decimal import Decimal, InvalidOperation
from typing import Optional

_TRUE = ("true", "1", "yes")
_FALSE = ("false", "0", "no")


def parse_bool(value) -> Optional[bool]:
    """``"true"``/``"false"`` (and 1/0, yes/no) -> bool; anything else -> None."""
    if value is None:
        return None
    value = str(value).strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    return None


def parse_decimal(value) -> Optional[Decimal]:
    """Finite decimal or None; unparseable filters are ignored."""
    if value in (None, ""):
        return None
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    return number if number.is_finite() else None


def parse_uuid(value) -> Optional[str]:
    """Canonical UUID string or None."""
    if not value:
        return None
    try:
        return str(uuid.UUID(str(value).strip()))
    except ValueError:
        return None
