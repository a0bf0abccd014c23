"""
Commission arithmetic.

The platform keeps ``rate`` percent of an order's total price, rounded
half-up to a whole FCFA amount.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation


def _to_decimal(value):
    if value is None or value == "":
        return None
    try:
        number = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    if not number.is_finite() or number == 0:
        return None
    return number


def calculate_commission(product_price, commission_rate) -> int:
    """
    Commission owed on ``product_price`` at ``commission_rate`` percent.

    Returns 0 when either input is missing, zero or NaN.

    >>> calculate_commission(1000, 10)
    100
    >>> calculate_commission(999, 7)
    70
    """
    price = _to_decimal(product_price)
    rate = _to_decimal(commission_rate)
    if price is None or rate is None:
        return 0
    return int((price * rate / Decimal(100)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
