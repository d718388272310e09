from __future__ import annotations

from decimal import Decimal


def format_amount(value: Decimal) -> str:
    cents = value.quantize(Decimal("0.01"))
    return f"{cents:.2f}"


def format_rate(rate: Decimal) -> str:
    normalized = rate.normalize()
    # Whole percentages print without a fractional part or exponent.
    if normalized == normalized.to_integral():
        return f"{normalized:.0f}%"
    return f"{normalized:f}%"
