from __future__ import annotations

from decimal import Context, Decimal, InvalidOperation, localcontext
from typing import Optional


# Accepted numbers lie within 10**-MAX_EXPONENT .. 10**MAX_EXPONENT, so any sum or
# difference of two of them fits in EXACT_PRECISION digits without rounding.
MAX_EXPONENT = 400
EXACT_PRECISION = 2 * MAX_EXPONENT + 10


def exact_context():
    return localcontext(Context(prec=EXACT_PRECISION))


def parse_number(x) -> Optional[Decimal]:
    """Parse a raw form value into a finite Decimal, or None when absent/invalid."""
    if x is None or isinstance(x, bool):
        return None
    if isinstance(x, Decimal):
        value = x
    else:
        text = str(x).strip()
        if not text:
            return None
        try:
            value = Decimal(text)
        except InvalidOperation:
            return None
    if not value.is_finite():
        return None
    if value.adjusted() > MAX_EXPONENT or value.as_tuple().exponent < -MAX_EXPONENT:
        return None
    return value


def parse_quantity(x) -> Optional[int]:
    """Quantities must be positive whole numbers ("4", 4, "4.0")."""
    value = parse_number(x)
    if value is None or value <= 0:
        return None
    if value != value.to_integral_value():
        return None
    return int(value)


def plain_number(x) -> str:
    """Render a number without exponent, unit or thousands separator: 30, 29.25."""
    if isinstance(x, int):
        return str(x)
    value = x if isinstance(x, Decimal) else Decimal(str(x))
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
