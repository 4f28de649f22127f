"""Amount formatting and parsing between raw input, display strings and minor units"""

import re
from decimal import Decimal, InvalidOperation, Overflow, ROUND_HALF_UP, localcontext
from typing import Optional

MINOR_UNITS_PER_MAJOR = 100  # kobo per naira
MAX_FRACTION_DIGITS = 2

_NON_NUMERIC = re.compile(r"[^0-9.]")


def format_amount(raw: str) -> str:
    """
    Render user input as a grouped-thousands display string.

    Rules:
    - Anything other than digits and "." is dropped
    - Extra decimal points collapse into the first one
    - Typed fraction digits are kept, anything past 2 is rounded half-up
    - A trailing "." survives so the input field does not jump while typing
    - Empty or unparseable input gives ""

    Example:
        "150000"    → "150,000"
        "1234.5"    → "1,234.5"
        "1500."     → "1,500."
        "1.2.3"     → "1.23"
        "abc"       → ""
    """
    if not raw:
        return ""

    numeric = _NON_NUMERIC.sub("", raw)
    whole, point, fraction = numeric.partition(".")
    fraction = fraction.replace(".", "")

    if not (whole or fraction):
        return ""

    try:
        with localcontext() as ctx:
            # Room for every whole digit plus a carry from rounding
            ctx.prec = max(ctx.prec, len(whole) + MAX_FRACTION_DIGITS + 2)
            value = Decimal(f"{whole or '0'}.{fraction or '0'}")

            if point and not fraction:
                return f"{int(value):,}."

            digits = min(len(fraction), MAX_FRACTION_DIGITS)
            value = value.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return ""

    return f"{value:,.{digits}f}"


def parse_formatted_amount(display: str) -> str:
    """Strip thousands separators, returning the raw numeric string"""
    if not display:
        return ""
    return display.replace(",", "")


def to_minor_units(display: str) -> Optional[int]:
    """
    Convert a display (or raw) amount to integer minor units.

    Returns None unless the amount is a positive finite number.
    """
    raw = parse_formatted_amount(display).strip()
    if not raw:
        return None

    try:
        value = Decimal(raw)
    except InvalidOperation:
        return None

    if not value.is_finite() or value <= 0:
        return None

    try:
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, value.adjusted() + MAX_FRACTION_DIGITS + 2)
            minor = (value * MINOR_UNITS_PER_MAJOR).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    except (InvalidOperation, Overflow):
        return None
    return int(minor) if minor > 0 else None


def format_minor_units(amount_minor: int) -> str:
    """Display string for an integer amount; kobo shown only when non-zero"""
    sign = "-" if amount_minor < 0 else ""
    major, minor = divmod(abs(amount_minor), MINOR_UNITS_PER_MAJOR)
    if minor == 0:
        return f"{sign}{major:,}"
    return f"{sign}{major:,}.{minor:02d}"
