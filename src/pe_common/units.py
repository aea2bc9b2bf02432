"""Integer arithmetic utilities for fixed-point amounts.

All amounts and balances use int units of 1/10_000. No float, no Decimal.
"""

DECIMAL_PLACES = 4
SCALE = 10 ** DECIMAL_PLACES


def parse_amount(text: str) -> int:
    """Parse a decimal literal into units: '1.5' -> 15000.

    Digits past the fourth decimal place are truncated toward zero.
    The sign is kept; positivity is a business rule, not a format rule.
    """
    raw = text.strip()
    negative = raw.startswith("-")
    if raw[:1] in ("-", "+"):
        raw = raw[1:]
    whole, _, frac = raw.partition(".")
    digits = whole + frac
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"Invalid amount literal: {text!r}")
    frac = frac[:DECIMAL_PLACES].ljust(DECIMAL_PLACES, "0")
    units = int(whole or "0") * SCALE + int(frac)
    return -units if negative else units


def units_to_display(units: int) -> str:
    """Convert units to a fixed 4-place string: 15000 -> '1.5000', -5 -> '-0.0005'."""
    sign = "-" if units < 0 else ""
    abs_units = abs(units)
    return f"{sign}{abs_units // SCALE}.{abs_units % SCALE:0{DECIMAL_PLACES}d}"
