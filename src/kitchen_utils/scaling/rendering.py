"""Render decimal quantities as kitchen-friendly fractions."""

import math
from fractions import Fraction
from typing import Optional

# --- Constants ---

# Checked in order before any rational approximation
COMMON_FRACTIONS = (
    (1 / 4, "¼"),
    (1 / 3, "⅓"),
    (1 / 2, "½"),
    (2 / 3, "⅔"),
    (3 / 4, "¾"),
)

COMMON_FRACTION_TOLERANCE = 0.01
APPROXIMATION_TOLERANCE = 0.015
MAX_DENOMINATOR = 16
# Floats are read as the nearest fraction with at most this denominator
INPUT_PRECISION = 10**6

# --- Functions ---


def render_quantity(
    value: float,
    tolerance: float = APPROXIMATION_TOLERANCE,
    max_denominator: int = MAX_DENOMINATOR,
) -> str:
    """Render a quantity for display in an ingredient line.

    Whole numbers render without a decimal point. Values close to a quarter,
    third, half, two thirds or three quarters use the unicode glyph, after the
    whole part when there is one. Anything else is approximated by the first
    continued-fraction convergent within ``tolerance`` whose denominator does
    not exceed ``max_denominator``; failing that, a decimal with at most two
    places, or one significant digit for amounts too small to show that way.

    Args:
        value: The quantity to render.
        tolerance: Largest allowed error for the fraction approximation.
        max_denominator: Largest denominator the approximation may use.

    Returns:
        Display text such as "2", "1 ½", "1 3/8" or "0.03".

    Examples:
        >>> render_quantity(1.5)
        '1 ½'
        >>> render_quantity(0.375)
        '3/8'
        >>> render_quantity(0.03)
        '0.03'
    """
    value = float(value)
    if not math.isfinite(value):
        return str(value)
    if value < 0:
        return "-" + render_quantity(-value, tolerance, max_denominator)

    if value.is_integer():
        return str(int(value))

    whole = math.floor(value)
    remainder = value - whole
    for target, glyph in COMMON_FRACTIONS:
        if abs(remainder - target) < COMMON_FRACTION_TOLERANCE:
            return f"{whole} {glyph}" if whole else glyph

    fraction = approximate_fraction(value, tolerance, max_denominator)
    if fraction is not None:
        return _format_mixed_number(fraction)

    text = f"{value:.2f}".rstrip("0").rstrip(".")
    if text == "0":
        # Keep tiny amounts visible, e.g. "0.004"
        return f"{value:.1g}"
    return text


def approximate_fraction(
    value: float, tolerance: float, max_denominator: int
) -> Optional[Fraction]:
    """Find the first continued-fraction convergent within ``tolerance``.

    ``value`` is first read as the decimal it stands for (1.9 rather than
    the binary 1.8999...), then expanded into a continued fraction in exact
    arithmetic. Convergents are the best approximations for their
    denominator size, so the first one close enough is the one to show.

    Returns:
        The nonzero fraction, or None when every convergent within tolerance
        would need a denominator above ``max_denominator``.
    """
    target = Fraction(value).limit_denominator(INPUT_PRECISION)
    numerator, previous_numerator = 1, 0
    denominator, previous_denominator = 0, 1
    x = target
    while True:
        term = math.floor(x)
        numerator, previous_numerator = term * numerator + previous_numerator, numerator
        denominator, previous_denominator = (
            term * denominator + previous_denominator,
            denominator,
        )
        if denominator > max_denominator:
            return None
        # A zero convergent would render a small nonzero amount as "0"
        if numerator and abs(target - Fraction(numerator, denominator)) <= tolerance:
            return Fraction(numerator, denominator)

        x -= term
        if x == 0:
            return None
        x = 1 / x


def _format_mixed_number(fraction: Fraction) -> str:
    whole, remainder = divmod(fraction.numerator, fraction.denominator)
    if remainder == 0:
        return str(whole)
    if whole == 0:
        return f"{remainder}/{fraction.denominator}"
    return f"{whole} {remainder}/{fraction.denominator}"
