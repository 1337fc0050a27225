from decimal import Decimal
from typing import Optional

# Unicode vulgar fraction glyphs
FRACTION_GLYPHS = {
    "½": 1 / 2,
    "⅓": 1 / 3,
    "⅔": 2 / 3,
    "¼": 1 / 4,
    "¾": 3 / 4,
    "⅕": 1 / 5,
    "⅖": 2 / 5,
    "⅗": 3 / 5,
    "⅘": 4 / 5,
    "⅙": 1 / 6,
    "⅚": 5 / 6,
    "⅛": 1 / 8,
    "⅜": 3 / 8,
    "⅝": 5 / 8,
    "⅞": 7 / 8,
}

QUANTITY_CHARS = frozenset("0123456789./") | frozenset(FRACTION_GLYPHS)


def _is_integer(text: str) -> bool:
    """Check if a string represents a valid integer."""
    try:
        int(text)
        return True
    except ValueError:
        return False


def _is_number(text: str) -> bool:
    """Check if a string represents a valid number (int or float)."""
    try:
        float(text)
        return True
    except ValueError:
        return False


def _is_fraction(text: str) -> bool:
    """Check if a string represents a valid fraction (e.g., '1/2')."""
    if "/" not in text:
        return False
    parts = text.split("/")
    return len(parts) == 2 and all(_is_integer(part) for part in parts)


def _parse_fraction(text: str) -> Decimal:
    """Parse a fraction string (e.g., '1/2') into a Decimal."""
    if "/" not in text:
        raise ValueError(f"Not a fraction: {text}")

    numerator_str, denominator_str = text.split("/")
    numerator = Decimal(numerator_str)
    denominator = Decimal(denominator_str)

    if denominator == 0:
        raise ZeroDivisionError("Division by zero in fraction")

    return numerator / denominator


def _is_quantity_token(text: str) -> bool:
    """Check if a token is made only of digits, '.', '/' and fraction glyphs."""
    if not text or not all(c in QUANTITY_CHARS for c in text):
        return False
    return any(c.isdigit() or c in FRACTION_GLYPHS for c in text)


def _split_quantity_prefix(text: str) -> tuple[str, str]:
    """Split a token like '12oz' into its quantity prefix and the remainder."""
    end = 0
    while end < len(text) and text[end] in QUANTITY_CHARS:
        end += 1
    return text[:end], text[end:]


def resolve_quantity_token(token: str) -> Optional[float]:
    """Resolve a single quantity token to a float.

    Resolution order is: a bare glyph ("½"), an ASCII fraction ("1/2"),
    a plain decimal ("2.5"), then a whole number with a trailing glyph ("1½").

    Args:
        token: A token made of digits, '.', '/' and fraction glyphs.

    Returns:
        The numeric value, or None if the token cannot be resolved.

    Raises:
        ZeroDivisionError: If the token is an ASCII fraction with a zero denominator.

    Examples:
        >>> resolve_quantity_token("¾")
        0.75
        >>> resolve_quantity_token("1½")
        1.5
    """
    if token in FRACTION_GLYPHS:
        return FRACTION_GLYPHS[token]

    if _is_fraction(token):
        return float(_parse_fraction(token))

    if _is_number(token):
        return float(token)

    glyph = token[-1:]
    if glyph in FRACTION_GLYPHS and _is_integer(token[:-1]):
        return int(token[:-1]) + FRACTION_GLYPHS[glyph]

    return None
