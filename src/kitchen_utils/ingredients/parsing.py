"""Ingredient line parsing: quantity, unit and name."""

import logging
from typing import List, Optional, Tuple

from kitchen_utils.ingredients.models import ParsedIngredient
from kitchen_utils.ingredients.number_utils import (
    _is_quantity_token,
    _split_quantity_prefix,
    resolve_quantity_token,
)
from kitchen_utils.ingredients.units import is_unit

logger = logging.getLogger(__name__)


def parse_ingredient(text: str) -> ParsedIngredient:
    """Parse an ingredient line into quantity, unit and name.

    The line is split on whitespace and read left to right: a run of
    quantity tokens ("1 1/2", "½", "1½", "2.5"), then an optional unit from
    the unit vocabulary, then the ingredient name. Nothing here raises;
    lines without a usable quantity come back with ``quantity=None``.

    Args:
        text: Raw ingredient text (e.g., "1 1/2 cups flour" or "Salt, to taste").

    Returns:
        A ParsedIngredient. ``quantity_text`` holds the quantity run as it
        appeared, ``unit`` the unit as written (trailing period removed) and
        ``name`` the remaining text with whitespace collapsed.

    Examples:
        >>> parse_ingredient("1 1/2 cups flour")
        ParsedIngredient(quantity_text='1 1/2', quantity=1.5, unit='cups', name='flour')
        >>> parse_ingredient("Salt, to taste")
        ParsedIngredient(quantity_text=None, quantity=None, unit=None, name='Salt, to taste')
    """
    original_text = " ".join(text.split())
    quantity_words, rest = _split_quantity_run(original_text.split())
    unit, rest = _parse_unit(rest)

    if not rest and unit is not None:
        # "2 cups": the unit word is all there is to call the ingredient
        rest = [unit]
        unit = None

    if quantity_words and not rest:
        logger.debug(f"Quantity with nothing after it, treating as name: {text!r}")
        return ParsedIngredient(None, None, None, original_text)

    quantity_text = " ".join(quantity_words) or None
    amount = parse_quantity_text(quantity_text) if quantity_text else None
    if amount is None:
        logger.debug(f"No quantity found in {text!r}")

    return ParsedIngredient(quantity_text, amount, unit, " ".join(rest))


def parse_quantity_text(text: str) -> Optional[float]:
    """Parse a quantity run such as "1 1/2" or "2 ½" into a float.

    Each whitespace-separated token is resolved on its own and the results
    are summed. Tokens that cannot be resolved, including fractions with a
    zero denominator, are skipped.

    Args:
        text: The quantity text to parse.

    Returns:
        The summed quantity, or None if it is not greater than zero. Recipes
        never call for zero of an ingredient, so a zero total is a parse miss.
    """
    total = 0.0
    for token in text.split():
        try:
            value = resolve_quantity_token(token)
        except (ValueError, ZeroDivisionError) as e:
            logger.debug(f"Skipping quantity token {token!r}: {e}")
            continue
        if value is None:
            logger.debug(f"Skipping unrecognised quantity token {token!r}")
            continue
        total += value

    return total if total > 0 else None


def _split_quantity_run(words: List[str]) -> Tuple[List[str], List[str]]:
    """Split leading quantity tokens off a list of words.

    A word that starts with a quantity and continues with a known unit
    ("12oz", "1/2cup") is split in two so the unit can be read next.
    """
    quantity_words = []
    index = 0
    while index < len(words):
        word = words[index]
        if _is_quantity_token(word):
            quantity_words.append(word)
            index += 1
            continue

        prefix, remainder = _split_quantity_prefix(word)
        if _is_quantity_token(prefix) and is_unit(remainder):
            quantity_words.append(prefix)
            return quantity_words, [remainder] + words[index + 1 :]
        break

    return quantity_words, words[index:]


def _parse_unit(words: List[str]) -> Tuple[Optional[str], List[str]]:
    """Parse a unit from the start of a list of words."""
    if words and is_unit(words[0]):
        return words[0].rstrip("."), words[1:]

    # No unit found - return None for unit and the original words
    return None, words
