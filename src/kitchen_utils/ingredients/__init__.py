"""Ingredient parsing utilities."""

from .models import ParsedIngredient, ScaledIngredient, Substitution
from .number_utils import FRACTION_GLYPHS, resolve_quantity_token
from .parsing import parse_ingredient, parse_quantity_text
from .units import is_unit, normalize_unit, pluralize_unit

__all__ = [
    "parse_ingredient",
    "parse_quantity_text",
    "resolve_quantity_token",
    "FRACTION_GLYPHS",
    "is_unit",
    "normalize_unit",
    "pluralize_unit",
    "ParsedIngredient",
    "ScaledIngredient",
    "Substitution",
]
