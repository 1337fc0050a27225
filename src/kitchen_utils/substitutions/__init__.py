"""Ingredient substitution suggestions."""

from .matcher import format_ratio, get_substitutions, is_suitable_for_diet
from .table import COMMON_SUBSTITUTIONS, GENERIC_RULES, load_substitution_table

__all__ = [
    "get_substitutions",
    "format_ratio",
    "is_suitable_for_diet",
    "COMMON_SUBSTITUTIONS",
    "GENERIC_RULES",
    "load_substitution_table",
]
