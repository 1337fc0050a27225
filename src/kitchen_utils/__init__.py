"""Kitchen Utils - Ingredient quantity scaling and substitution utilities."""

__version__ = "0.1.0"

from . import ingredients, scaling, substitutions

__all__ = ["ingredients", "scaling", "substitutions"]
