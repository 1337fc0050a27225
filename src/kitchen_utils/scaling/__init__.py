"""Recipe scaling and quantity rendering utilities."""

from .export import scaled_ingredients_to_dataframe, write_scaled_csv
from .rendering import approximate_fraction, render_quantity
from .scaler import scale_ingredient, scale_ingredients
from .servings import (
    format_multiplier,
    format_servings,
    get_multiplier,
    get_serving_size_options,
)

__all__ = [
    "render_quantity",
    "approximate_fraction",
    "scale_ingredient",
    "scale_ingredients",
    "get_multiplier",
    "get_serving_size_options",
    "format_servings",
    "format_multiplier",
    "scaled_ingredients_to_dataframe",
    "write_scaled_csv",
]
