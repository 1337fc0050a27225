"""Scale ingredient lines to a new number of servings."""

from typing import Iterable, List

from kitchen_utils.ingredients.models import ScaledIngredient
from kitchen_utils.ingredients.parsing import parse_ingredient
from kitchen_utils.ingredients.units import pluralize_unit
from kitchen_utils.scaling.rendering import render_quantity
from kitchen_utils.scaling.servings import get_multiplier


def scale_ingredient(ingredient: str, multiplier: float) -> ScaledIngredient:
    """Scale a single ingredient line by a multiplier.

    Lines without a quantity ("Salt to taste") come back unchanged, as do
    all lines when the multiplier is exactly 1. Otherwise the quantity is
    multiplied, rendered as a fraction and put back in front of the unit
    (re-pluralized for the new quantity) and the ingredient name.

    Args:
        ingredient: Raw ingredient line, e.g. "1 1/2 cups flour".
        multiplier: Factor to apply to the quantity.

    Returns:
        A ScaledIngredient. ``quantity`` is the unrounded product
        ``original_quantity * multiplier`` and ``unit`` is the unit as it
        appears in ``scaled``.
    """
    parsed = parse_ingredient(ingredient)

    if parsed.quantity is None:
        # No quantity to scale
        return ScaledIngredient(
            original=ingredient,
            scaled=ingredient,
            quantity=None,
            original_quantity=None,
            unit=parsed.unit,
            name=parsed.name,
        )

    scaled_quantity = parsed.quantity * multiplier
    if multiplier == 1:
        return ScaledIngredient(
            original=ingredient,
            scaled=ingredient,
            quantity=scaled_quantity,
            original_quantity=parsed.quantity,
            unit=parsed.unit,
            name=parsed.name,
        )

    unit = parsed.unit
    parts = [render_quantity(scaled_quantity)]
    if unit:
        unit = pluralize_unit(unit, scaled_quantity)
        parts.append(unit)
    parts.append(parsed.name)

    return ScaledIngredient(
        original=ingredient,
        scaled=" ".join(" ".join(parts).split()),
        quantity=scaled_quantity,
        original_quantity=parsed.quantity,
        unit=unit,
        name=parsed.name,
    )


def scale_ingredients(
    ingredients: Iterable[str], original_servings: float, target_servings: float
) -> List[ScaledIngredient]:
    """Scale a list of ingredient lines from one serving count to another.

    The multiplier is ``target_servings / original_servings``, or 1 when
    ``original_servings`` is not positive. Output order matches input order.

    Examples:
        >>> [s.scaled for s in scale_ingredients(
        ...     ["1 1/2 cups flour", "2 large eggs", "Salt to taste"], 4, 8)]
        ['3 cups flour', '4 large eggs', 'Salt to taste']
    """
    multiplier = get_multiplier(original_servings, target_servings)
    return [scale_ingredient(ingredient, multiplier) for ingredient in ingredients]
