"""Serving-size helpers for recipe scaling."""

import logging
import math
from typing import List, Optional

logger = logging.getLogger(__name__)

COMMON_SERVING_SIZES = (1, 2, 4, 6, 8, 10, 12)


def get_multiplier(original_servings: float, target_servings: float) -> float:
    """Calculate the scaling multiplier for a change in servings.

    Returns 1.0 instead of dividing by zero when ``original_servings`` is not
    positive, and whenever the ratio would not be a finite number.
    """
    if original_servings <= 0:
        logger.warning(
            f"Original servings must be positive, got {original_servings}; "
            "using a multiplier of 1"
        )
        return 1.0

    multiplier = target_servings / original_servings
    if not math.isfinite(multiplier):
        logger.warning(
            f"Multiplier for {original_servings} -> {target_servings} servings "
            "is not finite; using a multiplier of 1"
        )
        return 1.0
    return multiplier


def get_serving_size_options(original_servings: int) -> List[int]:
    """Get serving sizes to offer when rescaling a recipe.

    Combines half (rounded up), the original, double and triple the original
    with a fixed set of common serving sizes.

    Examples:
        >>> get_serving_size_options(4)
        [1, 2, 4, 6, 8, 10, 12]
        >>> get_serving_size_options(5)
        [1, 2, 3, 4, 5, 6, 8, 10, 12, 15]
    """
    options = {original_servings, original_servings * 2, original_servings * 3}
    if original_servings >= 2:
        options.add(math.ceil(original_servings / 2))
    options.update(COMMON_SERVING_SIZES)
    return sorted(options)


def format_servings(count: int) -> str:
    if count == 1:
        return "1 serving"
    return f"{count} servings"


def format_multiplier(multiplier: float) -> Optional[str]:
    """Format a multiplier for display, e.g. "2×" or "1.5×".

    Returns None for a multiplier of 1, where there is nothing to show.
    """
    if multiplier == 1:
        return None
    if multiplier == 0.5:
        return "½×"
    if multiplier in (2, 3, 4):
        return f"{int(multiplier)}×"
    return f"{multiplier:.1f}×"
