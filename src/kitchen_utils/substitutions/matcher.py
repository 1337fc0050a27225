"""Ingredient substitution lookup with dietary and allergy filtering."""

import logging
from typing import Iterable, List, Sequence

from kitchen_utils.ingredients.models import Substitution
from kitchen_utils.substitutions.table import COMMON_SUBSTITUTIONS, GENERIC_RULES

logger = logging.getLogger(__name__)

# Terms that exclude a substitution for a vegan diet
VEGAN_EXCLUDED_TERMS = ("milk", "butter", "eggs", "cheese", "yogurt")
# Wider list used when flagging a suggestion as unsuitable
NON_VEGAN_TERMS = ("milk", "butter", "cheese", "yogurt", "cream", "egg")


def get_substitutions(
    ingredient_name: str,
    dietary_preferences: Iterable[str] = (),
    allergies: Iterable[str] = (),
    strict: bool = False,
) -> List[Substitution]:
    """Get ranked substitution suggestions for an ingredient.

    Looks the lowercased name up in the built-in table, falling back to
    keyword rules ("flour", "milk"/"cream", ...) when there is no exact
    entry. Candidates are then filtered by dietary preference ("vegan",
    "gluten-free") and by allergies, matched as case-insensitive substrings
    of the substitute's name. Table order is preserved.

    If the filters remove every candidate, the unfiltered candidates are
    returned so the caller still has something to show next to a
    dietary-mismatch warning (see is_suitable_for_diet). Pass ``strict=True``
    to get an empty list instead.

    Args:
        ingredient_name: Ingredient to replace, e.g. "Butter".
        dietary_preferences: Diets to respect, e.g. ["vegan"].
        allergies: Allergens to avoid, e.g. ["almond"].
        strict: Return an empty list rather than unfiltered candidates.

    Returns:
        List of Substitution objects, best first. Empty when nothing in the
        table or rules applies to the ingredient.

    Examples:
        >>> [s.name for s in get_substitutions("milk", allergies=["almond"])]
        ['oat milk', 'coconut milk']
    """
    normalized = ingredient_name.strip().lower()
    candidates = _lookup(normalized)
    if not candidates:
        logger.debug(f"No local substitutions for {ingredient_name!r}")
        return []

    preferences = {preference.strip().lower() for preference in dietary_preferences}
    allergens = [allergy.strip().lower() for allergy in allergies if allergy.strip()]

    filtered = list(candidates)
    if "vegan" in preferences:
        filtered = [
            sub for sub in filtered if not _contains_any(sub.name, VEGAN_EXCLUDED_TERMS)
        ]
    if "gluten-free" in preferences:
        filtered = [sub for sub in filtered if _is_gluten_free(sub.name)]
    if allergens:
        filtered = [sub for sub in filtered if not _contains_any(sub.name, allergens)]

    if filtered or strict:
        return filtered

    logger.warning(
        f"Filters removed every substitution for {ingredient_name!r} "
        f"(diet={sorted(preferences)}, allergies={allergens}); "
        "returning unfiltered suggestions"
    )
    return list(candidates)


def format_ratio(ratio: str) -> str:
    """Format a substitution ratio for display.

    Examples:
        >>> format_ratio("3/4:1")
        '3/4 for every 1'
        >>> format_ratio("1 tbsp ground flaxseed + 3 tbsp water")
        '1 tbsp ground flaxseed + 3 tbsp water'
    """
    if ":" not in ratio:
        return ratio

    amount, per = ratio.split(":", 1)
    if amount == per == "1":
        return "1:1"
    if amount == per:
        return "Equal amount"
    return f"{amount} for every {per}"


def is_suitable_for_diet(
    substitution: Substitution, dietary_preferences: Iterable[str]
) -> bool:
    """Check a substitution against dietary preferences.

    Stricter than the filter in get_substitutions: for vegans it also rejects
    anything mentioning cream or egg. Callers use it to mark suggestions that
    were returned despite not matching the diet.
    """
    preferences = {preference.strip().lower() for preference in dietary_preferences}
    if "vegan" in preferences and _contains_any(substitution.name, NON_VEGAN_TERMS):
        return False
    if "gluten-free" in preferences and not _is_gluten_free(substitution.name):
        return False
    return True


def _lookup(normalized_name: str) -> Sequence[Substitution]:
    if normalized_name in COMMON_SUBSTITUTIONS:
        return COMMON_SUBSTITUTIONS[normalized_name]

    for keywords, substitutions in GENERIC_RULES:
        if any(keyword in normalized_name for keyword in keywords):
            return substitutions
    return ()


def _contains_any(text: str, terms: Iterable[str]) -> bool:
    lowered = text.lower()
    return any(term in lowered for term in terms)


def _is_gluten_free(name: str) -> bool:
    lowered = name.lower()
    return "flour" not in lowered or "gluten-free" in lowered
