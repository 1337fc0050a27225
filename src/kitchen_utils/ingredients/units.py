"""Unit vocabulary and pluralization for kitchen measurements."""

# Recognised units, grouped by canonical form
UNIT_MAP = {
    # Volume
    "cup": ["cup", "cups"],
    "tablespoon": ["tablespoon", "tablespoons", "tbsp", "tbsps"],
    "teaspoon": ["teaspoon", "teaspoons", "tsp", "tsps"],
    "ounce": ["ounce", "ounces", "oz"],
    "ml": ["ml", "milliliter", "milliliters"],
    "l": ["l", "liter", "liters"],
    "pint": ["pint", "pints"],
    "quart": ["quart", "quarts"],
    "gallon": ["gallon", "gallons"],
    # Weight
    "pound": ["pound", "pounds", "lb", "lbs"],
    "gram": ["g", "gram", "grams"],
    "kg": ["kg", "kilogram", "kilograms"],
    # Count/measure
    "clove": ["clove", "cloves"],
    "slice": ["slice", "slices"],
    "piece": ["piece", "pieces"],
    "can": ["can", "cans"],
    "package": ["package", "packages"],
    "bunch": ["bunch", "bunches"],
    "stalk": ["stalk", "stalks"],
    "head": ["head", "heads"],
    "sprig": ["sprig", "sprigs"],
    "pinch": ["pinch", "pinches"],
    "dash": ["dash", "dashes"],
    # Size qualifiers
    "large": ["large"],
    "medium": ["medium"],
    "small": ["small"],
}

# Create reverse mapping for lookup
UNIT_LOOKUP = {v: k for k, vs in UNIT_MAP.items() for v in vs}

PLURAL_UNITS = {
    "cup": "cups",
    "tablespoon": "tablespoons",
    "teaspoon": "teaspoons",
    "ounce": "ounces",
    "pound": "pounds",
    "gram": "grams",
    "slice": "slices",
    "piece": "pieces",
    "clove": "cloves",
    "can": "cans",
    "bunch": "bunches",
    "stalk": "stalks",
    "sprig": "sprigs",
    "pinch": "pinches",
    "dash": "dashes",
}

SINGULAR_UNITS = {v: k for k, v in PLURAL_UNITS.items()}


def is_unit(word: str) -> bool:
    """Check whether a word belongs to the unit vocabulary (case-insensitive)."""
    return word.lower().rstrip(".") in UNIT_LOOKUP


def normalize_unit(unit: str) -> str:
    """Normalize unit names to their canonical form.

    Examples:
        >>> normalize_unit("Tbsp.")
        'tablespoon'
        >>> normalize_unit("lbs")
        'pound'
    """
    unit = unit.lower().strip(".")
    return UNIT_LOOKUP.get(unit, unit)  # Return original if not found


def _match_case(word: str, template: str) -> str:
    if template[:1].isupper():
        return word[:1].upper() + word[1:]
    return word


def pluralize_unit(unit: str, quantity: float) -> str:
    """Choose the singular or plural spelling of a unit for a quantity.

    Quantities above one take the plural form from PLURAL_UNITS when the unit
    is one of its singular keys. Quantities of one or less drop a trailing
    "s", using SINGULAR_UNITS for the plurals it knows and stripping the
    letter otherwise. Units outside both maps ("tbsp", "large") are returned
    untouched unless they end in "s".

    Args:
        unit: The unit as written in the ingredient line.
        quantity: The quantity the unit will be displayed with.

    Returns:
        The unit spelled for the quantity, keeping the capitalisation of its
        first letter.
    """
    lowered = unit.lower()
    if quantity > 1:
        if lowered in PLURAL_UNITS:
            return _match_case(PLURAL_UNITS[lowered], unit)
        return unit

    if lowered.endswith("s"):
        if lowered in SINGULAR_UNITS:
            return _match_case(SINGULAR_UNITS[lowered], unit)
        # Heuristic: wrong for irregular plurals such as "leaves"
        return unit[:-1]
    return unit
