"""Built-in ingredient substitution table."""

import json
import os
import types
from typing import Dict, List, Mapping, Tuple

from kitchen_utils.ingredients.models import Substitution

SUBSTITUTIONS_FILE = os.path.join(
    os.path.dirname(__file__), "data", "substitutions.json"
)

SubstitutionTable = Mapping[str, Tuple[Substitution, ...]]
GenericRule = Tuple[Tuple[str, ...], Tuple[Substitution, ...]]


def _to_substitutions(entries: List[dict]) -> Tuple[Substitution, ...]:
    return tuple(
        Substitution(
            name=entry["name"],
            ratio=entry["ratio"],
            reason=entry["reason"],
            best_for=entry.get("best_for"),
        )
        for entry in entries
    )


def load_substitution_table(
    path: str = SUBSTITUTIONS_FILE,
) -> Tuple[SubstitutionTable, Tuple[GenericRule, ...]]:
    """Load the substitution table and generic keyword rules from JSON.

    The file holds a ``substitutions`` object mapping ingredient names to
    ordered suggestion lists, and a ``generic_rules`` list of
    ``{"keywords": [...], "substitutions": [...]}`` objects tried in order
    when no exact name matches. Keys are lowercased; list order is kept as
    the preference order.

    Args:
        path: Path to the JSON file. Defaults to the bundled table.

    Returns:
        A tuple containing:
            - table: Read-only mapping of ingredient name to substitutions
            - rules: Tuple of (keywords, substitutions) pairs

    Raises:
        KeyError: If an entry is missing a required field.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    table: Dict[str, Tuple[Substitution, ...]] = {
        name.strip().lower(): _to_substitutions(entries)
        for name, entries in data["substitutions"].items()
    }
    rules = tuple(
        (
            tuple(keyword.lower() for keyword in rule["keywords"]),
            _to_substitutions(rule["substitutions"]),
        )
        for rule in data.get("generic_rules", [])
    )
    return types.MappingProxyType(table), rules


COMMON_SUBSTITUTIONS, GENERIC_RULES = load_substitution_table()
