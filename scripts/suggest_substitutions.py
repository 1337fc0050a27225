#!/usr/bin/env python3
"""Print substitution suggestions for an ingredient."""

import argparse
import logging

from kitchen_utils.substitutions import (
    format_ratio,
    get_substitutions,
    is_suitable_for_diet,
)


def main(argv=None):
    """Main function to look up and print substitutions."""
    parser = argparse.ArgumentParser(
        description="Suggest substitutes for an ingredient"
    )
    parser.add_argument("ingredient", type=str, help="Ingredient to replace")
    parser.add_argument(
        "--diet",
        action="append",
        default=[],
        help="Dietary preference to respect, e.g. vegan or gluten-free (repeatable)",
    )
    parser.add_argument(
        "--allergy",
        action="append",
        default=[],
        help="Allergen to avoid, e.g. almond (repeatable)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Show nothing rather than suggestions that break the filters",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING)

    substitutions = get_substitutions(
        args.ingredient, args.diet, args.allergy, strict=args.strict
    )
    if not substitutions:
        print(f"No substitutions found for {args.ingredient}.")
        return

    print(f"Substitutions for {args.ingredient}:")
    for i, sub in enumerate(substitutions, 1):
        marker = "" if is_suitable_for_diet(sub, args.diet) else " [does not match diet]"
        print(f"  {i}. {sub.name} ({format_ratio(sub.ratio)}){marker}")
        print(f"     {sub.reason}")
        if sub.best_for:
            print(f"     Best for: {sub.best_for}")


if __name__ == "__main__":
    main()
