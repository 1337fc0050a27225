"""Tabular export of scaled ingredients."""

import dataclasses
import pathlib
from typing import List, Union

import pandas as pd

from kitchen_utils.ingredients.models import ScaledIngredient
from kitchen_utils.ingredients.units import normalize_unit

COLUMNS = [
    "original",
    "scaled",
    "quantity",
    "original_quantity",
    "unit",
    "canonical_unit",
    "name",
]


def scaled_ingredients_to_dataframe(scaled: List[ScaledIngredient]) -> pd.DataFrame:
    """Build a DataFrame with one row per scaled ingredient.

    Adds a ``canonical_unit`` column ("tbsp" and "tablespoons" both become
    "tablespoon") so rows can be grouped by unit. Missing quantities and
    units are NaN/None.

    Args:
        scaled: Output of scale_ingredients.

    Returns:
        DataFrame with the columns in COLUMNS, in input order.
    """
    rows = []
    for ingredient in scaled:
        row = dataclasses.asdict(ingredient)
        row["canonical_unit"] = (
            normalize_unit(ingredient.unit) if ingredient.unit else None
        )
        rows.append(row)

    # object dtype keeps missing units as None rather than NaN
    df = pd.DataFrame(rows, columns=COLUMNS, dtype=object)
    df["quantity"] = df["quantity"].astype(float)
    df["original_quantity"] = df["original_quantity"].astype(float)
    return df


def write_scaled_csv(
    scaled: List[ScaledIngredient], output_file: Union[str, pathlib.Path]
) -> None:
    """Write scaled ingredients to a CSV file."""
    df = scaled_ingredients_to_dataframe(scaled)
    df.to_csv(output_file, index=False)
    print(f"Wrote {len(df)} scaled ingredients to {output_file}")
