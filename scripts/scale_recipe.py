#!/usr/bin/env python3
"""
Scale ingredient lists to a new number of servings.
Each input file holds one ingredient line per line; blank lines and
lines starting with '#' are skipped. Optionally writes every scaled
line to a CSV file.
"""

import argparse
import logging
import pathlib

import pandas as pd
from tqdm import tqdm

from kitchen_utils.scaling import (
    format_multiplier,
    format_servings,
    get_multiplier,
    scale_ingredients,
    scaled_ingredients_to_dataframe,
)


def read_ingredient_lines(file_path: pathlib.Path) -> list[str]:
    """Read ingredient lines from a text file, skipping blanks and comments."""
    lines = []
    with open(file_path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#"):
                lines.append(line)
    return lines


def main(argv=None):
    """Main function to scale ingredient files and report the results."""
    parser = argparse.ArgumentParser(
        description="Scale recipe ingredient lists to a new number of servings"
    )
    parser.add_argument(
        "files",
        nargs="+",
        type=pathlib.Path,
        help="Text files with one ingredient line per line",
    )
    parser.add_argument(
        "--servings",
        type=float,
        required=True,
        help="Number of servings the ingredient lists are written for",
    )
    parser.add_argument(
        "--target",
        type=float,
        required=True,
        help="Number of servings to scale to",
    )
    parser.add_argument(
        "--output",
        type=pathlib.Path,
        default=None,
        help="Optional CSV file for all scaled ingredients",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log parsing details",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    multiplier = get_multiplier(args.servings, args.target)
    target = int(args.target) if args.target.is_integer() else args.target
    print(
        f"Scaling to {format_servings(target)} "
        f"({format_multiplier(multiplier) or 'unchanged'})"
    )

    frames = []
    for file_path in tqdm(args.files, desc="Scaling recipes"):
        try:
            lines = read_ingredient_lines(file_path)
        except (OSError, UnicodeDecodeError) as e:
            print(f"Skipping {file_path}: {e}")
            continue

        scaled = scale_ingredients(lines, args.servings, args.target)
        print(f"\n{file_path}:")
        for ingredient in scaled:
            print(f"  {ingredient.scaled}")

        df = scaled_ingredients_to_dataframe(scaled)
        df.insert(0, "source_file", str(file_path))
        frames.append(df)

    if args.output is None:
        return
    if not frames:
        print("No ingredient files could be read. Nothing written.")
        return

    all_scaled = pd.concat(frames, ignore_index=True)
    all_scaled.to_csv(args.output, index=False)
    print(f"\nWrote {len(all_scaled)} scaled ingredients to {args.output}")


if __name__ == "__main__":
    main()
