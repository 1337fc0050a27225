import dataclasses
from typing import Optional


@dataclasses.dataclass
class ParsedIngredient:
    quantity_text: Optional[str]
    quantity: Optional[float]  # None when no usable quantity was found
    unit: Optional[str]
    name: str


@dataclasses.dataclass
class ScaledIngredient:
    original: str
    scaled: str
    quantity: Optional[float]
    original_quantity: Optional[float]
    unit: Optional[str]
    name: str


@dataclasses.dataclass(frozen=True)
class Substitution:
    name: str
    ratio: str  # "1:1", "3/4:1" or free text
    reason: str
    best_for: Optional[str] = None
