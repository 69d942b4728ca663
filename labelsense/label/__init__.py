"""
Label Section Module

Splits filtered label text into sections and formats ingredient lists.
"""

from labelsense.label.ingredient_formatter import IngredientFormatter
from labelsense.label.section_segmenter import (
    SectionSegmenter,
    INGREDIENT_HEADERS,
    ALLERGEN_HEADERS,
    OTHER_HEADERS,
)

__all__ = [
    "IngredientFormatter",
    "SectionSegmenter",
    "INGREDIENT_HEADERS",
    "ALLERGEN_HEADERS",
    "OTHER_HEADERS",
]
