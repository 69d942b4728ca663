"""
OCR Text Processing Module

Handles the text coming back from the OCR collaborator:
- Line grouping and cleanup of positioned fragments
- English line filtering (translation approximation)
- Script-based language detection
"""

from labelsense.ocr.text_normalizer import (
    TextNormalizer,
    INGREDIENT_CONFIDENCE_THRESHOLD,
    FRONT_CONFIDENCE_THRESHOLD,
    LINE_TOLERANCE,
)
from labelsense.ocr.language_filter import LanguageFilter, has_non_latin_letters

__all__ = [
    "TextNormalizer",
    "LanguageFilter",
    "has_non_latin_letters",
    "INGREDIENT_CONFIDENCE_THRESHOLD",
    "FRONT_CONFIDENCE_THRESHOLD",
    "LINE_TOLERANCE",
]
