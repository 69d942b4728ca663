"""
Core data types and shared constants.
"""

from labelsense.core.types import (
    RawFragment,
    NormalizedText,
    LabelSections,
    DietaryCategory,
    Evidence,
    ClassificationResult,
    CaloriesValue,
    ProductWeight,
    ProductInfo,
    Currency,
    PriceInfo,
    LabelScanResult,
    FrontScanResult,
)

__all__ = [
    "RawFragment",
    "NormalizedText",
    "LabelSections",
    "DietaryCategory",
    "Evidence",
    "ClassificationResult",
    "CaloriesValue",
    "ProductWeight",
    "ProductInfo",
    "Currency",
    "PriceInfo",
    "LabelScanResult",
    "FrontScanResult",
]
