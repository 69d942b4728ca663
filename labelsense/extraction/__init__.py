"""
Extraction Module

Numeric and positional facts from label text:
- Calories
- Product name and declared weight (front of pack)
- Price parsing and currency conversion
"""

from labelsense.extraction.calories import CaloriesExtractor, CALORIE_PATTERNS
from labelsense.extraction.product_info import ProductInfoExtractor
from labelsense.extraction.price import (
    CurrencyConverter,
    detect_currency,
    weight_text_to_grams,
    VND_TO_INR_RATE,
)

__all__ = [
    "CaloriesExtractor",
    "CALORIE_PATTERNS",
    "ProductInfoExtractor",
    "CurrencyConverter",
    "detect_currency",
    "weight_text_to_grams",
    "VND_TO_INR_RATE",
]
