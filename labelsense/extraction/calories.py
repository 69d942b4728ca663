"""
Calories extraction from label text.
"""

from typing import List, Optional, Pattern, Sequence
import re
from loguru import logger

from labelsense.core.types import CaloriesValue


# Order matters: the first pattern that matches anywhere wins
CALORIE_PATTERNS = (
    r"(\d+)\s*(?:kcal|calories?|cal)\s*(?:per\s*(?:serving|100g|100\s*g)?)?",
    r"calories?[:\s]+(\d+)",
    r"energy[:\s]+(\d+)\s*(?:kcal|cal)",
)


class CaloriesExtractor:
    """
    Finds a calorie figure such as "250 kcal", "Calories: 120" or
    "Energy: 500 kcal".

    Usage:
        extractor = CaloriesExtractor()
        str(extractor.extract("Energy: 250 kcal per serving"))  # "250 kcal"
    """

    def __init__(self, patterns: Sequence[str] = CALORIE_PATTERNS):
        self._compiled: List[Pattern] = []
        for pattern in patterns:
            try:
                self._compiled.append(re.compile(pattern, re.IGNORECASE))
            except re.error as e:
                # A broken pattern just never matches
                logger.warning(f"Skipping invalid calorie pattern {pattern!r}: {e}")

    def extract(self, text: Optional[str]) -> CaloriesValue:
        """
        Extract calories from text.

        Returns:
            CaloriesValue; its str() is "<n> kcal" or "Calories not listed"
        """
        if not text:
            return CaloriesValue()

        lower = text.lower()
        for pattern in self._compiled:
            match = pattern.search(lower)
            if match and match.lastindex:
                return CaloriesValue(amount=int(match.group(1)))

        return CaloriesValue()
