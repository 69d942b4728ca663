"""
Product Info Extraction

Recovers the product name and declared weight from a front-of-pack
capture. The name is taken from the topmost lines, the weight from
anywhere on the pack.
"""

from typing import Iterable, List, Optional
import re
from loguru import logger

from labelsense.core.types import FrontScanResult, ProductInfo, ProductWeight, RawFragment
from labelsense.ocr.text_normalizer import TextNormalizer, FRONT_CONFIDENCE_THRESHOLD


NAME_LINE_COUNT = 3

WEIGHT_PATTERN = re.compile(r"(\d+)\s*(kilograms?|grams?|kg|ml|g)", re.IGNORECASE)

UNIT_ALIASES = {
    "g": "g",
    "gram": "g",
    "grams": "g",
    "kg": "kg",
    "kilogram": "kg",
    "kilograms": "kg",
    "ml": "ml",
}


class ProductInfoExtractor:
    """
    Positional heuristics for front-of-pack text.

    Usage:
        extractor = ProductInfoExtractor()
        result = extractor.extract(fragments)
        print(result.product_info.name, result.product_info.weight)
    """

    LEADING_WEIGHT_PATTERN = re.compile(r"^\d+[gkml]", re.IGNORECASE)
    LEADING_PRICE_PATTERN = re.compile(r"^[₫₹$]")

    def __init__(
        self,
        normalizer: Optional[TextNormalizer] = None,
        name_line_count: int = NAME_LINE_COUNT,
    ):
        """
        Initialize the extractor.

        Args:
            normalizer: Normalizer for front-of-pack fragments
            name_line_count: How many top lines may form the name
        """
        self.normalizer = normalizer or TextNormalizer(
            confidence_threshold=FRONT_CONFIDENCE_THRESHOLD
        )
        self.name_line_count = name_line_count

    def extract(self, fragments: Iterable[RawFragment]) -> FrontScanResult:
        """
        Extract product info from front-of-pack fragments.

        Returns:
            FrontScanResult with the joined text and product info
        """
        # Already ordered top to bottom
        lines = [text for text, _ in self.normalizer.normalize_lines(fragments)]

        info = ProductInfo(
            name=self.extract_name(lines),
            weight=self.extract_weight(" ".join(lines)),
        )
        logger.debug(f"Front of pack: name={info.name!r}, weight={info.weight}")
        return FrontScanResult(text="\n".join(lines), product_info=info)

    def extract_name(self, lines: List[str]) -> Optional[str]:
        """Join the top lines that do not look like weight, price or labels."""
        candidates = [
            line for line in lines[:self.name_line_count]
            if self._is_name_candidate(line)
        ]
        return " ".join(candidates) if candidates else None

    def _is_name_candidate(self, line: str) -> bool:
        lower = line.lower()
        if "net" in lower or "weight" in lower:
            return False
        if self.LEADING_WEIGHT_PATTERN.match(lower):
            return False
        if self.LEADING_PRICE_PATTERN.match(lower):
            return False
        return len(line) > 3

    @staticmethod
    def extract_weight(text: str) -> Optional[ProductWeight]:
        """
        Find the first declared weight in text.

        Returns:
            ProductWeight with unit normalized to g, kg or ml, or None
        """
        match = WEIGHT_PATTERN.search(text)
        if not match:
            return None
        unit = UNIT_ALIASES[match.group(2).lower()]
        return ProductWeight(value=int(match.group(1)), unit=unit)
