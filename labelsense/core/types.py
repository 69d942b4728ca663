"""
Data types for the label understanding pipeline.

Every entity is created fresh per scan and handed to the next stage
without mutation:
- RawFragment: one OCR text region (input boundary)
- NormalizedText: grouped, cleaned lines
- LabelSections: ingredients / allergens / other
- ClassificationResult, CaloriesValue, ProductInfo, PriceInfo (output boundary)
"""

from datetime import datetime, timezone
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


CALORIES_NOT_LISTED = "Calories not listed"

# Separates the primary reason from the evidence addendum
REASON_EVIDENCE_SEPARATOR = "\n\n"


@dataclass(frozen=True)
class RawFragment:
    """A single recognized text region from the OCR engine."""
    text: str
    confidence: float
    center_x: float  # 0-1, left to right
    center_y: float  # 0-1, top to bottom

    def __str__(self) -> str:
        return f"'{self.text}' ({self.confidence:.2f} @ {self.center_x:.2f},{self.center_y:.2f})"


@dataclass(frozen=True)
class NormalizedText:
    """Logical lines ordered top to bottom."""
    lines: List[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    @property
    def is_empty(self) -> bool:
        return not any(line.strip() for line in self.lines)


@dataclass(frozen=True)
class LabelSections:
    """Label text split into its logical sections."""
    ingredients_text: str
    allergen_text: Optional[str] = None
    other_sections: Dict[str, str] = field(default_factory=dict)


class DietaryCategory(str, Enum):
    """Dietary classification of a product."""
    VEGAN = "Vegan"
    VEGETARIAN = "Vegetarian"
    NON_VEGETARIAN = "Non-Vegetarian"
    POSSIBLY_NON_VEGETARIAN = "Possibly Non-Vegetarian"


@dataclass(frozen=True)
class Evidence:
    """A keyword that justified a classification, and where it was seen."""
    keyword: str
    source_line: Optional[str] = None


@dataclass(frozen=True)
class ClassificationResult:
    """Dietary category with a human-readable justification."""
    category: DietaryCategory
    reason: str
    evidence: List[Evidence] = field(default_factory=list)

    @property
    def primary_reason(self) -> str:
        return self.reason.split(REASON_EVIDENCE_SEPARATOR, 1)[0]

    @property
    def evidence_lines(self) -> Optional[str]:
        """Evidence addendum following the blank line, if any."""
        parts = self.reason.split(REASON_EVIDENCE_SEPARATOR, 1)
        return parts[1] if len(parts) == 2 else None

    @property
    def keywords(self) -> List[str]:
        return [item.keyword for item in self.evidence]


@dataclass(frozen=True)
class CaloriesValue:
    """Extracted energy value, or the 'not listed' sentinel."""
    amount: Optional[int] = None

    @property
    def is_listed(self) -> bool:
        return self.amount is not None

    def __str__(self) -> str:
        if self.amount is None:
            return CALORIES_NOT_LISTED
        return f"{self.amount} kcal"


@dataclass(frozen=True)
class ProductWeight:
    """Declared net weight/volume from the front of pack."""
    value: int
    unit: str  # "g", "kg" or "ml"

    @property
    def grams(self) -> int:
        """Weight in grams. Millilitres are taken as grams."""
        if self.unit == "kg":
            return self.value * 1000
        return self.value

    def __str__(self) -> str:
        return f"{self.value}{self.unit}"


@dataclass(frozen=True)
class ProductInfo:
    """Product name and weight recovered from a front-of-pack capture."""
    name: Optional[str] = None
    weight: Optional[ProductWeight] = None

    @property
    def search_query(self) -> Optional[str]:
        """Name and weight as a single lookup string."""
        parts = []
        if self.name:
            parts.append(self.name)
        if self.weight is not None:
            parts.append(str(self.weight))
        return " ".join(parts) if parts else None


class Currency(str, Enum):
    """Currencies recognized in price strings."""
    VND = "VND"
    INR = "INR"
    UNSUPPORTED = "UNSUPPORTED"


@dataclass(frozen=True)
class PriceInfo:
    """Local price, its conversion and an optional per-kilogram figure."""
    local_amount_text: str
    converted_amount_text: str
    per_kilogram_text: Optional[str] = None
    currency: Currency = Currency.UNSUPPORTED


@dataclass
class LabelScanResult:
    """Everything derived from one ingredient-label capture."""
    original_text: str
    translated_text: str
    detected_language: str
    sections: LabelSections
    classification: ClassificationResult
    calories: CaloriesValue
    barcode: Optional[str] = None
    scanned_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class FrontScanResult:
    """Everything derived from one front-of-pack capture."""
    text: str
    product_info: ProductInfo
