"""
API Schemas for LabelSense

Pydantic models for request validation and response serialization:
- OCR fragment input
- Label scan models
- Front-of-pack and price models
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict

from labelsense.core.types import (
    ClassificationResult,
    DietaryCategory,
    FrontScanResult,
    LabelScanResult,
    PriceInfo,
    RawFragment,
)


# =============================================================================
# Input
# =============================================================================

class FragmentIn(BaseModel):
    """One OCR text region."""

    text: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    center_x: float = Field(..., ge=0.0, le=1.0)
    center_y: float = Field(..., ge=0.0, le=1.0)

    def to_fragment(self) -> RawFragment:
        return RawFragment(
            text=self.text,
            confidence=self.confidence,
            center_x=self.center_x,
            center_y=self.center_y,
        )


class LabelScanRequest(BaseModel):
    """Ingredient-label scan request."""

    fragments: list[FragmentIn] = Field(default_factory=list)
    barcode: Optional[str] = Field(None, max_length=64)
    confidence_threshold: Optional[float] = Field(None, ge=0.0, le=1.0)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "fragments": [
                    {"text": "Ingredients: potato, sunflower oil, salt", "confidence": 0.92,
                     "center_x": 0.5, "center_y": 0.3},
                    {"text": "Energy: 536 kcal", "confidence": 0.88,
                     "center_x": 0.4, "center_y": 0.6},
                ],
                "barcode": "8934563138165",
            }
        }
    )


class BarcodeScanRequest(BaseModel):
    """Barcode-only scan request."""

    barcode: str = Field(..., min_length=1, max_length=64)


class FrontScanRequest(BaseModel):
    """Front-of-pack scan request."""

    fragments: list[FragmentIn] = Field(default_factory=list)
    confidence_threshold: Optional[float] = Field(None, ge=0.0, le=1.0)


class PriceConvertRequest(BaseModel):
    """Price conversion request."""

    price: str = Field(..., min_length=1, max_length=100)
    weight_grams: Optional[int] = Field(None, ge=0)

    model_config = ConfigDict(
        json_schema_extra={"example": {"price": "₫50,000", "weight_grams": 500}}
    )


# =============================================================================
# Output
# =============================================================================

class EvidenceOut(BaseModel):
    """Keyword evidence for a classification."""

    keyword: str
    source_line: Optional[str] = None


class ClassificationOut(BaseModel):
    """Dietary classification with its justification."""

    category: DietaryCategory
    reason: str
    primary_reason: str
    evidence_lines: Optional[str] = None
    evidence: list[EvidenceOut] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: ClassificationResult) -> "ClassificationOut":
        return cls(
            category=result.category,
            reason=result.reason,
            primary_reason=result.primary_reason,
            evidence_lines=result.evidence_lines,
            evidence=[
                EvidenceOut(keyword=e.keyword, source_line=e.source_line)
                for e in result.evidence
            ],
        )


class SectionsOut(BaseModel):
    """Formatted label sections."""

    ingredients: str
    allergens: Optional[str] = None
    other: dict[str, str] = Field(default_factory=dict)


class LabelScanResponse(BaseModel):
    """Ingredient-label scan response."""

    barcode: Optional[str] = None
    scanned_at: datetime
    original_text: str
    translated_text: str
    detected_language: str
    sections: SectionsOut
    classification: ClassificationOut
    calories: str

    @classmethod
    def from_result(cls, result: LabelScanResult) -> "LabelScanResponse":
        return cls(
            barcode=result.barcode,
            scanned_at=result.scanned_at,
            original_text=result.original_text,
            translated_text=result.translated_text,
            detected_language=result.detected_language,
            sections=SectionsOut(
                ingredients=result.sections.ingredients_text,
                allergens=result.sections.allergen_text,
                other=dict(result.sections.other_sections),
            ),
            classification=ClassificationOut.from_result(result.classification),
            calories=str(result.calories),
        )


class BarcodeScanResponse(BaseModel):
    """Barcode-only scan response."""

    barcode: str
    classification: ClassificationOut
    calories: str


class WeightOut(BaseModel):
    """Declared pack weight."""

    value: int
    unit: str
    grams: int
    text: str


class FrontScanResponse(BaseModel):
    """Front-of-pack scan response."""

    text: str
    product_name: Optional[str] = None
    weight: Optional[WeightOut] = None
    search_query: Optional[str] = None

    @classmethod
    def from_result(cls, result: FrontScanResult) -> "FrontScanResponse":
        info = result.product_info
        weight = None
        if info.weight is not None:
            weight = WeightOut(
                value=info.weight.value,
                unit=info.weight.unit,
                grams=info.weight.grams,
                text=str(info.weight),
            )
        return cls(
            text=result.text,
            product_name=info.name,
            weight=weight,
            search_query=info.search_query,
        )


class PriceConvertResponse(BaseModel):
    """Price conversion response."""

    local: str
    converted: str
    per_kg: Optional[str] = None
    currency: str

    @classmethod
    def from_info(cls, info: PriceInfo) -> "PriceConvertResponse":
        return cls(
            local=info.local_amount_text,
            converted=info.converted_amount_text,
            per_kg=info.per_kilogram_text,
            currency=info.currency.value,
        )


# =============================================================================
# System
# =============================================================================

class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    components: dict[str, str] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    code: str
    detail: Optional[str] = None
    timestamp: datetime
