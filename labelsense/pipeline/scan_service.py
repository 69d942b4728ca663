"""
Scan Service

Runs the label understanding pipeline for one capture.

Ingredient label:  normalize -> filter English -> segment -> format
                   -> classify, plus calories from the filtered text
Front of pack:     normalize (lower threshold) -> name + weight
Price:             parse -> convert -> per-kilogram

Each coroutine resolves once per scan with a result or raises
NoTextFoundError when the capture held no usable text.
"""

import asyncio
from typing import Iterable, Optional
from loguru import logger

from labelsense.classification.dietary_classifier import DietaryClassifier
from labelsense.core.types import (
    ClassificationResult,
    FrontScanResult,
    LabelScanResult,
    PriceInfo,
    RawFragment,
)
from labelsense.exceptions import NoTextFoundError
from labelsense.extraction.calories import CaloriesExtractor
from labelsense.extraction.price import CurrencyConverter
from labelsense.extraction.product_info import ProductInfoExtractor
from labelsense.label.section_segmenter import SectionSegmenter
from labelsense.ocr.language_filter import LanguageFilter
from labelsense.ocr.text_normalizer import (
    TextNormalizer,
    INGREDIENT_CONFIDENCE_THRESHOLD,
    FRONT_CONFIDENCE_THRESHOLD,
    LINE_TOLERANCE,
)


class LabelScanService:
    """
    Orchestrates the pipeline stages for a single scan.

    Stages are pure and synchronous; the coroutines push them to a worker
    thread so callers on an event loop are not blocked.

    Usage:
        service = LabelScanService()
        result = await service.scan_label(fragments, barcode="8934563138165")
        print(result.classification.category, result.calories)
    """

    def __init__(
        self,
        label_confidence_threshold: float = INGREDIENT_CONFIDENCE_THRESHOLD,
        front_confidence_threshold: float = FRONT_CONFIDENCE_THRESHOLD,
        line_tolerance: float = LINE_TOLERANCE,
        language_filter: Optional[LanguageFilter] = None,
        segmenter: Optional[SectionSegmenter] = None,
        classifier: Optional[DietaryClassifier] = None,
        calories_extractor: Optional[CaloriesExtractor] = None,
        converter: Optional[CurrencyConverter] = None,
    ):
        """
        Initialize the service.

        Args:
            label_confidence_threshold: Fragment threshold for ingredient labels
            front_confidence_threshold: Fragment threshold for front-of-pack captures
            line_tolerance: Same-line tolerance for fragment grouping
            language_filter: English line filter
            segmenter: Section segmenter (formats its sections)
            classifier: Dietary classifier
            calories_extractor: Calories extractor
            converter: Currency converter
        """
        self.label_confidence_threshold = label_confidence_threshold
        self.front_confidence_threshold = front_confidence_threshold
        self.line_tolerance = line_tolerance

        self.language_filter = language_filter or LanguageFilter()
        self.segmenter = segmenter or SectionSegmenter()
        self.classifier = classifier or DietaryClassifier()
        self.calories_extractor = calories_extractor or CaloriesExtractor()
        self.converter = converter or CurrencyConverter()

    def _normalizer(self, confidence_threshold: float) -> TextNormalizer:
        return TextNormalizer(
            confidence_threshold=confidence_threshold,
            line_tolerance=self.line_tolerance,
        )

    # =========================================================================
    # Ingredient label
    # =========================================================================

    async def scan_label(
        self,
        fragments: Iterable[RawFragment],
        barcode: Optional[str] = None,
        confidence_threshold: Optional[float] = None,
    ) -> LabelScanResult:
        """
        Process an ingredient-label capture.

        Args:
            fragments: OCR fragments of the label
            barcode: Barcode scanned alongside, if any
            confidence_threshold: Override for the label threshold

        Returns:
            LabelScanResult

        Raises:
            NoTextFoundError: if no fragment survives normalization
        """
        fragments = list(fragments)
        threshold = self.label_confidence_threshold if confidence_threshold is None else confidence_threshold

        normalized = await asyncio.to_thread(self._normalizer(threshold).normalize, fragments)
        if normalized.is_empty:
            logger.info(f"No usable text in {len(fragments)} fragments (threshold={threshold})")
            raise NoTextFoundError()

        return await asyncio.to_thread(self.process_text, normalized.text, barcode)

    async def scan_label_text(self, text: Optional[str], barcode: Optional[str] = None) -> LabelScanResult:
        """
        Process label text that was already recognized and joined.

        Raises:
            NoTextFoundError: if text is empty or whitespace
        """
        cleaned = self._normalizer(self.label_confidence_threshold).clean_text(text or "")
        if not cleaned:
            raise NoTextFoundError()
        return await asyncio.to_thread(self.process_text, cleaned, barcode)

    def process_text(self, text: str, barcode: Optional[str] = None) -> LabelScanResult:
        """Run the label stages on normalized text."""
        translated = self.language_filter.filter(text)
        sections = self.segmenter.segment(translated)
        classification = self.classifier.classify(sections.ingredients_text)
        calories = self.calories_extractor.extract(translated)

        result = LabelScanResult(
            original_text=text,
            translated_text=translated,
            detected_language=self.language_filter.detect_language(text),
            sections=sections,
            classification=classification,
            calories=calories,
            barcode=barcode,
        )
        logger.info(
            f"Label scan{f' [{barcode}]' if barcode else ''}: "
            f"{classification.category.value}, {calories}"
        )
        return result

    def scan_barcode(self, barcode: str) -> ClassificationResult:
        """Classification for a barcode-only scan (no label text)."""
        logger.info(f"Barcode-only scan [{barcode}]")
        return self.classifier.barcode_only_result()

    # =========================================================================
    # Front of pack and price
    # =========================================================================

    async def scan_front(
        self,
        fragments: Iterable[RawFragment],
        confidence_threshold: Optional[float] = None,
    ) -> FrontScanResult:
        """
        Process a front-of-pack capture.

        Raises:
            NoTextFoundError: if no fragment survives normalization
        """
        threshold = self.front_confidence_threshold if confidence_threshold is None else confidence_threshold
        extractor = ProductInfoExtractor(normalizer=self._normalizer(threshold))

        result = await asyncio.to_thread(extractor.extract, list(fragments))
        if not result.text:
            raise NoTextFoundError("Could not extract product information from image")
        return result

    async def convert_price(self, price: str, weight_grams: Optional[int] = None) -> PriceInfo:
        """Parse and convert a price string obtained by the caller."""
        return self.converter.convert_price(price, weight_grams)

