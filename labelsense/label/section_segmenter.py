"""
Section Segmenter for LabelSense

Splits label text into ingredients, allergens and other named sections
by detecting multilingual section headers line by line.
"""

from typing import Dict, Iterable, List, Mapping, Optional, Tuple
import re
from loguru import logger

from labelsense.core.types import LabelSections
from labelsense.label.ingredient_formatter import IngredientFormatter


INGREDIENTS = "ingredients"
ALLERGENS = "allergens"

INGREDIENT_HEADERS = (
    "ingredients", "ingredient", "ingrédients", "ingredientes",
    "ingredienti", "zutaten", "成分", "材料", "ingrediënten",
)

ALLERGEN_HEADERS = (
    "allergen", "allergens", "allergen information", "allergen info",
    "contains", "may contain", "contains:", "may contain:",
    "allergène", "allergènes", "alérgenos", "allergeni",
    "allergene", "アレルゲン", "过敏原", "allergenen",
)

# Header -> section name
OTHER_HEADERS = {
    "nutrition facts": "nutrition",
    "nutrition information": "nutrition",
    "nutritional information": "nutrition",
    "storage": "storage",
    "directions": "directions",
    "preparation": "directions",
}

# Header-line remainders at least this long are not seeded into the section
MAX_HEADER_REMAINDER = 100


class SectionSegmenter:
    """
    Line-by-line section segmentation.

    A line is a header when, lower-cased, it starts with a header, equals
    it, or contains ": <header>". Ingredient headers win over allergen
    headers, which win over other headers. Text before any header counts
    as ingredients. If no ingredients were found the whole text is used,
    so the ingredient list is never empty when there was input.

    Usage:
        segmenter = SectionSegmenter()
        sections = segmenter.segment("Ingredients: wheat, salt\\nContains: gluten")
        print(sections.allergen_text)  # "• gluten"
    """

    def __init__(
        self,
        ingredient_headers: Iterable[str] = INGREDIENT_HEADERS,
        allergen_headers: Iterable[str] = ALLERGEN_HEADERS,
        other_headers: Optional[Mapping[str, str]] = None,
        formatter: Optional[IngredientFormatter] = None,
    ):
        """
        Initialize the segmenter.

        Args:
            ingredient_headers: Lower-case ingredient section headers
            allergen_headers: Lower-case allergen section headers
            other_headers: Lower-case header -> section name for other sections
            formatter: Formatter applied to ingredient and allergen sections
        """
        self.ingredient_headers = tuple(ingredient_headers)
        self.allergen_headers = tuple(allergen_headers)
        self.other_headers = dict(OTHER_HEADERS if other_headers is None else other_headers)
        self.formatter = formatter or IngredientFormatter()

        # Ordered (section, headers) groups; earlier groups take precedence
        self._header_groups: List[Tuple[str, Tuple[str, ...]]] = [
            (INGREDIENTS, self.ingredient_headers),
            (ALLERGENS, self.allergen_headers),
        ]
        for header, name in self.other_headers.items():
            self._header_groups.append((name, (header,)))

    def segment(self, text: str) -> LabelSections:
        """
        Split text into formatted sections.

        Args:
            text: Filtered label text

        Returns:
            LabelSections with formatted ingredient and allergen lists
        """
        slots = self.split_raw(text)

        ingredients = slots.pop(INGREDIENTS, "")
        if not ingredients:
            logger.debug("No ingredients section identified; using whole text")
            ingredients = text
        allergens = slots.pop(ALLERGENS, None)

        formatted = self.formatter.format(ingredients)
        if not formatted and text.strip():
            # Header-only text formats to nothing; keep it as a single entry
            formatted = f"{self.formatter.bullet}{text.strip()}"

        return LabelSections(
            ingredients_text=formatted,
            allergen_text=self.formatter.format(allergens) if allergens is not None else None,
            other_sections=slots,
        )

    def split_raw(self, text: str) -> Dict[str, str]:
        """
        Split text into unformatted section bodies.

        Returns:
            Section name -> raw text; only non-empty sections appear
        """
        slots: Dict[str, str] = {}
        current: Optional[str] = None
        buffer: List[str] = []

        for line in text.splitlines():
            trimmed = line.strip()
            if not trimmed:
                if buffer and current is not None:
                    buffer.append("")
                continue

            detected = self.detect_header(trimmed)
            if detected is not None:
                section, header = detected
                self._flush(slots, current, buffer)
                logger.debug(f"Section header '{header}' -> {section}")

                current = section
                buffer = []
                remainder = self._header_remainder(trimmed, header)
                if remainder and len(remainder) < MAX_HEADER_REMAINDER:
                    buffer.append(remainder)
                continue

            if current is None:
                current = INGREDIENTS
            buffer.append(trimmed)

        self._flush(slots, current, buffer)
        return slots

    def detect_header(self, line: str) -> Optional[Tuple[str, str]]:
        """
        Detect a section header on a line.

        Returns:
            (section name, matched header) or None
        """
        lower = line.lower()
        for section, headers in self._header_groups:
            for header in headers:
                if lower.startswith(header) or f": {header}" in lower or lower == header:
                    return section, header
        return None

    def _header_remainder(self, line: str, header: str) -> str:
        """Text on a header line after the header token."""
        section_headers = next(
            headers for section, headers in self._header_groups if header in headers
        )
        # Strip the longest header of the section the line starts with
        for candidate in sorted(section_headers, key=len, reverse=True):
            match = re.match(re.escape(candidate), line, re.IGNORECASE)
            if match:
                return line[match.end():].strip(": ")

        match = re.search(r":\s" + re.escape(header), line, re.IGNORECASE)
        if match:
            return line[match.end():].strip(": ")
        return ""

    @staticmethod
    def _flush(slots: Dict[str, str], section: Optional[str], buffer: List[str]) -> None:
        if section is None or not buffer:
            return
        content = "\n".join(buffer).strip()
        if content:
            slots[section] = content
