"""
Ingredient list formatting.

Cleans a raw label section into a sorted bullet list:
- Header token removal
- Non-Latin and contact/manufacturer line filtering
- Splitting on the dominant separator
- Case-insensitive sorting (repeated entries are kept)
"""

from typing import Iterable, List
import re
from loguru import logger

from labelsense.ocr.language_filter import has_non_latin_letters


BULLET = "• "

NOISE_MARKERS = (
    "address", "phone", "tel:", "email", "@", "www.", "http", "website",
    "contact", "manufactured", "packed by", "distributed by", "imported by",
)

# Checked in order; the first one present in the text is used
SEPARATORS = (",", ";", "\n")

WORD_PUNCTUATION = ".,;:!?()[]{}'\""


class IngredientFormatter:
    """
    Formats ingredient (or allergen) text as a bullet list.

    Every entry is kept, including repeats and case variants.

    Usage:
        formatter = IngredientFormatter()
        print(formatter.format("Ingredients: Salt, sugar, Flour"))
        # • Flour
        # • Salt
        # • sugar
    """

    HEADER_PATTERN = re.compile(r"^\s*ingredients?\s*:?", re.IGNORECASE)
    LEADING_NUMBER_PATTERN = re.compile(r"^\d{4,}")
    LONG_NUMBER_PATTERN = re.compile(r"\d{4,}")

    def __init__(
        self,
        noise_markers: Iterable[str] = NOISE_MARKERS,
        bullet: str = BULLET,
        min_line_length: int = 3,
        min_entry_length: int = 2,
    ):
        self.noise_markers = tuple(noise_markers)
        self.bullet = bullet
        self.min_line_length = min_line_length
        self.min_entry_length = min_entry_length

    def format(self, text: str) -> str:
        """
        Format a section as a sorted bullet list.

        Args:
            text: Raw section text

        Returns:
            One bulleted entry per line, or "" if nothing is left
        """
        entries = self.split_entries(text)
        return "\n".join(f"{self.bullet}{entry}" for entry in entries)

    def split_entries(self, text: str) -> List[str]:
        """Clean, split and sort the entries of a section."""
        cleaned = self.HEADER_PATTERN.sub("", text, count=1).strip()

        valid_lines = [
            line.strip() for line in cleaned.splitlines()
            if self._is_valid_line(line.strip())
        ]

        if valid_lines:
            cleaned = "\n".join(valid_lines)
        else:
            words = self._english_words(cleaned)
            if words:
                logger.debug("All lines filtered; falling back to English words")
                cleaned = " ".join(words)

        if not cleaned:
            return []

        entries: List[str] = []
        for separator in SEPARATORS:
            if separator in cleaned:
                entries = [
                    part.strip() for part in cleaned.split(separator)
                    if len(part.strip()) >= self.min_entry_length
                ]
                break

        if not entries:
            entries = [cleaned]

        return sorted(entries, key=str.lower)

    def _is_valid_line(self, line: str) -> bool:
        if not line:
            return False
        if has_non_latin_letters(line):
            return False
        if self._is_noise(line.lower()):
            return False
        return len(line) >= self.min_line_length

    def _is_noise(self, lower: str) -> bool:
        if any(marker in lower for marker in self.noise_markers):
            return True
        if self.LEADING_NUMBER_PATTERN.match(lower):
            return True
        # Short lines carrying long numbers are barcodes, batch codes, phones
        return bool(self.LONG_NUMBER_PATTERN.search(lower)) and len(lower) < 20

    def _english_words(self, text: str) -> List[str]:
        words = []
        for word in text.split():
            word = word.strip(WORD_PUNCTUATION)
            if word and not has_non_latin_letters(word):
                words.append(word)
        return words
