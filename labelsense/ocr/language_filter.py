"""
Language Filter for LabelSense

Approximates "translate to English" for multilingual labels. Many packs
print the same text in several languages, so the English lines are kept
and the rest dropped; nothing is machine-translated.
"""

from typing import Iterable, List, Optional
import re
import unicodedata
from loguru import logger


# Letters allowed in an English line
ASCII_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")

ENGLISH_HEADERS = ("ingredients", "ingredient", "contains", "allergen")

NOISE_MARKERS = ("address", "phone", "email", "@", "www.", "http")

LONG_NUMBER_PATTERN = re.compile(r"\d{4,}")


def is_non_latin_letter(char: str) -> bool:
    """True for letters (and combining marks) outside the ASCII alphabet."""
    if char in ASCII_LETTERS:
        return False
    return unicodedata.category(char)[0] in ("L", "M")


def has_non_latin_letters(text: str) -> bool:
    """True if any letter in text is outside the ASCII Latin alphabet."""
    return any(is_non_latin_letter(c) for c in text)


class LanguageFilter:
    """
    Keeps English-looking lines of label text.

    If a line starts with an English section header, only English lines
    from that header onward are kept. Otherwise every English line of the
    text is kept. When nothing survives the input is returned unchanged.

    Usage:
        language_filter = LanguageFilter()
        english = language_filter.filter("Thành phần: đường\\nIngredients: sugar")
        print(english)  # "Ingredients: sugar"
    """

    # Script ranges checked in order; first hit wins
    SCRIPT_PATTERNS = [
        ("ja", re.compile(r"[぀-ヿ]")),  # hiragana / katakana
        ("ko", re.compile(r"[가-힣]")),
        ("zh", re.compile(r"[一-鿿]")),
        ("th", re.compile(r"[ก-๙]")),
        ("vi", re.compile(
            r"[ạảấầẩẫậắằẳẵặẹẻẽếềểễệỉịọỏốồổỗộớờởỡợụủứừửữựỳỵỷỹđăơư]"
        )),
        ("es", re.compile(r"[àáâãäåæçèéêëìíîïðñòóôõöøùúûüýþÿ]")),
    ]

    def __init__(
        self,
        headers: Iterable[str] = ENGLISH_HEADERS,
        noise_markers: Iterable[str] = NOISE_MARKERS,
        min_line_length: int = 3,
    ):
        """
        Initialize the filter.

        Args:
            headers: Lower-case English section headers
            noise_markers: Substrings marking contact/address lines
            min_line_length: Shortest line worth keeping
        """
        self.headers = tuple(headers)
        self.noise_markers = tuple(noise_markers)
        self.min_line_length = min_line_length

    def filter(self, text: str) -> str:
        """
        Keep only the English lines of text.

        Args:
            text: Normalized label text, one logical line per row

        Returns:
            English lines joined by newlines, or text unchanged if none
        """
        lines = [line.strip() for line in text.splitlines()]
        lines = [line for line in lines if line]

        header_index = self._find_header(lines)
        if header_index is not None:
            kept = [line for line in lines[header_index:] if self.is_english_line(line)]
            if kept:
                logger.debug(f"English header found at line {header_index}; kept {len(kept)} lines")
                return "\n".join(kept)

        kept = [line for line in lines if self.is_english_line(line)]
        if not kept:
            logger.debug("No English lines found; keeping original text")
            return text

        logger.debug(f"Kept {len(kept)}/{len(lines)} English lines")
        return "\n".join(kept)

    def _find_header(self, lines: List[str]) -> Optional[int]:
        for index, line in enumerate(lines):
            lower = line.lower()
            if any(lower.startswith(header) for header in self.headers):
                return index
        return None

    def is_english_line(self, line: str) -> bool:
        """Check that a line is Latin-script and not contact noise."""
        if has_non_latin_letters(line):
            return False

        lower = line.lower()
        if any(marker in lower for marker in self.noise_markers):
            return False
        if LONG_NUMBER_PATTERN.search(lower):
            return False

        return len(line) >= self.min_line_length

    def detect_language(self, text: str) -> str:
        """
        Guess the dominant script of text.

        Simple character-range heuristic, not a language model.

        Returns:
            One of "ja", "ko", "zh", "th", "vi", "es" or "en"
        """
        lower = text.lower()
        for code, pattern in self.SCRIPT_PATTERNS:
            if pattern.search(lower):
                return code
        return "en"
