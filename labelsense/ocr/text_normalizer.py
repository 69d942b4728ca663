"""
Text Normalizer for LabelSense

Turns positioned OCR fragments into logical lines:
- Confidence filtering
- Line grouping by vertical position
- Left-to-right ordering within a line
- Whitespace and punctuation cleanup
"""

from typing import Iterable, List, Tuple
import re
from loguru import logger

from labelsense.core.types import NormalizedText, RawFragment


# Ingredient labels need cleaner text than the front of pack
INGREDIENT_CONFIDENCE_THRESHOLD = 0.5
FRONT_CONFIDENCE_THRESHOLD = 0.3

# Max vertical distance (normalized) between fragments on the same line
LINE_TOLERANCE = 0.02


class TextNormalizer:
    """
    Groups OCR fragments into cleaned lines.

    Fragments are ordered top to bottom. A fragment joins the current line
    when its center is within `line_tolerance` of the line's first fragment;
    fragments of a line are then ordered left to right and joined by a space.
    Ties keep the input order.

    Usage:
        normalizer = TextNormalizer(confidence_threshold=0.5)
        result = normalizer.normalize(fragments)
        print(result.text)
    """

    WHITESPACE_PATTERN = re.compile(r"\s+")
    REPEATED_COMMA_PATTERN = re.compile(r",(?:\s*,)+")

    def __init__(
        self,
        confidence_threshold: float = INGREDIENT_CONFIDENCE_THRESHOLD,
        line_tolerance: float = LINE_TOLERANCE,
    ):
        """
        Initialize the normalizer.

        Args:
            confidence_threshold: Minimum fragment confidence to keep
            line_tolerance: Max center_y distance for fragments on one line
        """
        self.confidence_threshold = confidence_threshold
        self.line_tolerance = line_tolerance

    def normalize(self, fragments: Iterable[RawFragment]) -> NormalizedText:
        """
        Normalize OCR fragments into lines.

        Args:
            fragments: Fragments from the OCR engine, in engine order

        Returns:
            NormalizedText with lines ordered top to bottom
        """
        lines = [text for text, _ in self.normalize_lines(fragments)]
        return NormalizedText(lines=lines)

    def normalize_lines(self, fragments: Iterable[RawFragment]) -> List[Tuple[str, float]]:
        """
        Normalize fragments, keeping each line's vertical position.

        Returns:
            (line text, center_y of the line's first fragment) pairs
        """
        kept = []
        for fragment in fragments:
            if fragment.confidence < self.confidence_threshold:
                continue
            text = fragment.text.strip()
            if text:
                kept.append(fragment)

        # sorted() is stable, so equal keys keep engine order
        kept = sorted(kept, key=lambda f: f.center_y)

        grouped: List[Tuple[float, List[RawFragment]]] = []
        for fragment in kept:
            if grouped and abs(fragment.center_y - grouped[-1][0]) <= self.line_tolerance:
                grouped[-1][1].append(fragment)
            else:
                grouped.append((fragment.center_y, [fragment]))

        lines = []
        for anchor_y, members in grouped:
            members = sorted(members, key=lambda f: f.center_x)
            line = self.clean_line(" ".join(f.text.strip() for f in members))
            if line:
                lines.append((line, anchor_y))

        logger.debug(
            f"Normalized {len(kept)} fragments into {len(lines)} lines "
            f"(threshold={self.confidence_threshold})"
        )
        return lines

    def clean_line(self, line: str) -> str:
        """Collapse whitespace runs and repeated commas."""
        line = self.WHITESPACE_PATTERN.sub(" ", line)
        line = self.REPEATED_COMMA_PATTERN.sub(",", line)
        return line.strip()

    def clean_text(self, text: str) -> str:
        """Clean already-joined text line by line, dropping empty lines."""
        lines = (self.clean_line(line) for line in text.splitlines())
        return "\n".join(line for line in lines if line)
