"""
Dietary Classifier for LabelSense

Keyword rule engine deciding Vegan / Vegetarian / Non-Vegetarian /
Possibly Non-Vegetarian from ingredient text.

Rules are evaluated in a fixed order and the first rule whose condition
holds decides the category. When the evidence is thin the classifier
falls back to Possibly Non-Vegetarian; it never raises and every result
carries a reason.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple
from loguru import logger

from labelsense.classification.keywords import KeywordSets, DEFAULT_KEYWORDS
from labelsense.core.types import (
    ClassificationResult,
    DietaryCategory,
    Evidence,
    REASON_EVIDENCE_SEPARATOR,
)


BARCODE_ONLY_REASON = (
    "No ingredient information available. Only barcode was scanned. "
    "Scan ingredient label for classification."
)

# Text at most this long is treated as an unreadable scan
MIN_READABLE_LENGTH = 10

MAX_LISTED_KEYWORDS = 3
MAX_EVIDENCE_LINES = 2


@dataclass
class KeywordMatches:
    """Keywords found in one piece of text, in keyword-list order."""
    text: str
    non_veg: List[str] = field(default_factory=list)
    non_veg_lines: List[Tuple[str, List[str]]] = field(default_factory=list)
    vegan_safe: List[str] = field(default_factory=list)
    dairy: List[str] = field(default_factory=list)
    egg: List[str] = field(default_factory=list)
    common_plant: List[str] = field(default_factory=list)

    @property
    def has_dairy_or_egg(self) -> bool:
        return bool(self.dairy or self.egg)

    def first_line_with(self, keyword: str) -> Optional[str]:
        for line, keywords in self.non_veg_lines:
            if keyword in keywords:
                return line
        return None


@dataclass(frozen=True)
class Rule:
    """One step of the classification procedure."""
    name: str
    condition: Callable[[KeywordMatches], bool]
    category: DietaryCategory
    explain: Callable[[KeywordMatches], Tuple[str, List[Evidence]]]


def _listing(keywords: Sequence[str], limit: int = MAX_LISTED_KEYWORDS) -> str:
    """'a, b, c and 2 more'"""
    listed = ", ".join(keywords[:limit])
    if len(keywords) > limit:
        listed += f" and {len(keywords) - limit} more"
    return listed


def _explain_non_veg(matches: KeywordMatches) -> Tuple[str, List[Evidence]]:
    reason = f"Found non-vegetarian ingredients: {_listing(matches.non_veg)}"

    if matches.non_veg_lines:
        highlighted = [
            f"\"{line}\" (contains: {', '.join(keywords)})"
            for line, keywords in matches.non_veg_lines[:MAX_EVIDENCE_LINES]
        ]
        reason += REASON_EVIDENCE_SEPARATOR + "Found in: " + "\n".join(highlighted)

    evidence = [
        Evidence(keyword=k, source_line=matches.first_line_with(k))
        for k in matches.non_veg[:MAX_LISTED_KEYWORDS]
    ]
    return reason, evidence


def _explain_vegan(matches: KeywordMatches) -> Tuple[str, List[Evidence]]:
    reason = f"Found vegan-safe ingredients: {_listing(matches.vegan_safe)}"
    return reason, [Evidence(k) for k in matches.vegan_safe[:MAX_LISTED_KEYWORDS]]


def _explain_dairy_egg(matches: KeywordMatches) -> Tuple[str, List[Evidence]]:
    parts = []
    evidence = []
    if matches.dairy:
        parts.append(f"dairy: {', '.join(matches.dairy[:2])}")
        evidence.extend(Evidence(k) for k in matches.dairy[:2])
    if matches.egg:
        parts.append(f"eggs: {', '.join(matches.egg[:2])}")
        evidence.extend(Evidence(k) for k in matches.egg[:2])
    return f"Found {' and '.join(parts)}", evidence


def _explain_plant(matches: KeywordMatches) -> Tuple[str, List[Evidence]]:
    listed = ", ".join(matches.common_plant[:MAX_LISTED_KEYWORDS])
    reason = f"Found plant-based ingredients: {listed}. No animal products detected."
    return reason, [Evidence(k) for k in matches.common_plant[:MAX_LISTED_KEYWORDS]]


def _explain_ambiguous_vegan(matches: KeywordMatches) -> Tuple[str, List[Evidence]]:
    listed = ", ".join(matches.vegan_safe[:2])
    reason = (
        f"Found plant-based ingredients ({listed}) but unable to confirm if fully vegan. "
        "May contain hidden animal products."
    )
    return reason, [Evidence(k) for k in matches.vegan_safe[:2]]


def _explain_undetermined(matches: KeywordMatches) -> Tuple[str, List[Evidence]]:
    return (
        "Unable to determine classification from ingredients. "
        "Ingredients may contain animal products not clearly listed.",
        [],
    )


def _explain_unreadable(matches: KeywordMatches) -> Tuple[str, List[Evidence]]:
    return (
        "Could not read ingredients clearly. "
        "Please try scanning again with better lighting.",
        [],
    )


# Order is the precedence; do not reorder
RULES: Tuple[Rule, ...] = (
    Rule(
        name="non_vegetarian",
        condition=lambda m: bool(m.non_veg),
        category=DietaryCategory.NON_VEGETARIAN,
        explain=_explain_non_veg,
    ),
    Rule(
        name="vegan",
        condition=lambda m: bool(m.vegan_safe) and not m.has_dairy_or_egg,
        category=DietaryCategory.VEGAN,
        explain=_explain_vegan,
    ),
    Rule(
        name="vegetarian_dairy_egg",
        condition=lambda m: m.has_dairy_or_egg,
        category=DietaryCategory.VEGETARIAN,
        explain=_explain_dairy_egg,
    ),
    Rule(
        name="vegetarian_plant",
        condition=lambda m: bool(m.common_plant) and not m.has_dairy_or_egg,
        category=DietaryCategory.VEGETARIAN,
        explain=_explain_plant,
    ),
    Rule(
        name="ambiguous_vegan",
        condition=lambda m: bool(m.vegan_safe),
        category=DietaryCategory.POSSIBLY_NON_VEGETARIAN,
        explain=_explain_ambiguous_vegan,
    ),
    Rule(
        name="undetermined",
        condition=lambda m: len(m.text) > MIN_READABLE_LENGTH,
        category=DietaryCategory.POSSIBLY_NON_VEGETARIAN,
        explain=_explain_undetermined,
    ),
    Rule(
        name="unreadable",
        condition=lambda m: True,
        category=DietaryCategory.POSSIBLY_NON_VEGETARIAN,
        explain=_explain_unreadable,
    ),
)


class DietaryClassifier:
    """
    Classifies ingredient text with an ordered keyword rule table.

    Precedence:
    1. Any non-vegetarian keyword -> Non-Vegetarian
    2. Vegan-safe keywords, no dairy/egg -> Vegan
    3. Dairy or egg -> Vegetarian
    4. Common plant ingredients, no dairy/egg -> Vegetarian
    5. Vegan-safe keywords -> Possibly Non-Vegetarian
    6. Readable but unrecognized text -> Possibly Non-Vegetarian
    7. Empty or very short text -> Possibly Non-Vegetarian (rescan)

    Usage:
        classifier = DietaryClassifier()
        result = classifier.classify("milk, sugar, salt")
        print(result.category, result.reason)
    """

    def __init__(
        self,
        keywords: KeywordSets = DEFAULT_KEYWORDS,
        rules: Sequence[Rule] = RULES,
    ):
        """
        Initialize the classifier.

        Args:
            keywords: Keyword sets to match against
            rules: Ordered rule table; the last rule should always match
        """
        self.keywords = keywords
        self.rules = tuple(rules)

    def classify(self, ingredients_text: Optional[str]) -> ClassificationResult:
        """
        Classify ingredient text.

        Args:
            ingredients_text: Formatted (or raw) ingredient text

        Returns:
            ClassificationResult with a non-empty reason
        """
        matches = self.match(ingredients_text or "")

        for rule in self.rules:
            if rule.condition(matches):
                reason, evidence = rule.explain(matches)
                logger.debug(f"Rule '{rule.name}' matched -> {rule.category.value}")
                return ClassificationResult(
                    category=rule.category,
                    reason=reason,
                    evidence=evidence,
                )

        # Only reachable with a custom rule table lacking a catch-all
        reason, evidence = _explain_unreadable(matches)
        return ClassificationResult(
            category=DietaryCategory.POSSIBLY_NON_VEGETARIAN,
            reason=reason,
            evidence=evidence,
        )

    def match(self, text: str) -> KeywordMatches:
        """Collect every keyword match in text."""
        lower = text.lower()
        matches = KeywordMatches(text=lower)

        matches.non_veg = self._find(self.keywords.non_veg, lower)
        for line in text.splitlines():
            line_keywords = self._find(self.keywords.non_veg, line.lower())
            if line_keywords:
                matches.non_veg_lines.append((line.strip(), line_keywords))

        matches.vegan_safe = self._find(self.keywords.vegan_safe, lower)
        matches.dairy = self._find(self.keywords.dairy, lower)
        matches.egg = self._find(self.keywords.egg, lower)
        matches.common_plant = self._find(self.keywords.common_plant, lower)
        return matches

    @staticmethod
    def _find(keywords: Sequence[str], lower: str) -> List[str]:
        found = []
        for keyword in keywords:
            if keyword in lower and keyword not in found:
                found.append(keyword)
        return found

    def barcode_only_result(self) -> ClassificationResult:
        """Result for a scan that captured a barcode but no label text."""
        return ClassificationResult(
            category=DietaryCategory.POSSIBLY_NON_VEGETARIAN,
            reason=BARCODE_ONLY_REASON,
        )
