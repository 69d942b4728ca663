"""
Dietary Classification Module

Ordered keyword rules producing a category and an explainable reason.
"""

from labelsense.classification.keywords import KeywordSets, DEFAULT_KEYWORDS
from labelsense.classification.dietary_classifier import (
    DietaryClassifier,
    KeywordMatches,
    Rule,
    RULES,
)

__all__ = [
    "DietaryClassifier",
    "KeywordSets",
    "KeywordMatches",
    "Rule",
    "RULES",
    "DEFAULT_KEYWORDS",
]
