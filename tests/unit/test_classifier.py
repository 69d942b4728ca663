"""
Unit tests for dietary classification.
"""

import pytest

from labelsense.classification.dietary_classifier import DietaryClassifier, Rule
from labelsense.classification.keywords import KeywordSets
from labelsense.core.types import DietaryCategory


class TestDietaryClassifier:
    """Tests for DietaryClassifier class."""

    @pytest.fixture
    def classifier(self):
        return DietaryClassifier()

    def test_non_vegetarian(self, classifier):
        result = classifier.classify("contains chicken and soy sauce")

        assert result.category == DietaryCategory.NON_VEGETARIAN
        assert "chicken" in result.keywords

    def test_non_vegetarian_beats_vegan_keywords(self, classifier):
        result = classifier.classify("soy, tofu, gelatin")

        assert result.category == DietaryCategory.NON_VEGETARIAN
        assert result.keywords == ["gelatin"]

    def test_non_vegetarian_reason_lists_source_lines(self, classifier):
        text = "Ingredients: wheat flour\nchicken extract, fish sauce\nsalt"

        result = classifier.classify(text)

        assert result.primary_reason == "Found non-vegetarian ingredients: chicken, fish"
        assert result.evidence_lines == (
            'Found in: "chicken extract, fish sauce" (contains: chicken, fish)'
        )
        assert result.evidence[0].source_line == "chicken extract, fish sauce"

    def test_non_vegetarian_reason_truncates_keywords(self, classifier):
        result = classifier.classify("beef, pork, chicken, fish, lard")

        assert result.primary_reason == (
            "Found non-vegetarian ingredients: beef, pork, chicken and 2 more"
        )
        assert len(result.evidence) == 3

    def test_evidence_lines_capped_at_two(self, classifier):
        text = "beef stock\npork fat\nchicken powder"

        result = classifier.classify(text)

        assert result.evidence_lines.count("contains:") == 2

    def test_vegetarian_dairy(self, classifier):
        result = classifier.classify("milk, sugar, salt")

        assert result.category == DietaryCategory.VEGETARIAN
        assert "dairy" in result.reason
        assert "milk" in result.reason

    def test_vegetarian_egg(self, classifier):
        result = classifier.classify("eggs, wheat flour, sugar")

        assert result.category == DietaryCategory.VEGETARIAN
        assert result.reason == "Found eggs: egg, eggs"

    def test_vegetarian_dairy_and_egg(self, classifier):
        result = classifier.classify("milk powder, whole egg")

        assert result.reason == "Found dairy: milk and eggs: egg"

    def test_vegan(self, classifier):
        result = classifier.classify("soy, lentils, rice")

        assert result.category == DietaryCategory.VEGAN
        assert result.reason == "Found vegan-safe ingredients: soy, lentils, rice"

    def test_vegetarian_plant_fallback(self, classifier):
        result = classifier.classify("potato, corn oil, salt")

        assert result.category == DietaryCategory.VEGETARIAN
        assert result.reason == (
            "Found plant-based ingredients: potato, corn, oil. No animal products detected."
        )

    def test_undetermined(self, classifier):
        result = classifier.classify("water, E330, natural flavour")

        assert result.category == DietaryCategory.POSSIBLY_NON_VEGETARIAN
        assert result.reason.startswith("Unable to determine classification")

    @pytest.mark.parametrize("text", ["", None, "xq#z"])
    def test_unreadable(self, classifier, text):
        result = classifier.classify(text)

        assert result.category == DietaryCategory.POSSIBLY_NON_VEGETARIAN
        assert "could not read" in result.reason.lower()
        assert result.evidence == []

    def test_reason_always_populated(self, classifier):
        for text in ["", "chicken", "milk", "soy beans", "salt and sugar", "zzzzzzzzzzzzz"]:
            assert classifier.classify(text).reason

    def test_case_insensitive(self, classifier):
        assert classifier.classify("CHICKEN BROTH").category == DietaryCategory.NON_VEGETARIAN

    def test_formatted_bullets(self, classifier):
        result = classifier.classify("• Potato\n• salt\n• sunflower oil")

        assert result.category == DietaryCategory.VEGAN

    def test_injectable_keywords(self):
        classifier = DietaryClassifier(keywords=KeywordSets(non_veg=("insect",)))

        assert classifier.classify("insect protein").category == DietaryCategory.NON_VEGETARIAN
        assert classifier.classify("chicken stock").category == (
            DietaryCategory.POSSIBLY_NON_VEGETARIAN
        )

    def test_injectable_rules(self):
        always_vegan = Rule(
            name="always_vegan",
            condition=lambda m: True,
            category=DietaryCategory.VEGAN,
            explain=lambda m: ("Forced", []),
        )
        classifier = DietaryClassifier(rules=[always_vegan])

        result = classifier.classify("chicken")

        assert result.category == DietaryCategory.VEGAN
        assert result.reason == "Forced"

    def test_empty_rule_table_still_returns(self):
        result = DietaryClassifier(rules=[]).classify("chicken")

        assert result.category == DietaryCategory.POSSIBLY_NON_VEGETARIAN
        assert result.reason

    def test_barcode_only_result(self, classifier):
        result = classifier.barcode_only_result()

        assert result.category == DietaryCategory.POSSIBLY_NON_VEGETARIAN
        assert "Only barcode was scanned" in result.reason

    def test_deterministic(self, classifier):
        text = "Ingredients: chicken, milk, soy"

        assert classifier.classify(text) == classifier.classify(text)
