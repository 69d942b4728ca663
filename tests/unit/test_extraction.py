"""
Unit tests for calories, product info and price extraction.
"""

import pytest

from labelsense.core.types import (
    CALORIES_NOT_LISTED,
    Currency,
    ProductInfo,
    ProductWeight,
    RawFragment,
)
from labelsense.extraction.calories import CaloriesExtractor
from labelsense.extraction.product_info import ProductInfoExtractor
from labelsense.extraction.price import (
    CURRENCY_NOT_SUPPORTED,
    UNABLE_TO_CONVERT,
    CurrencyConverter,
    detect_currency,
    weight_text_to_grams,
)
from labelsense.ocr.text_normalizer import TextNormalizer


class TestCaloriesExtractor:
    """Tests for CaloriesExtractor class."""

    @pytest.fixture
    def extractor(self):
        return CaloriesExtractor()

    @pytest.mark.parametrize("text,expected", [
        ("Energy: 250 kcal per serving", "250 kcal"),
        ("Calories: 120", "120 kcal"),
        ("CALORIES 90", "90 kcal"),
        ("Energy 2000kJ / 480 kcal", "480 kcal"),
        ("Energy: 500 kcal", "500 kcal"),
    ])
    def test_extracts_calories(self, extractor, text, expected):
        assert str(extractor.extract(text)) == expected

    def test_not_listed(self, extractor):
        result = extractor.extract("no numbers here")

        assert not result.is_listed
        assert str(result) == CALORIES_NOT_LISTED

    def test_empty_text(self, extractor):
        assert str(extractor.extract(None)) == CALORIES_NOT_LISTED
        assert str(extractor.extract("")) == CALORIES_NOT_LISTED

    def test_first_pattern_wins(self, extractor):
        """The number-then-unit pattern is tried before 'Calories: N'."""
        result = extractor.extract("Calories: 120\n250 kcal")

        assert result.amount == 250

    def test_invalid_pattern_skipped(self):
        extractor = CaloriesExtractor(patterns=("(", r"(\d+)\s*kcal"))

        assert extractor.extract("80 kcal").amount == 80


class TestProductInfoExtractor:
    """Tests for ProductInfoExtractor class."""

    @pytest.fixture
    def extractor(self):
        return ProductInfoExtractor()

    def test_extracts_name_and_weight(self, extractor, front_fragments):
        result = extractor.extract(front_fragments)

        assert result.product_info.name == "Lay's Classic Salted"
        assert result.product_info.weight == ProductWeight(value=52, unit="g")
        assert result.product_info.search_query == "Lay's Classic Salted 52g"

    def test_uses_given_threshold(self, front_fragments):
        extractor = ProductInfoExtractor(normalizer=TextNormalizer(confidence_threshold=0.5))

        result = extractor.extract(front_fragments)

        assert result.product_info.name == "Classic Salted"
        assert "₫12,000" not in result.text

    def test_name_skips_price_and_short_lines(self, extractor):
        lines = ["₫25,000", "OK", "Jasmine Rice", "Premium Grade"]

        # Only the top three lines are considered
        assert extractor.extract_name(lines) == "Jasmine Rice"

    def test_name_skips_leading_weight(self, extractor):
        assert extractor.extract_name(["500g", "Rice Noodles"]) == "Rice Noodles"

    def test_no_name(self, extractor):
        assert extractor.extract_name(["Net weight 1kg"]) is None
        assert extractor.extract_name([]) is None

    @pytest.mark.parametrize("text,value,unit,grams", [
        ("Net Wt 52g", 52, "g", 52),
        ("500 grams", 500, "g", 500),
        ("1kg", 1, "kg", 1000),
        ("2 Kilograms", 2, "kg", 2000),
        ("330ml can", 330, "ml", 330),
    ])
    def test_extract_weight(self, extractor, text, value, unit, grams):
        weight = extractor.extract_weight(text)

        assert weight.value == value
        assert weight.unit == unit
        assert weight.grams == grams

    def test_no_weight(self, extractor):
        assert extractor.extract_weight("Classic Salted") is None

    def test_empty_capture(self, extractor):
        result = extractor.extract([RawFragment("blur", 0.1, 0.5, 0.5)])

        assert result.text == ""
        assert result.product_info == ProductInfo()
        assert result.product_info.search_query is None


class TestCurrencyConverter:
    """Tests for CurrencyConverter class."""

    @pytest.fixture
    def converter(self):
        return CurrencyConverter()

    def test_dong_with_weight(self, converter):
        info = converter.convert_price("₫50000", 500)

        assert info.local_amount_text == "₫50000"
        assert info.converted_amount_text == "₹165.00"
        assert "₫100000/kg" in info.per_kilogram_text
        assert "₹330.00/kg" in info.per_kilogram_text
        assert info.currency == Currency.VND

    def test_dong_with_separators(self, converter):
        assert converter.convert_price("₫50,000").converted_amount_text == "₹165.00"
        assert converter.convert_price("50.000đ").converted_amount_text == "₹165.00"

    def test_dong_without_weight(self, converter):
        info = converter.convert_price("₫50000")

        assert info.per_kilogram_text is None

    def test_zero_weight_has_no_per_kg(self, converter):
        assert converter.convert_price("₫50000", 0).per_kilogram_text is None

    def test_rupee(self, converter):
        info = converter.convert_price("₹299", 500)

        assert info.converted_amount_text == "₹299"
        assert info.per_kilogram_text == "₹598.00/kg"
        assert info.currency == Currency.INR

    def test_decimal_point_is_stripped(self, converter):
        """'₹99.50' is read as 9950."""
        info = converter.convert_price("₹99.50", 1000)

        assert info.per_kilogram_text == "₹9950.00/kg"

    def test_unsupported_currency(self, converter):
        info = converter.convert_price("$5")

        assert info.converted_amount_text == CURRENCY_NOT_SUPPORTED
        assert info.currency == Currency.UNSUPPORTED

    @pytest.mark.parametrize("price", ["abc", "₫", "₫12abc", "₹-5"])
    def test_unparseable(self, converter, price):
        info = converter.convert_price(price)

        assert info.local_amount_text == price
        assert info.converted_amount_text == UNABLE_TO_CONVERT
        assert info.per_kilogram_text is None

    def test_custom_rate(self):
        converter = CurrencyConverter(vnd_to_inr_rate=0.01)

        assert converter.convert_price("₫1000").converted_amount_text == "₹10.00"

    def test_deterministic(self, converter):
        assert converter.convert_price("₫50000", 500) == converter.convert_price("₫50000", 500)

    def test_detect_currency(self):
        assert detect_currency("₫10") == Currency.VND
        assert detect_currency("10đ") == Currency.VND
        assert detect_currency("₹10") == Currency.INR
        assert detect_currency("€10") == Currency.UNSUPPORTED

    @pytest.mark.parametrize("weight,grams", [
        ("500g", 500),
        ("1kg", 1000),
        ("abc", None),
        (None, None),
    ])
    def test_weight_text_to_grams(self, weight, grams):
        assert weight_text_to_grams(weight) == grams
