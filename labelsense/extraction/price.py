"""
Price parsing and currency conversion.

Parses price strings such as "₫50,000" or "₹299", converts Vietnamese
Dong to Indian Rupee at a fixed rate and normalizes to a per-kilogram
price when the pack weight is known.

Note: decimal points are stripped together with thousands separators,
so "₹99.50" is read as 9950. Whitespace and the letter "đ"/"Đ" (a common
hand-written dong sign) are stripped too, so "50.000đ" converts as 50000
dong instead of failing to parse.
"""

from typing import Optional
import re
from loguru import logger

from labelsense.core.types import Currency, PriceInfo


# Approximate rate: 1 VND ~ 0.0033 INR
VND_TO_INR_RATE = 0.0033

UNABLE_TO_CONVERT = "Unable to convert"
CURRENCY_NOT_SUPPORTED = "Currency not supported"

STRIP_PATTERN = re.compile(r"[₫₹$,.đĐ\s]")
AMOUNT_PATTERN = re.compile(r"\d+")
DIGITS_PATTERN = re.compile(r"[^0-9]")


def detect_currency(price: str) -> Currency:
    """Detect the currency of a price string from its symbol."""
    if "₫" in price or "đ" in price:
        return Currency.VND
    if "₹" in price:
        return Currency.INR
    return Currency.UNSUPPORTED


def weight_text_to_grams(weight: Optional[str]) -> Optional[int]:
    """
    Convert a weight string like "500g" or "1kg" to grams.

    Returns:
        Grams, or None if the string has no digits
    """
    if not weight:
        return None
    digits = DIGITS_PATTERN.sub("", weight)
    if not digits:
        return None
    grams = int(digits)
    if "kg" in weight.lower():
        grams *= 1000
    return grams


class CurrencyConverter:
    """
    Converts label prices to Indian Rupee.

    Usage:
        converter = CurrencyConverter()
        info = converter.convert_price("₫50000", weight_grams=500)
        print(info.converted_amount_text)  # "₹165.00"
        print(info.per_kilogram_text)      # "₫100000/kg (₹330.00/kg)"
    """

    def __init__(self, vnd_to_inr_rate: float = VND_TO_INR_RATE):
        self.vnd_to_inr_rate = vnd_to_inr_rate

    def dong_to_rupee(self, amount: float) -> float:
        return amount * self.vnd_to_inr_rate

    def parse_amount(self, price: str) -> Optional[float]:
        """Numeric value of a price string, or None if unparseable."""
        cleaned = STRIP_PATTERN.sub("", price)
        if not AMOUNT_PATTERN.fullmatch(cleaned):
            return None
        return float(cleaned)

    def convert_price(self, price: str, weight_grams: Optional[int] = None) -> PriceInfo:
        """
        Parse a price string and convert it.

        Args:
            price: Price as printed or found, e.g. "₫50,000"
            weight_grams: Pack weight for the per-kilogram figure

        Returns:
            PriceInfo; failures are reported in converted_amount_text
        """
        amount = self.parse_amount(price)
        if amount is None:
            logger.debug(f"Could not parse price {price!r}")
            return PriceInfo(local_amount_text=price, converted_amount_text=UNABLE_TO_CONVERT)

        currency = detect_currency(price)
        has_weight = weight_grams is not None and weight_grams > 0

        if currency == Currency.VND:
            converted = f"₹{self.dong_to_rupee(amount):.2f}"
            per_kg = None
            if has_weight:
                per_kg_dong = (amount / weight_grams) * 1000
                per_kg_rupee = self.dong_to_rupee(per_kg_dong)
                per_kg = f"₫{per_kg_dong:.0f}/kg (₹{per_kg_rupee:.2f}/kg)"
            return PriceInfo(
                local_amount_text=price,
                converted_amount_text=converted,
                per_kilogram_text=per_kg,
                currency=currency,
            )

        if currency == Currency.INR:
            per_kg = None
            if has_weight:
                per_kg = f"₹{(amount / weight_grams) * 1000:.2f}/kg"
            return PriceInfo(
                local_amount_text=price,
                converted_amount_text=price,
                per_kilogram_text=per_kg,
                currency=currency,
            )

        return PriceInfo(local_amount_text=price, converted_amount_text=CURRENCY_NOT_SUPPORTED)
