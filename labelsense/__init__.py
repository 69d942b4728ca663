"""
LabelSense - food label understanding from OCR text.

Turns noisy, multilingual OCR output from packaged-food labels into:
- Ingredient / allergen sections
- A dietary classification with an explainable reason
- Calories, product name, declared weight and price conversions
"""

__version__ = "1.0.0"
