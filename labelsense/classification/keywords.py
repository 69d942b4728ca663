"""
Keyword sets for dietary classification.

All keywords are lower case and matched as substrings of lower-cased
label text, so order within a set decides which matches are reported.
"""

from dataclasses import dataclass
from typing import Tuple


NON_VEG_KEYWORDS = (
    "beef", "pork", "chicken", "fish", "shrimp", "prawn", "squid", "anchovy",
    "gelatin", "lard", "oyster sauce", "meat", "poultry", "seafood", "bacon",
    "ham", "sausage", "turkey", "duck", "lamb", "mutton", "crab", "lobster",
    "mussel", "clam", "scallop", "octopus", "tuna", "salmon", "cod", "mackerel",
    "rennet", "carmine", "cochineal", "shellfish", "anchovies",
)

VEGAN_SAFE_KEYWORDS = (
    "soy", "tofu", "lentils", "vegetables", "grains", "rice", "wheat", "oats",
    "quinoa", "beans", "chickpeas", "peas", "carrots", "potatoes", "tomatoes",
    "spinach", "broccoli", "cabbage", "onions", "garlic", "ginger", "coconut",
    "almond", "cashew", "peanut", "walnut", "sunflower", "sesame", "flax",
    "chia", "hemp", "plant-based", "vegan", "dairy-free", "egg-free",
)

DAIRY_KEYWORDS = (
    "milk", "cheese", "butter", "cream", "yogurt", "yoghurt", "whey", "casein",
    "lactose", "ghee", "curd", "paneer", "dairy",
)

EGG_KEYWORDS = (
    "egg", "eggs", "albumin", "lecithin", "mayonnaise",
)

# Everyday plant ingredients (chips: potato, oil, salt) that are not
# conclusive enough for Vegan but rule out Possibly Non-Vegetarian
COMMON_PLANT_KEYWORDS = (
    "potato", "potatoes", "corn", "maize", "rice", "wheat", "flour",
    "oil", "vegetable oil", "sunflower oil", "salt", "sugar",
    "spices", "herbs", "onion", "garlic", "tomato", "pepper",
)


@dataclass(frozen=True)
class KeywordSets:
    """The five keyword sets the classifier consults."""
    non_veg: Tuple[str, ...] = NON_VEG_KEYWORDS
    vegan_safe: Tuple[str, ...] = VEGAN_SAFE_KEYWORDS
    dairy: Tuple[str, ...] = DAIRY_KEYWORDS
    egg: Tuple[str, ...] = EGG_KEYWORDS
    common_plant: Tuple[str, ...] = COMMON_PLANT_KEYWORDS


DEFAULT_KEYWORDS = KeywordSets()
