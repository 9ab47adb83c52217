"""Recognize a product's brand and type from the OCR text of a product photo.

Unlike receipt extraction this looks at labels and packaging: it answers
"what is this item" rather than "when and for how much was it bought".
"""

import re

from nestkeeper.domain.receipt import ProductRecognition

# fmt: off
COMMON_BRANDS = (
    # Appliances
    "KitchenAid", "Cuisinart", "Instant Pot", "Ninja", "Hamilton Beach", "Black+Decker",
    "Breville", "Oster", "Whirlpool", "GE", "Samsung", "LG", "Frigidaire", "Kenmore",
    # Electronics
    "Sony", "Apple", "Dell", "HP", "Canon", "Epson", "Logitech", "Microsoft", "Roku",
    "Amazon", "Google", "Nest", "Ring", "Dyson",
    # Furniture and home
    "IKEA", "Ashley", "Wayfair", "West Elm", "Pottery Barn", "Crate & Barrel",
    # Tools
    "DeWalt", "Craftsman", "Milwaukee", "Bosch", "Makita", "Stanley", "Black & Decker",
    # Cookware
    "Lodge", "Le Creuset", "Calphalon", "T-fal", "All-Clad", "Pyrex", "Corningware",
    # Cleaning
    "Shark", "Bissell", "Hoover", "iRobot", "Roomba",
)
# fmt: on

# fmt: off
PRODUCT_KEYWORDS = (
    "Blender", "Mixer", "Toaster", "Coffee Maker", "Microwave", "Oven", "Refrigerator",
    "Vacuum", "Air Fryer", "Slow Cooker", "Pressure Cooker", "Food Processor",
    "Stand Mixer", "Hand Mixer", "Kettle", "Iron", "Fan", "Heater", "Humidifier",
    "Lamp", "Chair", "Table", "Desk", "Sofa", "Bed", "Dresser", "Cabinet",
    "Drill", "Saw", "Wrench", "Hammer", "Screwdriver", "Ladder", "Toolbox",
    "TV", "Monitor", "Printer", "Speaker", "Keyboard", "Mouse", "Router", "Camera",
    "Pan", "Pot", "Skillet", "Wok", "Dutch Oven", "Baking Sheet", "Cutting Board",
)
# fmt: on

MODEL_CONTEXT_CHARS = 30
MODEL_PATTERN = re.compile(r"[A-Z]{2,}\d{2,}|Series\s+\d+|Model\s+[\w-]+", re.IGNORECASE)


def _first_contained(keywords: tuple[str, ...], text_upper: str) -> str | None:
    for keyword in keywords:
        if keyword.upper() in text_upper:
            return keyword
    return None


def _with_model(product_name: str, text: str, text_upper: str) -> str:
    """Append a nearby model token (e.g. "KSM150", "Series 5") to a one-word type."""
    index = text_upper.find(product_name.upper())
    if index == -1:
        return product_name
    start = max(0, index - MODEL_CONTEXT_CHARS)
    end = min(len(text), index + len(product_name) + MODEL_CONTEXT_CHARS)
    model = MODEL_PATTERN.search(text[start:end])
    if model is None:
        return product_name
    return f"{product_name} {model.group(0)}"


def recognize_product_text(text: str, confidence: int) -> ProductRecognition:
    """Find the first known brand and product type mentioned in the text."""
    text_upper = text.upper()
    brand = _first_contained(COMMON_BRANDS, text_upper)
    product_name = _first_contained(PRODUCT_KEYWORDS, text_upper)

    if product_name is not None and " " not in product_name:
        product_name = _with_model(product_name, text, text_upper)

    return ProductRecognition(brand=brand, product_name=product_name, confidence=confidence, text=text)
