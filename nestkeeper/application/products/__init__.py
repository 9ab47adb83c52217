"""Product workflows."""

from nestkeeper.application.products.recognize import recognize_product

__all__ = [
    "recognize_product",
]
