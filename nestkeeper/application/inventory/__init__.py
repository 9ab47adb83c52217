"""Inventory workflows."""

from nestkeeper.application.inventory.match import match_ocr_text, match_product

__all__ = [
    "match_ocr_text",
    "match_product",
]
