"""Inventory lookup workflow: does a scanned or typed item already exist?"""

from __future__ import annotations

from collections.abc import Sequence

from nestkeeper.domain.inventory import InventoryItem, MatchResult
from nestkeeper.receipt.matcher import MIN_CONFIDENCE_SCORE, match_against_inventory, match_items
from nestkeeper.runtime import get_logger

logger = get_logger(__name__)


def match_product(
    query: str,
    items: Sequence[InventoryItem],
    threshold: float = MIN_CONFIDENCE_SCORE,
) -> MatchResult[InventoryItem] | None:
    """Return the inventory item a short query refers to, or None."""
    result = match_items(query, items, threshold=threshold)
    if result is None:
        logger.debug("No inventory match among %d items", len(items))
    return result


def match_ocr_text(
    ocr_text: str,
    items: Sequence[InventoryItem],
    threshold: float = MIN_CONFIDENCE_SCORE,
) -> MatchResult[InventoryItem] | None:
    """Return the inventory item mentioned anywhere in an OCR text blob, or None."""
    result = match_against_inventory(items, ocr_text, threshold=threshold)
    if result is None:
        logger.debug("No inventory item found in OCR text (%d items checked)", len(items))
    return result
