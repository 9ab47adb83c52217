"""Turn raw receipt OCR text into a structured ExtractionResult."""

from collections.abc import Sequence

from nestkeeper.domain.receipt import ExtractionResult
from nestkeeper.receipt.candidate_selector import select_candidates
from nestkeeper.receipt.text_parser import (
    parse_date_candidates,
    parse_price_candidates,
    parse_product_candidates,
    parse_store_candidates,
    split_lines,
)
from nestkeeper.receipt.warranty import DEFAULT_WARRANTY_YEARS, warranty_expiration
from nestkeeper.runtime import get_logger

logger = get_logger(__name__)


def extract_from_text(
    text: str,
    confidence: int,
    known_retailers: Sequence[str] = (),
    warranty_years: int = DEFAULT_WARRANTY_YEARS,
) -> ExtractionResult:
    """
    Extract purchase date, price, store, product and warranty from OCR text.

    Pure and deterministic: the result depends only on the arguments, never on
    the current date.

    Args:
        text: Full OCR text of the receipt
        confidence: OCR confidence (0-100), passed through unchanged
        known_retailers: Extra retailer name fragments to recognize as stores
        warranty_years: Years added to the purchase date for the expiration

    Returns:
        A succeeded ExtractionResult (fields are None/empty when not found)
    """
    lines = split_lines(text)

    selection = select_candidates(
        dates=parse_date_candidates(lines),
        prices=parse_price_candidates(lines),
        stores=parse_store_candidates(lines, known_retailers),
        products=parse_product_candidates(lines),
    )
    logger.debug(
        "Candidates from %d lines: %d dates, %d prices, %d stores, %d products",
        len(lines),
        len(selection.dates),
        len(selection.prices),
        len(selection.stores),
        len(selection.products),
    )

    return ExtractionResult(
        text=text,
        confidence=confidence,
        purchase_date=selection.purchase_date,
        purchase_price=selection.purchase_price,
        warranty_expiration=warranty_expiration(selection.purchase_date, warranty_years),
        store_name=selection.store_name,
        product_name=selection.product_name,
        dates=list(selection.dates),
        prices=list(selection.prices),
        stores=list(selection.stores),
        products=list(selection.products),
    )
