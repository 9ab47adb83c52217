"""Product photo recognition workflow."""

from __future__ import annotations

from nestkeeper.application.receipts.scan import coerce_ocr_output
from nestkeeper.domain.receipt import ProductRecognition
from nestkeeper.receipt.product_recognition import recognize_product_text
from nestkeeper.runtime import get_logger
from nestkeeper.runtime.ocr_client import OCRCollaborator

logger = get_logger(__name__)


async def recognize_product(image_uri: str, ocr: OCRCollaborator) -> ProductRecognition:
    """OCR a product photo and report its brand and product type.

    OCR failures give an empty recognition with confidence 0.
    """
    try:
        ocr_text = coerce_ocr_output(await ocr.recognize(image_uri))
    except Exception as exc:
        logger.warning("Product recognition failed for %s: %s", image_uri, exc)
        return ProductRecognition(brand=None, product_name=None, confidence=0, text="")
    return recognize_product_text(ocr_text.text, ocr_text.confidence)
