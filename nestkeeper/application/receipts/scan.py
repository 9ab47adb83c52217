"""Receipt extraction workflow: OCR -> candidate parsing -> selection -> warranty."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from numbers import Real
from typing import Literal

from nestkeeper.domain.receipt import ExtractionResult, OCRText
from nestkeeper.receipt.extraction import extract_from_text
from nestkeeper.receipt.warranty import DEFAULT_WARRANTY_YEARS
from nestkeeper.runtime import get_logger
from nestkeeper.runtime.ocr_client import MalformedOCRResult, OCRCollaborator

logger = get_logger(__name__)

PipelineState = Literal["idle", "running", "succeeded", "failed"]


def coerce_ocr_output(output: object) -> OCRText:
    """
    Validate what an OCR collaborator returned.

    Accepts an OCRText or a mapping with ``text`` and ``confidence`` keys.
    Float confidences are rounded; anything outside 0-100 is rejected.

    Raises:
        MalformedOCRResult: if the output does not have that shape.
    """
    if isinstance(output, OCRText):
        text, confidence = output.text, output.confidence
    elif isinstance(output, Mapping):
        text, confidence = output.get("text"), output.get("confidence")
    else:
        raise MalformedOCRResult(f"OCR returned {type(output).__name__}, expected text and confidence")

    if not isinstance(text, str):
        raise MalformedOCRResult("OCR text is missing or not a string")
    if isinstance(confidence, bool) or not isinstance(confidence, Real):
        raise MalformedOCRResult(f"OCR confidence is not a number: {confidence!r}")

    rounded = round(float(confidence))
    if not 0 <= rounded <= 100:
        raise MalformedOCRResult(f"OCR confidence out of range: {confidence!r}")
    return OCRText(text=text, confidence=rounded)


async def extract_receipt(
    image_uri: str,
    ocr: OCRCollaborator,
    known_retailers: Sequence[str] = (),
    warranty_years: int = DEFAULT_WARRANTY_YEARS,
) -> ExtractionResult:
    """
    Run OCR on a receipt image and extract its structured fields.

    Never raises: any failure while acquiring OCR output or parsing it yields
    an empty ExtractionResult with ``error`` set.

    Args:
        image_uri: Image reference understood by the OCR collaborator
        ocr: OCR collaborator; ``recognize`` is the only await in the pipeline
        known_retailers: Extra retailer name fragments to recognize as stores
        warranty_years: Years added to the purchase date for the expiration

    Returns:
        ExtractionResult in the succeeded or failed state
    """
    state: PipelineState = "idle"
    try:
        state = "running"
        logger.debug("Receipt extraction %s for %s", state, image_uri)
        ocr_text = coerce_ocr_output(await ocr.recognize(image_uri))
        result = extract_from_text(
            ocr_text.text,
            ocr_text.confidence,
            known_retailers=known_retailers,
            warranty_years=warranty_years,
        )
    except Exception as exc:
        state = "failed"
        logger.warning("Receipt extraction %s for %s: %s", state, image_uri, exc)
        return ExtractionResult.failed(str(exc) or type(exc).__name__)

    state = "succeeded"
    logger.info(
        "Receipt extraction %s: date=%s total=%s store=%s",
        state,
        result.purchase_date,
        result.purchase_price,
        result.store_name,
    )
    return result
