"""HTTP client for the OCR service (the pipeline's OCR collaborator)."""

import time
from pathlib import Path
from typing import Protocol
from urllib.parse import unquote, urlparse

import httpx

from nestkeeper.domain.receipt import OCRText
from nestkeeper.receipt.ocr_helpers import flatten_ocr_detections, resize_image_bytes
from nestkeeper.runtime.logging import get_logger

logger = get_logger(__name__)


class OCRServiceUnavailable(RuntimeError):
    """Raised when the OCR service cannot be reached or returns an error."""


class MalformedOCRResult(ValueError):
    """Raised when an OCR collaborator returns data of the wrong shape."""


class OCRCollaborator(Protocol):
    """Anything that turns an image reference into text plus confidence."""

    async def recognize(self, image_uri: str) -> OCRText: ...


def image_path_from_uri(image_uri: str) -> Path:
    """Resolve a plain path or a ``file://`` URI to a local path."""
    parsed = urlparse(image_uri)
    if parsed.scheme == "file":
        return Path(unquote(parsed.path))
    return Path(image_uri)


class HttpOCRClient:
    """OCR collaborator backed by an HTTP OCR service.

    The service accepts ``POST {url}/ocr`` with a multipart ``file`` field and
    answers with JSON ``{"detections": [[bbox, [text, confidence]], ...]}``.
    """

    def __init__(
        self,
        ocr_url: str,
        timeout: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.ocr_url = ocr_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def recognize(self, image_uri: str) -> OCRText:
        image_path = image_path_from_uri(image_uri)
        logger.info("Sending image to OCR service at %s...", self.ocr_url)

        image_bytes = image_path.read_bytes()
        resized_bytes = resize_image_bytes(image_bytes)

        try:
            start_time = time.monotonic()
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(
                    f"{self.ocr_url}/ocr",
                    files={"file": (image_path.name, resized_bytes, "image/jpeg")},
                )
            logger.info("OCR service returned in %.2f seconds", time.monotonic() - start_time)
        except httpx.RequestError as e:
            logger.error("Failed to connect to OCR service: %s", e)
            raise OCRServiceUnavailable(f"Failed to connect to OCR service: {e}") from e

        if response.status_code != 200:
            # Body is not logged: it may echo receipt text.
            logger.error("OCR service error: %s", response.status_code)
            raise OCRServiceUnavailable(f"OCR service error: {response.status_code}")

        try:
            raw_result = response.json()
            return flatten_ocr_detections(raw_result)
        except (ValueError, AttributeError) as e:
            raise MalformedOCRResult(f"Unreadable OCR response: {e}") from e
