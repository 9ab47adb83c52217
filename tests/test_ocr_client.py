import asyncio
import io
from datetime import date
from decimal import Decimal
from pathlib import Path

import httpx
import pytest
from PIL import Image

from nestkeeper.application.receipts import extract_receipt
from nestkeeper.domain.receipt import OCRText
from nestkeeper.runtime.ocr_client import (
    HttpOCRClient,
    MalformedOCRResult,
    OCRServiceUnavailable,
    image_path_from_uri,
)

OCR_URL = "http://ocr.test"


def _bbox(x0: int, y0: int, x1: int, y1: int) -> list[list[int]]:
    return [[x0, y0], [x1, y0], [x1, y1], [x0, y1]]


HOME_DEPOT_DETECTIONS = {
    "detections": [
        [_bbox(20, 20, 300, 60), ["HOME DEPOT", 0.9]],
        [_bbox(20, 100, 300, 140), ["11/12/2025", 0.9]],
        [_bbox(20, 200, 500, 240), ["KitchenAid Stand Mixer", 0.9]],
        [_bbox(600, 200, 760, 240), ["$394.39", 0.9]],
        [_bbox(20, 300, 300, 340), ["Total: $394.39", 0.9]],
    ]
}


@pytest.fixture
def receipt_image(tmp_path: Path) -> Path:
    path = tmp_path / "receipt.png"
    buffer = io.BytesIO()
    Image.new("RGB", (120, 200), color="white").save(buffer, format="PNG")
    path.write_bytes(buffer.getvalue())
    return path


def _client(handler) -> HttpOCRClient:
    return HttpOCRClient(OCR_URL + "/", timeout=5.0, transport=httpx.MockTransport(handler))


def test_image_path_from_uri() -> None:
    assert image_path_from_uri("/tmp/receipt.jpg") == Path("/tmp/receipt.jpg")
    assert image_path_from_uri("file:///tmp/my%20receipt.jpg") == Path("/tmp/my receipt.jpg")


def test_recognize_posts_image_and_flattens_detections(receipt_image: Path) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=HOME_DEPOT_DETECTIONS)

    ocr_text = asyncio.run(_client(handler).recognize(str(receipt_image)))

    assert ocr_text == OCRText(
        text="HOME DEPOT\n11/12/2025\nKitchenAid Stand Mixer $394.39\nTotal: $394.39",
        confidence=90,
    )
    assert len(seen) == 1
    assert seen[0].method == "POST"
    assert str(seen[0].url) == "http://ocr.test/ocr"
    assert b'name="file"' in seen[0].content


def test_service_error_status(receipt_image: Path) -> None:
    client = _client(lambda request: httpx.Response(500, text="boom"))

    with pytest.raises(OCRServiceUnavailable, match="500"):
        asyncio.run(client.recognize(str(receipt_image)))


def test_connection_failure(receipt_image: Path) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(OCRServiceUnavailable, match="Failed to connect"):
        asyncio.run(_client(handler).recognize(str(receipt_image)))


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, text="not json"),
        httpx.Response(200, json=["not", "a", "mapping"]),
        httpx.Response(200, json={"detections": [["bad"]]}),
    ],
)
def test_unreadable_response(receipt_image: Path, response: httpx.Response) -> None:
    client = _client(lambda request: response)

    with pytest.raises(MalformedOCRResult):
        asyncio.run(client.recognize(str(receipt_image)))


def test_extract_receipt_end_to_end(receipt_image: Path) -> None:
    client = _client(lambda request: httpx.Response(200, json=HOME_DEPOT_DETECTIONS))

    result = asyncio.run(extract_receipt(receipt_image.as_uri(), client))

    assert result.status == "succeeded"
    assert result.confidence == 90
    assert result.purchase_date == date(2025, 11, 12)
    assert result.purchase_price == Decimal("394.39")
    assert result.store_name == "HOME DEPOT"


def test_extract_receipt_service_down_fails_gracefully(receipt_image: Path) -> None:
    client = _client(lambda request: httpx.Response(503))

    result = asyncio.run(extract_receipt(str(receipt_image), client))

    assert result.status == "failed"
    assert result.error == "OCR service error: 503"
    assert result.purchase_date is None


def test_extract_receipt_missing_image_fails_gracefully(tmp_path: Path) -> None:
    client = _client(lambda request: httpx.Response(200, json=HOME_DEPOT_DETECTIONS))

    result = asyncio.run(extract_receipt(str(tmp_path / "missing.jpg"), client))

    assert result.status == "failed"
    assert result.error is not None
