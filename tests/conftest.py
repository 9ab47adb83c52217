"""Shared pytest fixtures for nestkeeper tests."""

from __future__ import annotations

import pytest

from nestkeeper.domain.receipt import OCRText
from nestkeeper.runtime import load_known_retailer_keywords, load_settings, reset_paths

HOME_DEPOT_RECEIPT = "HOME DEPOT\n11/12/2025\nKitchenAid Stand Mixer $394.39\nTotal: $394.39"


class FakeOCR:
    """OCR collaborator returning canned output, or raising a canned error."""

    def __init__(self, output: object = None, error: Exception | None = None) -> None:
        self.output = output
        self.error = error
        self.calls: list[str] = []

    async def recognize(self, image_uri: str) -> object:
        self.calls.append(image_uri)
        if self.error is not None:
            raise self.error
        return self.output


@pytest.fixture(autouse=True)
def isolated_project_home(tmp_path, monkeypatch):
    """Point the project root at an empty directory and clear cached config."""
    monkeypatch.setenv("NESTKEEPER_HOME", str(tmp_path))
    monkeypatch.delenv("OCR_SERVICE_URL", raising=False)
    reset_paths()
    load_settings.cache_clear()
    load_known_retailer_keywords.cache_clear()
    yield tmp_path
    reset_paths()
    load_settings.cache_clear()
    load_known_retailer_keywords.cache_clear()


@pytest.fixture
def home_depot_ocr() -> FakeOCR:
    return FakeOCR(OCRText(text=HOME_DEPOT_RECEIPT, confidence=85))
