"""Runtime loader for extraction and matching settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from nestkeeper.runtime.logging import get_logger
from nestkeeper.runtime.paths import get_paths

logger = get_logger(__name__)

DEFAULT_OCR_URL = "http://localhost:8001"


@dataclass(frozen=True)
class Settings:
    """Tunable policy values, with the documented defaults."""

    warranty_years: int = 1
    match_threshold: float = 0.5
    ocr_url: str = DEFAULT_OCR_URL
    ocr_timeout: float = 60.0


@lru_cache(maxsize=4)
def load_settings(config_path: str | None = None) -> Settings:
    """
    Load settings from settings.toml.

    Expected layout::

        [extraction]
        warranty_years = 1

        [matching]
        threshold = 0.5

        [ocr]
        url = "http://localhost:8001"
        timeout = 60.0

    Args:
        config_path: Optional TOML path override. If None, uses default project path.

    Returns:
        Settings with file values applied over defaults. OCR_SERVICE_URL, when set,
        overrides the OCR URL.
    """
    try:
        import tomllib
    except ImportError:
        import tomli as tomllib  # type: ignore[no-redef]

    path = Path(config_path) if config_path is not None else get_paths().settings
    config: dict = {}
    if path.exists():
        with open(path, "rb") as f:
            config = tomllib.load(f)
        logger.debug("Loaded settings from %s", path)

    extraction = config.get("extraction", {})
    matching = config.get("matching", {})
    ocr = config.get("ocr", {})

    defaults = Settings()
    return Settings(
        warranty_years=int(extraction.get("warranty_years", defaults.warranty_years)),
        match_threshold=float(matching.get("threshold", defaults.match_threshold)),
        ocr_url=os.environ.get("OCR_SERVICE_URL") or str(ocr.get("url", defaults.ocr_url)),
        ocr_timeout=float(ocr.get("timeout", defaults.ocr_timeout)),
    )
