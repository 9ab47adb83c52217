"""Runtime infrastructure for the nestkeeper project.

This package provides process/runtime services including:
- Logging setup via get_logger()
- Path resolution via get_paths(), ProjectPaths
- Settings and retailer keyword loading via load_settings(), load_known_retailer_keywords()

The HTTP OCR client lives in ``nestkeeper.runtime.ocr_client`` and is imported
directly by the workflows that need it.

Usage:
    from nestkeeper.runtime import get_logger, load_settings

    logger = get_logger(__name__)
    settings = load_settings()
"""

from nestkeeper.runtime.logging import (
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT,
    LOG_FORMAT_DEBUG,
    configure_logging,
    get_logger,
    set_log_level,
)
from nestkeeper.runtime.paths import ProjectPaths, get_paths, reset_paths
from nestkeeper.runtime.retailer_rules import load_known_retailer_keywords
from nestkeeper.runtime.settings import Settings, load_settings

__all__ = [
    # Logging
    "get_logger",
    "configure_logging",
    "set_log_level",
    "DEFAULT_LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_FORMAT_DEBUG",
    # Rules and settings
    "load_known_retailer_keywords",
    "load_settings",
    "Settings",
    # Paths
    "get_paths",
    "reset_paths",
    "ProjectPaths",
]
