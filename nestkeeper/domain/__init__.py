"""Core domain models for the nestkeeper project.

This module provides the value objects shared by the extraction and
matching code:
- RawCandidate, ExtractionResult, OCRText: receipt extraction models
- ProductRecognition: product photo recognition model
- InventoryItem, MatchResult: inventory matching models

Usage:
    from nestkeeper.domain import ExtractionResult, InventoryItem
"""

from nestkeeper.domain.inventory import InventoryItem, MatchResult
from nestkeeper.domain.receipt import ExtractionResult, OCRText, ProductRecognition, RawCandidate

__all__ = [
    "ExtractionResult",
    "InventoryItem",
    "MatchResult",
    "OCRText",
    "ProductRecognition",
    "RawCandidate",
]
