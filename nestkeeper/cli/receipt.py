"""Command handlers used by the unified CLI."""

import argparse
import asyncio
import json
from dataclasses import asdict
from pathlib import Path

from nestkeeper.application.inventory import match_ocr_text, match_product
from nestkeeper.application.products import recognize_product
from nestkeeper.application.receipts import extract_receipt
from nestkeeper.receipt.extraction import extract_from_text
from nestkeeper.runtime import get_logger, load_known_retailer_keywords, load_settings
from nestkeeper.runtime.inventory_source import load_inventory_items
from nestkeeper.runtime.ocr_client import HttpOCRClient

logger = get_logger(__name__)


def _print_json(payload: dict) -> None:
    print(json.dumps(payload, indent=2))


def _ocr_client(ocr_url: str | None) -> HttpOCRClient:
    settings = load_settings()
    return HttpOCRClient(ocr_url or settings.ocr_url, timeout=settings.ocr_timeout)


def cmd_extract(args: argparse.Namespace) -> int:
    """Extract receipt fields from OCR text saved in a file."""
    text_path = Path(args.text_file)
    if not text_path.exists():
        print(f"Error: text file not found: {text_path}")
        return 1

    settings = load_settings()
    result = extract_from_text(
        text_path.read_text(encoding="utf-8"),
        args.confidence,
        known_retailers=load_known_retailer_keywords(),
        warranty_years=settings.warranty_years,
    )
    _print_json(result.to_dict())
    return 0


def cmd_scan(args: argparse.Namespace) -> int:
    """OCR a receipt image, then print the extracted fields."""
    image_path = Path(args.image)
    if not image_path.exists():
        print(f"Error: receipt file not found: {image_path}")
        return 1

    settings = load_settings()
    result = asyncio.run(
        extract_receipt(
            str(image_path),
            _ocr_client(args.ocr_url),
            known_retailers=load_known_retailer_keywords(),
            warranty_years=settings.warranty_years,
        )
    )
    _print_json(result.to_dict())
    if result.status == "failed":
        print("Make sure the OCR service is running before scanning receipts.")
        return 1
    return 0


def cmd_match(args: argparse.Namespace) -> int:
    """Print the inventory item best matching a query."""
    inventory_path = Path(args.inventory)
    if not inventory_path.exists():
        print(f"Error: inventory file not found: {inventory_path}")
        return 1

    items = load_inventory_items(inventory_path)
    threshold = load_settings().match_threshold
    if args.ocr_text:
        result = match_ocr_text(args.query, items, threshold=threshold)
    else:
        result = match_product(args.query, items, threshold=threshold)

    if result is None:
        print("No match")
        return 0
    print(f"Match: {result.item.name} (id {result.item.id}, {result.score:.0%} via {result.method})")
    return 0


def cmd_recognize(args: argparse.Namespace) -> int:
    """OCR a product photo and print its brand and product type."""
    image_path = Path(args.image)
    if not image_path.exists():
        print(f"Error: image file not found: {image_path}")
        return 1

    recognition = asyncio.run(recognize_product(str(image_path), _ocr_client(args.ocr_url)))
    _print_json(asdict(recognition))
    return 0
