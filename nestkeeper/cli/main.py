#!/usr/bin/env python3

import argparse
from collections.abc import Sequence

from nestkeeper.cli.receipt import cmd_extract, cmd_match, cmd_recognize, cmd_scan


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Home inventory receipt and matching utilities",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  extract <text-file>        Extract receipt fields from saved OCR text
  scan <image>               OCR a receipt image and extract its fields
  match <query> <inventory>  Find an existing inventory item for a name
  recognize <image>          Identify brand and product type in a photo

Configuration:
  config/settings.toml   = warranty years, match threshold, OCR service
  config/retailers.toml  = extra known retailer names
""",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    extract_parser = subparsers.add_parser("extract", help="Extract receipt fields from saved OCR text")
    extract_parser.add_argument("text_file", help="Path to a UTF-8 file with OCR text")
    extract_parser.add_argument(
        "--confidence", type=int, default=100, help="OCR confidence to record (0-100, default: 100)"
    )

    scan_parser = subparsers.add_parser("scan", help="OCR a receipt image and extract its fields")
    scan_parser.add_argument("image", help="Path to receipt image")
    scan_parser.add_argument("--ocr-url", default=None, help="OCR service URL (default: from settings)")

    match_parser = subparsers.add_parser("match", help="Find an existing inventory item for a name")
    match_parser.add_argument("query", help="Product name or OCR text to look up")
    match_parser.add_argument("inventory", help="Inventory TOML file with [[items]] id/name entries")
    match_parser.add_argument(
        "--ocr-text", action="store_true", help="Treat the query as a whole OCR text blob"
    )

    recognize_parser = subparsers.add_parser("recognize", help="Identify brand and product type in a photo")
    recognize_parser.add_argument("image", help="Path to product photo")
    recognize_parser.add_argument("--ocr-url", default=None, help="OCR service URL (default: from settings)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "extract": cmd_extract,
        "scan": cmd_scan,
        "match": cmd_match,
        "recognize": cmd_recognize,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    raise SystemExit(main())
