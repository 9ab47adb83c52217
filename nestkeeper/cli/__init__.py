"""Unified command-line interface for the nestkeeper project.

Usage:
    nk extract <text-file> [--confidence N]
    nk scan <image> [--ocr-url URL]
    nk match <query> <inventory.toml> [--ocr-text]
    nk recognize <image> [--ocr-url URL]
"""
