"""Receipt field extraction and inventory matching for a home-inventory app."""

__version__ = "0.1.0"
