"""Data models for receipt text extraction."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any, Generic, Literal, TypeVar

T = TypeVar("T")

ExtractionStatus = Literal["succeeded", "failed"]


@dataclass(frozen=True)
class RawCandidate(Generic[T]):
    """One recognized occurrence of a field value, before ranking."""

    raw_text: str
    parsed_value: T


@dataclass(frozen=True)
class OCRText:
    """Text recovered by an OCR engine plus its overall confidence (0-100)."""

    text: str
    confidence: int


@dataclass
class ExtractionResult:
    """Structured fields recovered from one receipt's OCR text."""

    text: str = ""
    confidence: int = 0
    purchase_date: date | None = None
    purchase_price: Decimal | None = None
    warranty_expiration: date | None = None
    store_name: str | None = None
    product_name: str | None = None
    dates: list[RawCandidate[date]] = field(default_factory=list)
    prices: list[RawCandidate[Decimal]] = field(default_factory=list)
    stores: list[str] = field(default_factory=list)
    products: list[str] = field(default_factory=list)
    error: str | None = None

    @classmethod
    def failed(cls, error: str) -> "ExtractionResult":
        """Build the empty result returned when the pipeline fails."""
        return cls(error=error)

    @property
    def status(self) -> ExtractionStatus:
        return "failed" if self.error is not None else "succeeded"

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready view (ISO dates, decimal strings)."""

        def _iso(value: date | None) -> str | None:
            return value.isoformat() if value is not None else None

        return {
            "status": self.status,
            "text": self.text,
            "confidence": self.confidence,
            "purchase_date": _iso(self.purchase_date),
            "purchase_price": str(self.purchase_price) if self.purchase_price is not None else None,
            "warranty_expiration": _iso(self.warranty_expiration),
            "store_name": self.store_name,
            "product_name": self.product_name,
            "dates": [{"raw": c.raw_text, "parsed": c.parsed_value.isoformat()} for c in self.dates],
            "prices": [{"raw": c.raw_text, "parsed": str(c.parsed_value)} for c in self.prices],
            "stores": list(self.stores),
            "products": list(self.products),
            "error": self.error,
        }


@dataclass(frozen=True)
class ProductRecognition:
    """Brand and product type recognized from a product photo."""

    brand: str | None
    product_name: str | None
    confidence: int
    text: str
