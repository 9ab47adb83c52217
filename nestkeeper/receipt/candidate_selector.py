"""Candidate deduplication and per-field selection.

Selection policy:
- Date: the most recent parsed date (transaction dates tend to be the latest
  date printed on a receipt).
- Price: the largest amount (the grand total is the largest dollar figure).
- Store and product: the first candidate in line order (merchant names sit at
  the top of a receipt).

Dates and prices are ranked with a stable descending sort and deduplicated
afterwards, so the kept lists are in ranking order and their first entry is
the selected value. Names keep discovery order.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import TypeVar

from nestkeeper.domain.receipt import RawCandidate

T = TypeVar("T")


@dataclass(frozen=True)
class CandidateSelection:
    """Deduplicated candidates plus the chosen value for each field."""

    dates: tuple[RawCandidate[date], ...]
    prices: tuple[RawCandidate[Decimal], ...]
    stores: tuple[str, ...]
    products: tuple[str, ...]
    purchase_date: date | None
    purchase_price: Decimal | None
    store_name: str | None
    product_name: str | None


def dedupe_by_value(candidates: Sequence[RawCandidate[T]]) -> tuple[RawCandidate[T], ...]:
    """Keep the first candidate seen for each parsed value, preserving order."""
    seen: dict[T, RawCandidate[T]] = {}
    for candidate in candidates:
        seen.setdefault(candidate.parsed_value, candidate)
    return tuple(seen.values())


def dedupe_names(names: Sequence[str]) -> tuple[str, ...]:
    """Drop exact-duplicate names, preserving first-seen order."""
    return tuple(dict.fromkeys(names))


def rank_descending(candidates: Sequence[RawCandidate[T]]) -> tuple[RawCandidate[T], ...]:
    """Order candidates by parsed value, largest first; ties keep discovery order."""
    return tuple(sorted(candidates, key=lambda c: c.parsed_value, reverse=True))  # type: ignore[arg-type, return-value]


def select_candidates(
    dates: Sequence[RawCandidate[date]],
    prices: Sequence[RawCandidate[Decimal]],
    stores: Sequence[RawCandidate[str]],
    products: Sequence[RawCandidate[str]],
) -> CandidateSelection:
    """Reduce each field's candidates to a deduplicated list and one best value."""
    ranked_dates = dedupe_by_value(rank_descending(dates))
    ranked_prices = dedupe_by_value(rank_descending(prices))
    store_names = dedupe_names([c.parsed_value for c in stores])
    product_names = dedupe_names([c.parsed_value for c in products])

    return CandidateSelection(
        dates=ranked_dates,
        prices=ranked_prices,
        stores=store_names,
        products=product_names,
        purchase_date=ranked_dates[0].parsed_value if ranked_dates else None,
        purchase_price=ranked_prices[0].parsed_value if ranked_prices else None,
        store_name=store_names[0] if store_names else None,
        product_name=product_names[0] if product_names else None,
    )
