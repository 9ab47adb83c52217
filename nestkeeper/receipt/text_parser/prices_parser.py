"""Price candidate recognition and normalization."""

import re
from collections.abc import Sequence
from decimal import Decimal, InvalidOperation

from nestkeeper.domain.receipt import RawCandidate

from .common import PatternStrategy, collect_candidates

CENTS = Decimal("0.01")

# Digits with optional thousands separators and exactly two decimals
_AMOUNT = r"(\d[\d,]*\.\d{2})(?!\d)"


def parse_amount(raw: str) -> Decimal | None:
    """Normalize a currency string to a positive two-decimal amount."""
    cleaned = re.sub(r"[$,\s]", "", raw)
    try:
        amount = Decimal(cleaned)
        if not amount.is_finite() or amount <= 0:
            return None
        return amount.quantize(CENTS)
    except InvalidOperation:
        return None


def _amount(match: re.Match[str]) -> Decimal | None:
    return parse_amount(match.group(1))


PRICE_STRATEGIES: tuple[PatternStrategy[Decimal], ...] = (
    PatternStrategy(
        "labeled_total",
        re.compile(r"(?:total|amount|paid|purchase|price)[\s:]*\$?\s*" + _AMOUNT, re.IGNORECASE),
        _amount,
    ),
    PatternStrategy(
        "labeled_subtotal",
        re.compile(r"(?:subtotal|sub[\s-]?total)[\s:]*\$?\s*" + _AMOUNT, re.IGNORECASE),
        _amount,
    ),
    PatternStrategy("dollar_amount", re.compile(r"\$\s*" + _AMOUNT), _amount),
)


def parse_price_candidates(lines: Sequence[str]) -> tuple[RawCandidate[Decimal], ...]:
    """Find every currency-like amount, in line order then strategy order."""
    return collect_candidates(lines, PRICE_STRATEGIES)
