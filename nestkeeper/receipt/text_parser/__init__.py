"""Composable receipt text candidate parsers."""

from .common import PatternStrategy, collect_candidates, split_lines
from .dates_parser import DATE_STRATEGIES, numeric_date, parse_date_candidates
from .names_parser import PRODUCT_STRATEGIES, parse_product_candidates, parse_store_candidates, store_strategies
from .prices_parser import PRICE_STRATEGIES, parse_amount, parse_price_candidates

__all__ = [
    "DATE_STRATEGIES",
    "PRICE_STRATEGIES",
    "PRODUCT_STRATEGIES",
    "PatternStrategy",
    "collect_candidates",
    "numeric_date",
    "parse_amount",
    "parse_date_candidates",
    "parse_price_candidates",
    "parse_product_candidates",
    "parse_store_candidates",
    "split_lines",
    "store_strategies",
]
