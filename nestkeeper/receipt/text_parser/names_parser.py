"""Store and product name heuristics."""

import re
from collections.abc import Sequence

from nestkeeper.domain.receipt import RawCandidate

from .common import PatternStrategy, bounded_name, collect_candidates

STORE_NAME_MIN_LENGTH = 3
STORE_NAME_MAX_LENGTH = 50
PRODUCT_NAME_MIN_LENGTH = 4
PRODUCT_NAME_MAX_LENGTH = 100

MAJOR_RETAILERS = re.compile(
    r"walmart|target|costco|best\s*buy|home\s*depot|lowes|kroger|safeway",
    re.IGNORECASE,
)
HOME_AND_ONLINE_RETAILERS = re.compile(
    r"amazon|ebay|ikea|wayfair|williams[\s-]?sonoma",
    re.IGNORECASE,
)


def _store_from_whole_match(match: re.Match[str]) -> str | None:
    return bounded_name(match.group(0), STORE_NAME_MIN_LENGTH, STORE_NAME_MAX_LENGTH)


def _store_from_group(match: re.Match[str]) -> str | None:
    return bounded_name(match.group(1), STORE_NAME_MIN_LENGTH, STORE_NAME_MAX_LENGTH)


def _product_from_group(match: re.Match[str]) -> str | None:
    return bounded_name(match.group(1), PRODUCT_NAME_MIN_LENGTH, PRODUCT_NAME_MAX_LENGTH)


def known_retailer_pattern(keywords: Sequence[str]) -> re.Pattern[str] | None:
    """Compile user-configured retailer keywords; spaces match any whitespace run."""
    parts = [r"\s*".join(re.escape(word) for word in keyword.split()) for keyword in keywords if keyword.strip()]
    if not parts:
        return None
    # Longer keywords first so "Best Buy Mobile" wins over "Best Buy"
    parts.sort(key=len, reverse=True)
    return re.compile("|".join(parts), re.IGNORECASE)


def store_strategies(known_retailers: Sequence[str] = ()) -> tuple[PatternStrategy[str], ...]:
    """Return the store strategies, with configured retailers after the built-in lists."""
    strategies: list[PatternStrategy[str]] = [
        PatternStrategy("major_retailer", MAJOR_RETAILERS, _store_from_whole_match),
        PatternStrategy("home_and_online_retailer", HOME_AND_ONLINE_RETAILERS, _store_from_whole_match),
    ]
    configured = known_retailer_pattern(known_retailers)
    if configured is not None:
        strategies.append(PatternStrategy("configured_retailer", configured, _store_from_whole_match))
    strategies.extend(
        [
            PatternStrategy(
                "store_label",
                re.compile(r"(?:store|shop|market|mart)[\s:]*([A-Za-z0-9\s&']+)", re.IGNORECASE),
                _store_from_group,
            ),
            PatternStrategy(
                "corporate_suffix",
                re.compile(r"([A-Z][A-Za-z\s&']+)\s+(?i:inc|llc|corp|store|shop)"),
                _store_from_group,
            ),
        ]
    )
    return tuple(strategies)


PRODUCT_STRATEGIES: tuple[PatternStrategy[str], ...] = (
    PatternStrategy(
        "product_label",
        re.compile(r"(?:item|product|description)[\s:]*([A-Za-z0-9\s\-']+)", re.IGNORECASE),
        _product_from_group,
    ),
    PatternStrategy(
        "name_before_price",
        re.compile(r"(?<![A-Za-z0-9\-'])([A-Z][A-Za-z0-9\s\-']+?)\s+\$\d"),
        _product_from_group,
        multi_match=True,
    ),
)


def parse_store_candidates(
    lines: Sequence[str], known_retailers: Sequence[str] = ()
) -> tuple[RawCandidate[str], ...]:
    """Find merchant-name candidates, in line order then strategy order."""
    return collect_candidates(lines, store_strategies(known_retailers))


def parse_product_candidates(lines: Sequence[str]) -> tuple[RawCandidate[str], ...]:
    """Find item-name candidates, in line order then strategy order."""
    return collect_candidates(lines, PRODUCT_STRATEGIES)
