"""Date candidate recognition and normalization.

Numeric dates follow a fixed US ordering policy: a four-digit first group is
year-month-day, a four-digit last group is month/day/year, and anything else
is month/day/two-digit-year. Day/month order is never inferred from content,
so ``13/05/2025`` is dropped rather than read as 13 May.
"""

import re
from collections.abc import Sequence
from datetime import date

from nestkeeper.domain.receipt import RawCandidate

from .common import PatternStrategy, collect_candidates

MONTHS = {
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "may": 5,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
}

# Two-digit years below this pivot are 20xx, the rest 19xx
CENTURY_PIVOT = 50


def expand_two_digit_year(year: int) -> int:
    return 2000 + year if year < CENTURY_PIVOT else 1900 + year


def numeric_date(first: str, second: str, third: str) -> date | None:
    """Build a date from three numeric groups using the fixed ordering policy."""
    try:
        if len(first) == 4:
            return date(int(first), int(second), int(third))
        if len(third) == 4:
            return date(int(third), int(first), int(second))
        return date(expand_two_digit_year(int(third)), int(first), int(second))
    except ValueError:
        return None


def month_name_date(month_name: str, day: str, year: str) -> date | None:
    month = MONTHS.get(month_name[:3].lower())
    if month is None:
        return None
    try:
        return date(int(year), month, int(day))
    except ValueError:
        return None


def _numeric(match: re.Match[str]) -> date | None:
    return numeric_date(*match.groups())


def _month_name(match: re.Match[str]) -> date | None:
    return month_name_date(*match.groups())


DATE_STRATEGIES: tuple[PatternStrategy[date], ...] = (
    PatternStrategy(
        "labeled_numeric",
        re.compile(r"(?:date|purchased|sold|transaction)[\s:]*(\d{1,2})[/-](\d{1,2})[/-](\d{4})", re.IGNORECASE),
        _numeric,
    ),
    PatternStrategy("month_day_year", re.compile(r"(\d{1,2})[/-](\d{1,2})[/-](\d{4})"), _numeric),
    PatternStrategy("year_month_day", re.compile(r"(\d{4})[/-](\d{1,2})[/-](\d{1,2})"), _numeric),
    PatternStrategy(
        "month_name",
        re.compile(r"(Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)[a-z]*[\s,]+(\d{1,2})[\s,]+(\d{4})", re.IGNORECASE),
        _month_name,
    ),
    PatternStrategy("two_digit_year", re.compile(r"(?<!\d)(\d{1,2})[/-](\d{1,2})[/-](\d{2})(?!\d)"), _numeric),
)


def parse_date_candidates(lines: Sequence[str]) -> tuple[RawCandidate[date], ...]:
    """Find every date-like substring, in line order then strategy order."""
    return collect_candidates(lines, DATE_STRATEGIES)
