"""Warranty expiration date helpers."""

from datetime import date

DEFAULT_WARRANTY_YEARS = 1


def _leap_day_rollover(purchase_date: date, target_year: int) -> date | None:
    if (purchase_date.month, purchase_date.day) != (2, 29):
        return None
    try:
        return date(target_year, 3, 1)
    except ValueError:
        return None


def warranty_expiration(purchase_date: date | None, years: int = DEFAULT_WARRANTY_YEARS) -> date | None:
    """Return purchase_date plus whole calendar years, or None.

    A Feb 29 purchase rolls over to Mar 1 when the target year is not a leap
    year. Any date that cannot be constructed (e.g. past year 9999) gives None.
    """
    if purchase_date is None:
        return None
    try:
        target_year = purchase_date.year + int(years)
    except (TypeError, ValueError):
        return None
    try:
        return purchase_date.replace(year=target_year)
    except OverflowError:
        return None
    except ValueError:
        return _leap_day_rollover(purchase_date, target_year)
