from datetime import date

from nestkeeper.receipt.warranty import warranty_expiration


def test_default_warranty_is_one_year() -> None:
    assert warranty_expiration(date(2025, 11, 12)) == date(2026, 11, 12)


def test_multi_year_warranty() -> None:
    assert warranty_expiration(date(2024, 1, 31), years=3) == date(2027, 1, 31)


def test_leap_day_rolls_to_march_first() -> None:
    assert warranty_expiration(date(2024, 2, 29)) == date(2025, 3, 1)
    assert warranty_expiration(date(2024, 2, 29), years=4) == date(2028, 2, 29)


def test_missing_purchase_date() -> None:
    assert warranty_expiration(None) is None


def test_unconstructible_dates_give_none() -> None:
    assert warranty_expiration(date(9999, 6, 1)) is None
    assert warranty_expiration(date(2025, 1, 1), years=10**20) is None
    assert warranty_expiration(date(2025, 6, 1), years="soon") is None  # type: ignore[arg-type]
