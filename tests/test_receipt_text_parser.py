from datetime import date
from decimal import Decimal

from nestkeeper.receipt.text_parser import (
    numeric_date,
    parse_amount,
    parse_date_candidates,
    parse_price_candidates,
    parse_product_candidates,
    parse_store_candidates,
    split_lines,
)


def _values(candidates) -> list:
    return [c.parsed_value for c in candidates]


def test_split_lines_drops_blank_lines_and_trims() -> None:
    assert split_lines("  HOME DEPOT \n\n   \n11/12/2025\r\n") == ["HOME DEPOT", "11/12/2025"]


def test_labeled_and_bare_date_both_fire_on_one_line() -> None:
    candidates = parse_date_candidates(["Date: 11/12/2025"])

    assert [c.raw_text for c in candidates] == ["Date: 11/12/2025", "11/12/2025"]
    assert _values(candidates) == [date(2025, 11, 12), date(2025, 11, 12)]


def test_four_digit_last_group_is_month_first() -> None:
    assert _values(parse_date_candidates(["03/04/2025"])) == [date(2025, 3, 4)]


def test_iso_order_date() -> None:
    assert _values(parse_date_candidates(["2025-11-12"])) == [date(2025, 11, 12)]
    assert _values(parse_date_candidates(["2024/2/9"])) == [date(2024, 2, 9)]


def test_month_name_dates() -> None:
    assert _values(parse_date_candidates(["Nov 12, 2025"])) == [date(2025, 11, 12)]
    assert _values(parse_date_candidates(["purchased on SEPTEMBER 3 2024"])) == [date(2024, 9, 3)]


def test_two_digit_year_century_expansion() -> None:
    assert _values(parse_date_candidates(["11/12/25"])) == [date(2025, 11, 12)]
    assert _values(parse_date_candidates(["01/01/49"])) == [date(2049, 1, 1)]
    assert _values(parse_date_candidates(["01/01/50"])) == [date(1950, 1, 1)]


def test_day_first_dates_are_dropped_not_reinterpreted() -> None:
    assert parse_date_candidates(["13/05/2025"]) == ()


def test_invalid_calendar_dates_are_dropped() -> None:
    assert parse_date_candidates(["02/30/2024", "Feb 31, 2024"]) == ()


def test_numeric_date_policy() -> None:
    assert numeric_date("2025", "11", "12") == date(2025, 11, 12)
    assert numeric_date("11", "12", "2025") == date(2025, 11, 12)
    assert numeric_date("11", "12", "99") == date(1999, 11, 12)
    assert numeric_date("2025", "13", "01") is None


def test_date_candidates_keep_line_then_strategy_order() -> None:
    lines = ["Purchased 01/05/2024", "Return by 02/04/2024"]

    candidates = parse_date_candidates(lines)

    assert [c.raw_text for c in candidates] == ["Purchased 01/05/2024", "01/05/2024", "02/04/2024"]


def test_parse_amount_normalization() -> None:
    assert parse_amount("$ 1,234.5") == Decimal("1234.50")
    assert parse_amount("394.39") == Decimal("394.39")
    assert parse_amount("0.00") is None
    assert parse_amount("NaN") is None
    assert parse_amount("abc") is None


def test_labeled_total_and_dollar_amount() -> None:
    candidates = parse_price_candidates(["Total: $1,234.56"])

    assert [c.raw_text for c in candidates] == ["Total: $1,234.56", "$1,234.56"]
    assert _values(candidates) == [Decimal("1234.56"), Decimal("1234.56")]


def test_subtotal_line_fires_total_and_subtotal_strategies() -> None:
    candidates = parse_price_candidates(["Sub Total 12.00"])

    assert [c.raw_text for c in candidates] == ["Total 12.00", "Sub Total 12.00"]
    assert _values(candidates) == [Decimal("12.00"), Decimal("12.00")]


def test_prices_need_exactly_two_decimals() -> None:
    assert parse_price_candidates(["$12.345", "Price $5", "Amount 7.5"]) == ()


def test_zero_amount_is_discarded() -> None:
    assert parse_price_candidates(["Total: $0.00"]) == ()


def test_known_retailer_keeps_source_text() -> None:
    candidates = parse_store_candidates(["HOME DEPOT", "11/12/2025"])

    assert _values(candidates) == ["HOME DEPOT"]


def test_hyphenated_retailer_fragment() -> None:
    assert _values(parse_store_candidates(["Williams-Sonoma #233"])) == ["Williams-Sonoma"]


def test_store_label_and_corporate_suffix() -> None:
    assert _values(parse_store_candidates(["Store: Corner Hardware"])) == ["Corner Hardware"]
    assert _values(parse_store_candidates(["Acme Hardware Inc"])) == ["Acme Hardware"]


def test_short_store_names_are_discarded() -> None:
    assert parse_store_candidates(["Shop: AB"]) == ()


def test_configured_retailers_are_recognized() -> None:
    candidates = parse_store_candidates(["Bob's Appliance  Barn 555-1234"], known_retailers=["Appliance Barn"])

    assert _values(candidates) == ["Appliance  Barn"]


def test_product_name_before_price() -> None:
    assert _values(parse_product_candidates(["KitchenAid Stand Mixer $394.39"])) == ["KitchenAid Stand Mixer"]


def test_product_names_before_each_price_on_a_line() -> None:
    candidates = parse_product_candidates(["Desk Fan $10.00 Lamp Shade $5.00"])

    assert _values(candidates) == ["Desk Fan", "Lamp Shade"]


def test_product_label() -> None:
    assert _values(parse_product_candidates(["Item: Blender 2000"])) == ["Blender 2000"]


def test_short_product_names_are_discarded() -> None:
    assert parse_product_candidates(["Item: X", "Fan $10.00"]) == ()


def test_total_line_is_not_a_product() -> None:
    assert parse_product_candidates(["Total: $394.39"]) == ()


def test_amount_beyond_decimal_precision_is_dropped() -> None:
    huge = "9" * 29 + ".99"

    assert parse_amount(huge) is None
    candidates = parse_price_candidates([f"Ref ${huge}", "Total: $394.39"])
    assert _values(candidates) == [Decimal("394.39"), Decimal("394.39")]
